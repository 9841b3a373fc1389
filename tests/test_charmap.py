import pytest

from workbench.charmap import (
    is_printable,
    is_single_width,
    main,
    parse_section,
    render_section,
    symbol_sections,
    unicode_bytes,
)


def test_printable():
    assert is_printable(ord("A"))
    assert not is_printable(0x7F)
    assert not is_printable(0x1F)


def test_single_width():
    assert is_single_width(ord("A"))
    assert is_single_width(0x2500)
    assert is_single_width(0x1D400)
    assert not is_single_width(0x4E00)


@pytest.mark.parametrize("text,value", [("ff", 255), ("FF", 255), ("0", 0), ("1a", 26)])
def test_parse_section(text, value):
    assert parse_section(text) == value


@pytest.mark.parametrize("text", ["100", "zz", "-1", "1f4"])
def test_parse_section_rejects(text):
    with pytest.raises(ValueError):
        parse_section(text)


def test_render_section_shape():
    text = render_section(0)
    assert text.count("\n") == 18
    assert text.count("\033[0;30;42m") == 256
    assert "A " in text
    assert text.count("？") == 33


def test_render_wide_characters_have_no_padding():
    text = render_section(0x4E)
    assert "一\033[0m" in text


def test_render_out_of_range_is_placeholder():
    text = render_section(0xD8)
    assert text.count("？") == 256


def test_unicode_bytes():
    assert unicode_bytes("A") == b"\xff\xfeA\x00"
    assert unicode_bytes("A" * 200)[:2] == b"\xff\xfe"
    assert len(unicode_bytes("A" * 200)) <= 100
    assert unicode_bytes("中文")[2:].decode("utf-16-le") == "中文"


def test_symbol_sections():
    groups = dict(symbol_sections())
    assert groups["表情"] == [0x1F4, 0x1F5, 0x1F6, 0x1F7]
    assert groups["Miscellaneous Symbols"] == list(range(0x21, 0x28))


def test_main_single_section(capsys):
    assert main(["-d", "3"]) == 0
    assert capsys.readouterr().out == render_section(3)


def test_main_bad_section(capsys):
    assert main(["-d", "xyz"]) == 0
    assert "wrong number" in capsys.readouterr().out


def test_main_bytes(capsys):
    assert main(["-t", "A"]) == 0
    assert capsys.readouterr().out == "UNICODE:0xff 0xfe 0x41 0x0 \n"