from workbench.asciionly import main, strip_non_ascii


def test_replaces_high_bytes_with_spaces():
    assert strip_non_ascii("a中b".encode("utf-8")) == b"a   b"


def test_drops_carriage_returns():
    assert strip_non_ascii(b"one\r\ntwo\r\n") == b"one\ntwo\n"


def test_ascii_is_unchanged():
    data = bytes(b for b in range(128) if b != 13)
    assert strip_non_ascii(data) == data


def test_output_is_ascii_and_same_length_without_cr():
    data = bytes(range(256))
    result = strip_non_ascii(data)
    assert len(result) == 255
    assert all(b < 128 for b in result)


def test_main_prints_file(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_bytes("hi\r\n\xe9t\xe9".encode("latin-1"))
    assert main([str(src)]) == 0
    assert capsys.readouterr().out == "hi\n t "


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 0
    assert capsys.readouterr().out.startswith("Open file error\n")


def test_main_wrong_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("usage: \n")