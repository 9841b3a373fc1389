import io

from workbench.gbk2utf8 import convert_bytes, convert_file, main


def test_valid_text_round_trip():
    text = "中文 text 混合"
    assert convert_bytes(text.encode("gbk")) == (text, [])


def test_empty_input():
    assert convert_bytes(b"") == ("", [])


def test_invalid_byte_skipped_automatically():
    data = b"ab\xff" + "中".encode("gbk")
    assert convert_bytes(data) == ("ab中", [2])


def test_truncated_sequence_at_end():
    data = b"ab" + "中".encode("gbk")[:1]
    assert convert_bytes(data) == ("ab", [2])


def test_ask_can_reject_a_skip():
    calls = []

    def ask(position, skip, preview):
        calls.append((position, skip, preview))
        return skip >= 2

    text, errors = convert_bytes(b"\xffxyz", ask)
    assert text == "yz"
    assert errors == [0]
    assert calls == [(0, 1, "xyz"), (0, 2, "yz")]


def test_convert_file(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes("你好\n".encode("gbk") + b"\xff!")
    assert convert_file(source, target) == [5]
    assert target.read_bytes() == "你好\n!".encode("utf-8")


def test_main_converts(tmp_path, monkeypatch):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_bytes(b"ok\xffgo")
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "okgo"


def test_main_usage(capsys):
    assert main(["only-one"]) == 1
    assert "gbk2utf8 <src> <dst>" in capsys.readouterr().out


def test_main_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "none"), str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out").exists()
    assert "none" in capsys.readouterr().out