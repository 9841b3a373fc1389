import pytest

from workbench.largest import human_size, largest_files, main, walk


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.bin").write_bytes(b"x" * 10)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"x" * 3000)
    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "c.bin").write_bytes(b"x" * 500)
    (tmp_path / "empty").mkdir()
    return tmp_path


def test_walk_finds_every_regular_file(tree):
    found = {path: size for path, size in walk(tree)}
    assert found == {
        str(tree / "a.bin"): 10,
        str(tree / "sub" / "b.bin"): 3000,
        str(tree / "sub" / "deeper" / "c.bin"): 500,
    }


def test_walk_single_file(tree):
    assert list(walk(tree / "a.bin")) == [(str(tree / "a.bin"), 10)]


def test_walk_missing_path_raises(tmp_path):
    with pytest.raises(OSError):
        list(walk(tmp_path / "missing"))


def test_largest_files_sorted_descending(tree):
    sizes = [size for _, size in largest_files(tree)]
    assert sizes == sorted(sizes, reverse=True)
    assert len(sizes) == 3


def test_largest_files_limit(tree):
    result = largest_files(tree, 2)
    assert [size for _, size in result] == [3000, 500]


def test_largest_files_nonpositive_limit_keeps_all(tree):
    assert len(largest_files(tree, 0)) == 3
    assert len(largest_files(tree, -1)) == 3


def test_human_size_units():
    assert human_size(1024) == "1024 "
    assert human_size(1025) == "1K"
    assert human_size(1024 * 1024) == "1024K"
    assert human_size(1024 * 1024 + 1).endswith("M")


def test_main_lists_with_limit(tree, capsys):
    assert main(["-l", "1", str(tree)]) == 0
    out = capsys.readouterr().out
    assert out == f"2K\t{tree / 'sub' / 'b.bin'}\n"


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "[-l <num>]" in capsys.readouterr().out


def test_main_without_path(capsys):
    assert main(["-l", "3"]) == 0
    assert capsys.readouterr().out.startswith("Expected path\n")


def test_main_missing_path(tmp_path, capsys):
    assert main([str(tmp_path / "nothing")]) == 0
    assert "访问文件出错了" in capsys.readouterr().out


def test_main_unknown_encoding(tree, capsys):
    assert main(["-c", "no-such-coding", str(tree)]) == 0
    assert "不支持编码转换" in capsys.readouterr().out