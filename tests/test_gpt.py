import struct

import pytest

from workbench.gpt import GptEntry, GptHeader, format_report, main, read_gpt

SIGNATURE = struct.unpack("<Q", b"EFI PART")[0]
DISK_GUID = bytes(range(16))
TYPE_GUID = bytes(range(16, 32))
UNIQUE_GUID = bytes(range(32, 48))


def _header(entries=4, size=128, lba=2):
    return struct.pack(
        "<QIIIIQQQQ16sQIII",
        SIGNATURE, 0x10000, 92, 0xABCD, 0, 1, 99, 34, 90,
        DISK_GUID, lba, entries, size, 0x1234,
    )


def _entry(type_guid, name, start=34, end=60):
    raw = name.encode("utf-16-le").ljust(72, b"\x00")
    return struct.pack("<16s16sQQQ72s", type_guid, UNIQUE_GUID, start, end, 0, raw)


def _image(tmp_path):
    data = bytearray(1024)
    data[512:512 + 92] = _header()
    data += _entry(TYPE_GUID, "boot")
    data += _entry(bytes(16), "")
    data += _entry(TYPE_GUID, "数据", 61, 90)
    data += _entry(bytes(16), "")
    path = tmp_path / "disk.img"
    path.write_bytes(bytes(data))
    return path


def test_header_parse_round_trip():
    header = GptHeader.parse(_header())
    assert header.signature == SIGNATURE
    assert header.disk_guid == DISK_GUID
    assert header.number_of_partition_entries == 4
    assert header.partition_entry_array_crc32 == 0x1234


def test_header_too_short():
    with pytest.raises(ValueError):
        GptHeader.parse(b"\x00" * 91)


def test_entry_parse():
    entry = GptEntry.parse(_entry(TYPE_GUID, "boot", 5, 9))
    assert entry.name == "boot"
    assert (entry.start_lba, entry.end_lba) == (5, 9)
    assert entry.is_used()
    assert not GptEntry.parse(_entry(bytes(16), "x")).is_used()


def test_read_gpt(tmp_path):
    header, entries = read_gpt(_image(tmp_path))
    assert len(entries) == header.number_of_partition_entries
    assert [e.is_used() for e in entries] == [True, False, True, False]
    assert entries[2].name == "数据"


def test_truncated_entries(tmp_path):
    path = tmp_path / "short.img"
    data = bytearray(1024)
    data[512:512 + 92] = _header()
    path.write_bytes(bytes(data))
    with pytest.raises(ValueError):
        read_gpt(path)


def test_report(tmp_path):
    header, entries = read_gpt(_image(tmp_path))
    text = format_report(header, entries)
    assert text.startswith("signature:5452415020494645\n")
    assert f"disk GUID:{DISK_GUID.hex()}\n" in text
    assert "partition 0\n" in text
    assert "partition 2\n" in text
    assert "partition 1\n" not in text
    assert "partition name:boot\n" in text


def test_main_without_argument(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "GPT description\nblock device or file must be provided!\n"
    )


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.img")]) == 1
    assert "open file error" in capsys.readouterr().out


def test_main_report(tmp_path, capsys):
    path = _image(tmp_path)
    assert main([str(path)]) == 0
    header, entries = read_gpt(path)
    assert capsys.readouterr().out == "GPT description\n" + format_report(header, entries)