"""Reader for GUID partition tables in disk images or block devices."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass

SECTOR = 512
_HEADER = struct.Struct("<QIIIIQQQQ16sQIII")
_ENTRY = struct.Struct("<16s16sQQQ72s")


@dataclass(frozen=True)
class GptHeader:
    signature: int
    revision: int
    header_size: int
    header_crc32: int
    reserved: int
    my_lba: int
    alternate_lba: int
    first_usable_lba: int
    last_usable_lba: int
    disk_guid: bytes
    partition_entry_lba: int
    number_of_partition_entries: int
    size_of_partition_entry: int
    partition_entry_array_crc32: int

    @classmethod
    def parse(cls, data: bytes) -> GptHeader:
        if len(data) < _HEADER.size:
            raise ValueError(f"GPT header needs {_HEADER.size} bytes, got {len(data)}")
        return cls(*_HEADER.unpack_from(data))


@dataclass(frozen=True)
class GptEntry:
    type_guid: bytes
    unique_guid: bytes
    start_lba: int
    end_lba: int
    attributes: int
    name: str

    @classmethod
    def parse(cls, data: bytes) -> GptEntry:
        if len(data) < _ENTRY.size:
            raise ValueError(f"partition entry needs {_ENTRY.size} bytes, got {len(data)}")
        type_guid, unique_guid, start, end, attributes, raw_name = _ENTRY.unpack_from(data)
        name = raw_name.decode("utf-16-le", errors="replace").split("\x00", 1)[0]
        return cls(type_guid, unique_guid, start, end, attributes, name)

    def is_used(self) -> bool:
        return any(self.type_guid)


def read_gpt(path) -> tuple[GptHeader, list[GptEntry]]:
    """Read the primary GPT header at LBA 1 and its partition entry array."""
    with open(path, "rb") as disk:
        disk.seek(SECTOR)
        header = GptHeader.parse(disk.read(_HEADER.size))
        stride = header.size_of_partition_entry
        if stride < _ENTRY.size:
            raise ValueError(f"partition entry size {stride} is too small")
        total = header.number_of_partition_entries * stride
        disk.seek(header.partition_entry_lba * SECTOR)
        data = disk.read(total)
    if len(data) < total:
        raise ValueError("partition entry array is truncated")
    entries = [GptEntry.parse(data[off:off + stride]) for off in range(0, total, stride)]
    return header, entries


def format_report(header: GptHeader, entries: list[GptEntry]) -> str:
    """Describe the header and every used partition entry."""
    lines = [
        f"signature:{header.signature:x}",
        f"revision:{header.revision:x}",
        f"header size:{header.header_size}",
        f"header crc32:{header.header_crc32:x}",
        f"reserved:{header.reserved:x}",
        f"my lba:{header.my_lba}",
        f"alternate lba:{header.alternate_lba}",
        f"first_usable_lba:{header.first_usable_lba}",
        f"last usable lba:{header.last_usable_lba}",
        f"disk GUID:{header.disk_guid.hex()}",
        f"partition entry lba:{header.partition_entry_lba}",
        f"number of partition entries:{header.number_of_partition_entries}",
        f"size of partition entry:{header.size_of_partition_entry}",
        f"partition entry array crc32:{header.partition_entry_array_crc32:x}",
    ]
    for index, entry in enumerate(entries):
        if not entry.is_used():
            continue
        lines += [
            "=================================================",
            f"partition {index}",
            f"start lba:{entry.start_lba}",
            f"end lba:{entry.end_lba}",
            f"  partition type guid:{entry.type_guid.hex()}",
            f"unique partition guid:{entry.unique_guid.hex()}",
            f"partition name:{entry.name}",
        ]
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    out.write("GPT description\n")
    if not args:
        out.write("block device or file must be provided!\n")
        return 0
    try:
        header, entries = read_gpt(args[0])
    except OSError:
        out.write("open file error\n")
        return 1
    except ValueError as err:
        out.write(f"{err}\n")
        return 1
    out.write(format_report(header, entries))
    return 0