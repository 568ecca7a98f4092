"""
12-byte XID layout, big-endian:

    0..4   timestamp    seconds since Unix epoch
    4..7   machine tag  host name hash
    7..9   process tag  pid & 0xFFFF
    9..12  counter      24-bit, wraps
"""

import struct
from collections import namedtuple

RAW_LEN = 12
TIMESTAMP_MASK = 0xFFFFFFFF
PROCESS_MASK = 0xFFFF
COUNTER_MASK = 0xFFFFFF

_HEAD = struct.Struct(">I3sH")

Fields = namedtuple("Fields", ("timestamp", "machine_tag", "process_tag", "counter"))


def pack(timestamp, machine_tag, process_tag, counter):
    head = _HEAD.pack(timestamp & TIMESTAMP_MASK, bytes(machine_tag), process_tag & PROCESS_MASK)
    return head + (counter & COUNTER_MASK).to_bytes(3, "big")


def unpack(data):
    """Split a 12-byte payload into its fields. Length is the caller's job."""
    timestamp, machine_tag, process_tag = _HEAD.unpack_from(data)
    return Fields(timestamp, machine_tag, process_tag, int.from_bytes(data[9:12], "big"))
