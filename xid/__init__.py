from xid.alphabet import ALPHABET, decode, encode
from xid.errors import InvalidLength, InvalidString, XIDError
from xid.generator import Generator, get_generator, machine_hash, set_generator
from xid.identifier import XID
from xid.layout import Fields, pack, unpack

__all__ = [
    "XID",
    "Generator",
    "get_generator",
    "set_generator",
    "machine_hash",
    "Fields",
    "pack",
    "unpack",
    "encode",
    "decode",
    "ALPHABET",
    "XIDError",
    "InvalidLength",
    "InvalidString",
]
