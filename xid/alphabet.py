"""
Base32 text codec for XIDs.

12 bytes (96 bits) <-> 20 characters. Digits then lowercase letters without
i, l, o, u. The last symbol carries one data bit and four zero padding bits.
"""

from xid.errors import InvalidString

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
ENCODED_LEN = 20

_VALUES = {char: index for index, char in enumerate(ALPHABET)}


def encode(data):
    """Encode 12 bytes as a 20-character string."""
    chars = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            chars.append(ALPHABET[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1

    if bits:
        chars.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(chars)


def decode(text):
    """Decode a 20-character string to 12 bytes (case-insensitive).

    Raises InvalidString on wrong length or a character outside the alphabet.
    The trailing padding bits are dropped without being checked.
    """
    if not isinstance(text, str) or len(text) != ENCODED_LEN:
        raise InvalidString(value=text)

    out = bytearray()
    buffer = 0
    bits = 0
    for char in text.lower():
        value = _VALUES.get(char)
        if value is None:
            raise InvalidString(value=text)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return bytes(out)
