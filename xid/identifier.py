"""
XID - globally unique, time-sortable identifier.

12 bytes: 4-byte timestamp, 3-byte machine tag, 2-byte process tag,
3-byte counter. Text form is 20 base32 characters, URL safe.

    >>> a = XID.from_timestamp(1000)
    >>> b = XID.from_timestamp(1001)
    >>> a < b
    True
    >>> XID.from_string(a.text) == a
    True
"""

from functools import total_ordering

from utils.timestamp import from_unix_seconds
from xid import alphabet, layout
from xid.errors import InvalidLength, InvalidString
from xid.generator import get_generator


@total_ordering
class XID:
    __slots__ = ("_raw",)

    def __init__(self, value=None):
        if value is None:
            raw = self._generate(None, None)
        elif isinstance(value, XID):
            raw = value._raw
        elif isinstance(value, str):
            raw = alphabet.decode(value)
        else:
            raw = self._checked(value)
        object.__setattr__(self, "_raw", raw)

    @staticmethod
    def _checked(data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes-like XID data, got {type(data).__name__}")
        raw = bytes(data)
        if len(raw) != layout.RAW_LEN:
            raise InvalidLength(length=len(raw))
        return raw

    @staticmethod
    def _generate(timestamp, generator):
        generator = generator or get_generator()
        return layout.pack(*generator.next(timestamp))

    @classmethod
    def _wrap(cls, raw):
        self = cls.__new__(cls)
        object.__setattr__(self, "_raw", raw)
        return self

    # Constructors

    @classmethod
    def now(cls, generator=None):
        """New XID at the current time."""
        return cls._wrap(cls._generate(None, generator))

    @classmethod
    def from_timestamp(cls, timestamp, generator=None):
        """New XID at `timestamp` (seconds or datetime), wrapping modulo 2**32."""
        return cls._wrap(cls._generate(timestamp, generator))

    @classmethod
    def from_bytes(cls, data):
        return cls._wrap(cls._checked(data))

    @classmethod
    def from_string(cls, text):
        return cls._wrap(alphabet.decode(text))

    # Accessors

    @property
    def bytes(self):
        return self._raw

    @property
    def text(self):
        return alphabet.encode(self._raw)

    @property
    def fields(self):
        return layout.unpack(self._raw)

    @property
    def timestamp(self):
        """Seconds since Unix epoch."""
        return self.fields.timestamp

    @property
    def time(self):
        """Timestamp as an aware UTC datetime."""
        return from_unix_seconds(self.timestamp)

    @property
    def machine_tag(self):
        return self.fields.machine_tag

    @property
    def process_tag(self):
        return self.fields.process_tag

    @property
    def counter(self):
        return self.fields.counter

    # Value semantics

    def __setattr__(self, name, value):
        raise AttributeError("XID is immutable")

    def __delattr__(self, name):
        raise AttributeError("XID is immutable")

    def __eq__(self, other):
        if not isinstance(other, XID):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, XID):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self):
        return hash(self._raw)

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"XID('{self.text}')"

    def __reduce__(self):
        return (XID.from_bytes, (self._raw,))

    # Pydantic v2

    @classmethod
    def validate(cls, value):
        """Accept an XID or its text form."""
        if isinstance(value, XID):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise InvalidString(value=value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, field_schema, handler):
        return {"type": "string", "minLength": alphabet.ENCODED_LEN, "maxLength": alphabet.ENCODED_LEN}
