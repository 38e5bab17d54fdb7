NULL_BYTE = b"\x00"


class FixedLengthString:
    """A fixed width text field as stored in the file.

    Keeps the raw bytes (which are not necessarily null-terminated)
    and gives a decoded view of them.

    >>> s = FixedLengthString(b"TerraScan" + b"\\x00" * 23)
    >>> s.text
    'TerraScan'
    >>> len(s)
    32
    """

    __slots__ = ("raw",)

    def __init__(self, raw: bytes):
        self.raw = bytes(raw)

    @property
    def text(self) -> str:
        return self.raw.split(NULL_BYTE, 1)[0].decode("ascii", errors="replace")

    def __len__(self):
        return len(self.raw)

    def __eq__(self, other):
        if isinstance(other, FixedLengthString):
            return self.raw == other.raw
        if isinstance(other, str):
            return self.text == other
        if isinstance(other, (bytes, bytearray)):
            return self.raw == bytes(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.raw)

    def __str__(self):
        return self.text

    def __repr__(self):
        return "FixedLengthString({!r})".format(self.text)


def encode_to_len(string: str, wanted_len: int, codec="ascii") -> bytes:
    encoded_str = string.encode(codec)

    missing_bytes = wanted_len - len(encoded_str)
    if missing_bytes < 0:
        raise ValueError(f"encoded str does not fit in {wanted_len} bytes")

    return encoded_str + (b"\0" * missing_bytes)
