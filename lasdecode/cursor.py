import struct

from .errors import OutOfBounds

type_name_to_struct = {
    "uint8": "B",
    "uint16": "H",
    "uint32": "I",
    "uint64": "Q",
    "int8": "b",
    "int16": "h",
    "int32": "i",
    "int64": "q",
    "float": "f",
    "double": "d",
}

type_lengths = {
    "uint8": 1,
    "uint16": 2,
    "uint32": 4,
    "uint64": 8,
    "int8": 1,
    "int16": 2,
    "int32": 4,
    "int64": 8,
    "float": 4,
    "double": 8,
}


class FieldCursor:
    """Reads little-endian fields from an in-memory buffer,
    keeping track of its own offset.

    Every access outside of the buffer raises :class:`OutOfBounds`,
    nothing is ever clamped.

    >>> cursor = FieldCursor(b"\\x01\\x00\\x02\\x00\\x00\\x00")
    >>> cursor.read("uint16")
    1
    >>> cursor.read("uint32")
    2
    >>> cursor.offset
    6
    """

    def __init__(self, buffer, offset=0):
        self.buffer = memoryview(buffer).cast("B")
        self._offset = 0
        self.seek(offset)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self.buffer) - self._offset

    def check_span(self, offset: int, length: int) -> None:
        """Raises OutOfBounds if [offset, offset + length) is not inside the buffer"""
        if offset < 0 or length < 0 or offset + length > len(self.buffer):
            raise OutOfBounds(offset, length, len(self.buffer))

    def seek(self, offset: int) -> None:
        self.check_span(offset, 0)
        self._offset = offset

    def skip(self, num_bytes: int) -> None:
        self.check_span(self._offset, num_bytes)
        self._offset += num_bytes

    def read_bytes(self, num_bytes: int) -> bytes:
        self.check_span(self._offset, num_bytes)
        b = self.buffer[self._offset : self._offset + num_bytes].tobytes()
        self._offset += num_bytes
        return b

    def read(self, data_type: str, num: int = 1):
        """Reads `num` values of type `data_type`,
        returns a single value when num is 1, a tuple otherwise
        """
        length = type_lengths[data_type] * num
        fmt_str = "<{}{}".format(num, type_name_to_struct[data_type])
        self.check_span(self._offset, length)
        values = struct.unpack_from(fmt_str, self.buffer, self._offset)
        self._offset += length

        if num == 1:
            return values[0]
        return values
