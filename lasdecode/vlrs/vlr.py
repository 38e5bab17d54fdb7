from ..utils import FixedLengthString, encode_to_len

VLR_HEADER_SIZE = 54
MAX_VLR_RECORD_DATA_LEN = 2 ** 16 - 1


class VLR:
    """A Variable Length Record, its record data is kept as bytes,
    no parsing of it is made.
    """

    max_record_data_len = MAX_VLR_RECORD_DATA_LEN
    header_size = VLR_HEADER_SIZE

    def __init__(self, user_id, record_id, description="", record_data=b"", reserved=0):
        self.user_id = _as_fixed_string(user_id, 16)
        self.record_id = record_id
        self.description = _as_fixed_string(description, 32)
        self.reserved = reserved
        self.record_data = record_data

    @property
    def record_data(self) -> bytes:
        return self._record_data

    @record_data.setter
    def record_data(self, value):
        if self.max_record_data_len is not None and len(value) > self.max_record_data_len:
            raise OverflowError(
                "VLR record data length ({}) exceeds maximum ({})".format(
                    len(value), self.max_record_data_len
                )
            )
        self._record_data = bytes(value)

    def size_in_bytes(self) -> int:
        return self.header_size + len(self.record_data)

    def __eq__(self, other):
        return (
            self.record_id == other.record_id
            and self.user_id == other.user_id
            and self.description == other.description
            and self.record_data == other.record_data
        )

    def __repr__(self):
        return "<{}(user_id: '{}', record_id: '{}', data len: {})>".format(
            self.__class__.__name__, self.user_id, self.record_id, len(self.record_data)
        )


def _as_fixed_string(value, length):
    if isinstance(value, FixedLengthString):
        return value
    if isinstance(value, str):
        value = encode_to_len(value, length)
    return FixedLengthString(value)
