""" All the custom exceptions types
"""


class LasError(Exception):
    pass


class LasIOError(LasError):
    pass


class OutOfBounds(LasError):
    def __init__(self, offset, length, buffer_len):
        super().__init__(
            "Cannot read {} bytes at offset {}, buffer is {} bytes long".format(
                length, offset, buffer_len
            )
        )
        self.offset = offset
        self.length = length
        self.buffer_len = buffer_len


class FileSignatureError(LasError):
    pass


class FileVersionNotSupported(LasError):
    pass


class InvalidFormatCode(LasError):
    pass


class UnsupportedFormat(LasError):
    pass


class PointRecordLengthError(LasError):
    pass


class LasDiagnostic(LasError):
    """Base of the problems that are reported but do not stop the decoding"""


class RegionOverrun(LasDiagnostic):
    def __init__(self, message, vlrs=None):
        super().__init__(message)
        self.vlrs = vlrs if vlrs is not None else []


class BoundsMismatch(LasDiagnostic):
    def __init__(self, axis, declared, computed):
        super().__init__(
            "{} bounds declared in header ({}, {}) "
            "do not match the points ({}, {})".format(
                axis, declared[0], declared[1], computed[0], computed[1]
            )
        )
        self.axis = axis
        self.declared = declared
        self.computed = computed
