import ctypes
import datetime
import enum
import logging
import uuid
from collections import namedtuple

import numpy as np

from . import errors
from .cursor import FieldCursor, type_lengths
from .point.format import LEGACY_POINT_FORMAT_MAX
from .utils import FixedLengthString

logger = logging.getLogger(__name__)

LAS_FILE_SIGNATURE = b"LASF"


class GpsTimeType(enum.IntEnum):
    WEEK_TIME = 0
    STANDARD = 1


class GlobalEncoding(ctypes.LittleEndianStructure):
    _pack_ = 1
    _fields_ = [
        ("_gps_time_type", ctypes.c_uint16, 1),
        ("waveform_internal", ctypes.c_uint16, 1),  # 1.3
        ("waveform_external", ctypes.c_uint16, 1),  # 1.3
        ("synthetic_return_numbers", ctypes.c_uint16, 1),  # 1.3
        ("wkt", ctypes.c_uint16, 1),  # 1.4
        ("reserved", ctypes.c_uint16, 11),
    ]

    @classmethod
    def from_value(cls, value: int) -> "GlobalEncoding":
        return cls.from_buffer_copy(value.to_bytes(2, byteorder="little"))

    @property
    def value(self) -> int:
        return int.from_bytes(bytes(self), byteorder="little")

    @property
    def gps_time_type(self):
        if self._gps_time_type:
            return GpsTimeType.STANDARD
        else:
            return GpsTimeType.WEEK_TIME

    def __repr__(self):
        return "<GlobalEncoding({:#06x})>".format(self.value)


HeaderField = namedtuple("HeaderField", ("name", "type", "num"))

LAS_HEADER_FIELDS = (
    HeaderField("file_signature", "bytes", 4),
    HeaderField("file_source_id", "uint16", 1),
    HeaderField("global_encoding", "uint16", 1),
    HeaderField("guid_data_1", "uint32", 1),
    HeaderField("guid_data_2", "uint16", 1),
    HeaderField("guid_data_3", "uint16", 1),
    HeaderField("guid_data_4", "bytes", 8),
    HeaderField("version_major", "uint8", 1),
    HeaderField("version_minor", "uint8", 1),
    HeaderField("system_identifier", "str", 32),
    HeaderField("generating_software", "str", 32),
    HeaderField("creation_day_of_year", "uint16", 1),
    HeaderField("creation_year", "uint16", 1),
    HeaderField("header_size", "uint16", 1),
    HeaderField("offset_to_point_data", "uint32", 1),
    HeaderField("number_of_vlr", "uint32", 1),
    HeaderField("point_format_id", "uint8", 1),
    HeaderField("point_data_record_length", "uint16", 1),
    HeaderField("legacy_point_count", "uint32", 1),
    HeaderField("legacy_number_of_points_by_return", "uint32", 5),
    HeaderField("x_scale", "double", 1),
    HeaderField("y_scale", "double", 1),
    HeaderField("z_scale", "double", 1),
    HeaderField("x_offset", "double", 1),
    HeaderField("y_offset", "double", 1),
    HeaderField("z_offset", "double", 1),
    HeaderField("x_max", "double", 1),
    HeaderField("x_min", "double", 1),
    HeaderField("y_max", "double", 1),
    HeaderField("y_min", "double", 1),
    HeaderField("z_max", "double", 1),
    HeaderField("z_min", "double", 1),
)

ADDITIONAL_LAS_1_3_FIELDS = (
    HeaderField("start_of_waveform_data_packet_record", "uint64", 1),
)

ADDITIONAL_LAS_1_4_FIELDS = (
    HeaderField("start_of_first_evlr", "uint64", 1),
    HeaderField("number_of_evlr", "uint32", 1),
    HeaderField("extended_point_count", "uint64", 1),
    HeaderField("extended_number_of_points_by_return", "uint64", 15),
)


def _fields_size(fields):
    size = 0
    for field in fields:
        if field.type in ("bytes", "str"):
            size += field.num
        else:
            size += type_lengths[field.type] * field.num
    return size


_LEGACY_HEADER_SIZE = _fields_size(LAS_HEADER_FIELDS)
LAS_HEADERS_SIZE = {
    "1.0": _LEGACY_HEADER_SIZE,
    "1.1": _LEGACY_HEADER_SIZE,
    "1.2": _LEGACY_HEADER_SIZE,
    "1.3": _LEGACY_HEADER_SIZE + _fields_size(ADDITIONAL_LAS_1_3_FIELDS),
    "1.4": _LEGACY_HEADER_SIZE
    + _fields_size(ADDITIONAL_LAS_1_3_FIELDS)
    + _fields_size(ADDITIONAL_LAS_1_4_FIELDS),
}

SUPPORTED_VERSION_MAJOR = 1
MAX_SUPPORTED_VERSION_MINOR = 4


class LasHeader:
    """The public header block of a LAS file.

    Fields that only exist in later versions of the format
    (waveform offset for 1.3, EVLRs and 64-bit counts for 1.4)
    are zero when the file version does not have them,
    use :attr:`has_waveform_offset` and :attr:`has_extended_fields`
    to know whether they were actually read.
    """

    def __init__(self):
        self.file_signature = LAS_FILE_SIGNATURE
        self.file_source_id = 0
        self.global_encoding = GlobalEncoding()
        self.guid_data_1 = 0
        self.guid_data_2 = 0
        self.guid_data_3 = 0
        self.guid_data_4 = b"\x00" * 8
        self.version_major = 1
        self.version_minor = 2
        self.system_identifier = FixedLengthString(b"\x00" * 32)
        self.generating_software = FixedLengthString(b"\x00" * 32)
        self.creation_day_of_year = 0
        self.creation_year = 0
        self.header_size = LAS_HEADERS_SIZE["1.2"]
        self.offset_to_point_data = LAS_HEADERS_SIZE["1.2"]
        self.number_of_vlr = 0
        self.point_format_id = 0
        self.point_data_record_length = 0
        self.legacy_point_count = 0
        self.legacy_number_of_points_by_return = (0,) * 5
        self.x_scale = 0.0
        self.y_scale = 0.0
        self.z_scale = 0.0
        self.x_offset = 0.0
        self.y_offset = 0.0
        self.z_offset = 0.0
        self.x_max = 0.0
        self.x_min = 0.0
        self.y_max = 0.0
        self.y_min = 0.0
        self.z_max = 0.0
        self.z_min = 0.0
        # Added in las 1.3
        self.start_of_waveform_data_packet_record = 0
        # Added in las 1.4
        self.start_of_first_evlr = 0
        self.number_of_evlr = 0
        self.extended_point_count = 0
        self.extended_number_of_points_by_return = (0,) * 15

    @classmethod
    def read_from(cls, cursor: FieldCursor) -> "LasHeader":
        """Reads the header starting at the current cursor position.

        The cursor ends right after the last field that exists
        for the version of the file.
        """
        header = cls()
        start = cursor.offset

        signature_field, *other_fields = LAS_HEADER_FIELDS
        header.file_signature = _read_field(cursor, signature_field)
        if header.file_signature != LAS_FILE_SIGNATURE:
            raise errors.FileSignatureError(
                "File Signature ({}) is not {}".format(
                    header.file_signature, LAS_FILE_SIGNATURE
                )
            )

        for field in other_fields:
            setattr(header, field.name, _read_field(cursor, field))

        if (
            header.version_major != SUPPORTED_VERSION_MAJOR
            or header.version_minor > MAX_SUPPORTED_VERSION_MINOR
        ):
            raise errors.FileVersionNotSupported(header.version)

        header.global_encoding = GlobalEncoding.from_value(header.global_encoding)

        if header.has_waveform_offset:
            for field in ADDITIONAL_LAS_1_3_FIELDS:
                setattr(header, field.name, _read_field(cursor, field))

        if header.has_extended_fields:
            for field in ADDITIONAL_LAS_1_4_FIELDS:
                setattr(header, field.name, _read_field(cursor, field))

        bytes_read = cursor.offset - start
        if bytes_read != header.header_size:
            logger.warning(
                "Header size declared in file ({}) is not the size "
                "of a {} header ({})".format(
                    header.header_size, header.version, bytes_read
                )
            )
        return header

    @property
    def version(self) -> str:
        return "{}.{}".format(self.version_major, self.version_minor)

    @property
    def has_waveform_offset(self) -> bool:
        return self.version_minor >= 3

    @property
    def has_extended_fields(self) -> bool:
        return self.version_minor >= 4

    @property
    def is_legacy_point_format(self) -> bool:
        return self.point_format_id <= LEGACY_POINT_FORMAT_MAX

    @property
    def point_count(self) -> int:
        """Returns the number of points in the file

        The legacy 32-bit field is used for the point formats
        of the legacy family, the 64-bit one otherwise.
        """
        if self.is_legacy_point_format:
            return self.legacy_point_count
        return self.extended_point_count

    @property
    def number_of_points_by_return(self):
        if self.is_legacy_point_format:
            return self.legacy_number_of_points_by_return
        return self.extended_number_of_points_by_return

    @property
    def date(self):
        """Returns the creation date stored in the las file

        Returns
        -------
        datetime.date or None if the fields do not form a valid date

        """
        try:
            return datetime.date(self.creation_year, 1, 1) + datetime.timedelta(
                self.creation_day_of_year - 1
            )
        except (ValueError, OverflowError):
            return None

    @property
    def uuid(self) -> uuid.UUID:
        """The project GUID, its first three parts are stored little-endian"""
        guid_bytes = (
            self.guid_data_1.to_bytes(4, "little")
            + self.guid_data_2.to_bytes(2, "little")
            + self.guid_data_3.to_bytes(2, "little")
            + self.guid_data_4
        )
        return uuid.UUID(bytes_le=guid_bytes)

    @property
    def mins(self):
        """Returns de minimum values of x, y, z as a numpy array"""
        return np.array([self.x_min, self.y_min, self.z_min])

    @property
    def maxs(self):
        """Returns de maximum values of x, y, z as a numpy array"""
        return np.array([self.x_max, self.y_max, self.z_max])

    @property
    def scales(self):
        """Returns the scaling values of x, y, z as a numpy array"""
        return np.array([self.x_scale, self.y_scale, self.z_scale])

    @property
    def offsets(self):
        """Returns the offsets values of x, y, z as a numpy array"""
        return np.array([self.x_offset, self.y_offset, self.z_offset])

    def __repr__(self):
        return "<LasHeader({}, point fmt: {}, {} points)>".format(
            self.version, self.point_format_id, self.point_count
        )


def _read_field(cursor, field):
    if field.type == "bytes":
        return cursor.read_bytes(field.num)
    if field.type == "str":
        return FixedLengthString(cursor.read_bytes(field.num))
    return cursor.read(field.type, num=field.num)
