"""  This module contains the definitions of the point formats dimensions
and the mapping between dimension names and their type
"""
from collections import namedtuple

# Definition of the points dimensions and formats
DIMENSIONS = {
    "X": ("X", "i4"),
    "Y": ("Y", "i4"),
    "Z": ("Z", "i4"),
    "intensity": ("intensity", "u2"),
    # the byte holding return number, number of returns,
    # scan direction and edge of flight line is not decoded
    "sensor_data": ("sensor_data", "V1"),
    "classification": ("classification", "u1"),
    "scan_angle_rank": ("scan_angle_rank", "i1"),
    "user_data": ("user_data", "u1"),
    "point_source_id": ("point_source_id", "u2"),
    "gps_time": ("gps_time", "f8"),
    "red": ("red", "u2"),
    "green": ("green", "u2"),
    "blue": ("blue", "u2"),
}

SKIPPED_DIMENSIONS = ("sensor_data",)

POINT_FORMAT_0 = (
    "X",
    "Y",
    "Z",
    "intensity",
    "sensor_data",
    "classification",
    "scan_angle_rank",
    "user_data",
    "point_source_id",
)

GPS_TIME_FIELDS_NAMES = ("gps_time",)

COLOR_FIELDS_NAMES = ("red", "green", "blue")

# Format 4 also carries waveform packet fields after the gps time,
# they are stepped over by the record length
POINT_FORMAT_DIMENSIONS = {
    0: POINT_FORMAT_0,
    1: POINT_FORMAT_0 + GPS_TIME_FIELDS_NAMES,
    2: POINT_FORMAT_0 + COLOR_FIELDS_NAMES,
    3: POINT_FORMAT_0 + GPS_TIME_FIELDS_NAMES + COLOR_FIELDS_NAMES,
    4: POINT_FORMAT_0 + GPS_TIME_FIELDS_NAMES,
}

DimensionInfo = namedtuple("DimensionInfo", ("name", "type_str", "offset", "size"))


def _point_format_to_dimension_infos(dimension_names):
    infos, offset = [], 0
    for dim_name in dimension_names:
        name, type_str = DIMENSIONS[dim_name]
        size = int(type_str[1:])
        infos.append(DimensionInfo(name, type_str, offset, size))
        offset += size
    return tuple(infos)


ALL_POINT_FORMATS_DIMENSIONS = {
    fmt_id: _point_format_to_dimension_infos(dim_names)
    for fmt_id, dim_names in POINT_FORMAT_DIMENSIONS.items()
}
