import struct

import pytest

import lasdecode

LEGACY_HEADER_STRUCT = struct.Struct("<4sHHIHH8sBB32s32sHHHIIBHI5I12d")
WAVEFORM_STRUCT = struct.Struct("<Q")
EXTENDED_STRUCT = struct.Struct("<QIQ15Q")
VLR_HEADER_STRUCT = struct.Struct("<H16sHH32s")
EVLR_HEADER_STRUCT = struct.Struct("<H16sHQ32s")
POINT_STRUCT = struct.Struct("<iiiHBBbBH")
GPS_TIME_STRUCT = struct.Struct("<d")
RGB_STRUCT = struct.Struct("<HHH")

FORMAT_HAS_GPS_TIME = {0: False, 1: True, 2: False, 3: True, 4: True}
FORMAT_HAS_RGB = {0: False, 1: False, 2: True, 3: True, 4: False}


def header_size_for(version_minor):
    size = LEGACY_HEADER_STRUCT.size
    if version_minor >= 3:
        size += WAVEFORM_STRUCT.size
    if version_minor >= 4:
        size += EXTENDED_STRUCT.size
    return size


def point_size_for(point_format_id):
    size = POINT_STRUCT.size
    if FORMAT_HAS_GPS_TIME.get(point_format_id, False):
        size += GPS_TIME_STRUCT.size
    if FORMAT_HAS_RGB.get(point_format_id, False):
        size += RGB_STRUCT.size
    return size


def pack_header(**fields):
    version_minor = fields.get("version_minor", 2)
    values = {
        "file_signature": b"LASF",
        "file_source_id": 0,
        "global_encoding": 0,
        "guid_data_1": 0,
        "guid_data_2": 0,
        "guid_data_3": 0,
        "guid_data_4": b"\x00" * 8,
        "version_major": 1,
        "version_minor": version_minor,
        "system_identifier": b"",
        "generating_software": b"lasdecodetests",
        "creation_day_of_year": 0,
        "creation_year": 0,
        "header_size": header_size_for(version_minor),
        "offset_to_point_data": header_size_for(version_minor),
        "number_of_vlr": 0,
        "point_format_id": 0,
        "point_data_record_length": 20,
        "legacy_point_count": 0,
        "legacy_number_of_points_by_return": (0,) * 5,
        "scales": (0.01, 0.01, 0.01),
        "offsets": (0.0, 0.0, 0.0),
        "maxs": (0.0, 0.0, 0.0),
        "mins": (0.0, 0.0, 0.0),
        "start_of_waveform_data_packet_record": 0,
        "start_of_first_evlr": 0,
        "number_of_evlr": 0,
        "extended_point_count": 0,
        "extended_number_of_points_by_return": (0,) * 15,
    }
    unknown = set(fields) - set(values)
    if unknown:
        raise TypeError("Unknown header fields: {}".format(unknown))
    values.update(fields)

    maxs, mins = values["maxs"], values["mins"]
    data = LEGACY_HEADER_STRUCT.pack(
        values["file_signature"],
        values["file_source_id"],
        values["global_encoding"],
        values["guid_data_1"],
        values["guid_data_2"],
        values["guid_data_3"],
        values["guid_data_4"],
        values["version_major"],
        values["version_minor"],
        values["system_identifier"],
        values["generating_software"],
        values["creation_day_of_year"],
        values["creation_year"],
        values["header_size"],
        values["offset_to_point_data"],
        values["number_of_vlr"],
        values["point_format_id"],
        values["point_data_record_length"],
        values["legacy_point_count"],
        *values["legacy_number_of_points_by_return"],
        *values["scales"],
        *values["offsets"],
        maxs[0],
        mins[0],
        maxs[1],
        mins[1],
        maxs[2],
        mins[2],
    )
    if version_minor >= 3:
        data += WAVEFORM_STRUCT.pack(values["start_of_waveform_data_packet_record"])
    if version_minor >= 4:
        data += EXTENDED_STRUCT.pack(
            values["start_of_first_evlr"],
            values["number_of_evlr"],
            values["extended_point_count"],
            *values["extended_number_of_points_by_return"],
        )
    return data


def pack_vlr(user_id=b"lasdecode", record_id=0, description=b"", record_data=b"", extended=False):
    header_struct = EVLR_HEADER_STRUCT if extended else VLR_HEADER_STRUCT
    return (
        header_struct.pack(0, user_id, record_id, len(record_data), description)
        + record_data
    )


def pack_point(
    point_format_id,
    X=0,
    Y=0,
    Z=0,
    intensity=0,
    classification=0,
    scan_angle_rank=0,
    user_data=0,
    point_source_id=0,
    gps_time=0.0,
    red=0,
    green=0,
    blue=0,
    sensor_data=0,
    point_size=None,
):
    data = POINT_STRUCT.pack(
        X,
        Y,
        Z,
        intensity,
        sensor_data,
        classification,
        scan_angle_rank,
        user_data,
        point_source_id,
    )
    if FORMAT_HAS_GPS_TIME.get(point_format_id, False):
        data += GPS_TIME_STRUCT.pack(gps_time)
    if FORMAT_HAS_RGB.get(point_format_id, False):
        data += RGB_STRUCT.pack(red, green, blue)
    if point_size is not None:
        data += b"\xff" * (point_size - len(data))
    return data


def build_las(
    version_minor=2,
    point_format_id=0,
    points=(),
    vlrs=(),
    evlrs=(),
    point_size=None,
    **header_fields
):
    """Assembles a LAS file, header values are computed from the
    points and (e)vlrs unless given in header_fields

    points are dicts of the keyword arguments of pack_point
    vlrs and evlrs are dicts of the keyword arguments of pack_vlr
    """
    if point_size is None:
        point_size = point_size_for(point_format_id)
    vlrs_bytes = b"".join(pack_vlr(**vlr) for vlr in vlrs)
    points_bytes = b"".join(
        pack_point(point_format_id, point_size=point_size, **point) for point in points
    )
    evlrs_bytes = b"".join(pack_vlr(extended=True, **evlr) for evlr in evlrs)

    header_size = header_size_for(version_minor)
    offset_to_point_data = header_size + len(vlrs_bytes)
    fields = {
        "version_minor": version_minor,
        "point_format_id": point_format_id,
        "point_data_record_length": point_size,
        "number_of_vlr": len(vlrs),
        "offset_to_point_data": offset_to_point_data,
        "legacy_point_count": len(points),
    }
    if version_minor >= 4:
        fields["start_of_first_evlr"] = offset_to_point_data + len(points_bytes)
        fields["number_of_evlr"] = len(evlrs)
        fields["extended_point_count"] = len(points)
    fields.update(header_fields)

    return pack_header(**fields) + vlrs_bytes + points_bytes + evlrs_bytes


SIMPLE_POINTS = [
    dict(X=100, Y=200, Z=300, intensity=10, classification=2, scan_angle_rank=-5,
         user_data=7, point_source_id=1, gps_time=1.5, red=0, green=32768, blue=65535),
    dict(X=-150, Y=250, Z=350, intensity=20, classification=5, scan_angle_rank=12,
         user_data=8, point_source_id=2, gps_time=2.5, red=65535, green=256, blue=0),
    dict(X=110, Y=-220, Z=0, intensity=65535, classification=255, scan_angle_rank=-90,
         user_data=255, point_source_id=65535, gps_time=-3.25, red=1, green=2, blue=3),
]


@pytest.fixture(params=[0, 1, 2, 3, 4])
def legacy_point_format_id(request):
    return request.param


@pytest.fixture(params=[0, 1, 2, 3, 4])
def version_minor(request):
    return request.param


@pytest.fixture()
def simple_las_bytes():
    return build_las(
        version_minor=2,
        point_format_id=3,
        points=SIMPLE_POINTS,
        scales=(0.01, 0.02, 0.5),
        offsets=(1000.0, -20.0, 3.0),
    )


@pytest.fixture()
def simple_las(simple_las_bytes):
    return lasdecode.read(simple_las_bytes)
