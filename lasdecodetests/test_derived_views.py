import numpy as np
import pytest

import lasdecode
from lasdecode import errors
from lasdecodetests.test_common import (
    SIMPLE_POINTS,
    build_las,
    simple_las,
    simple_las_bytes,
)


def test_coordinates_without_rescale_are_raw_values(simple_las):
    coords = simple_las.coordinates(rescale=False)
    assert coords.dtype == np.float64
    assert coords.shape == (len(SIMPLE_POINTS), 3)
    expected = [[float(p["X"]), float(p["Y"]), float(p["Z"])] for p in SIMPLE_POINTS]
    assert coords.tolist() == expected


def test_coordinates_rescaled(simple_las):
    header = simple_las.header
    coords = simple_las.coordinates(rescale=True)
    scales = (header.x_scale, header.y_scale, header.z_scale)
    offsets = (header.x_offset, header.y_offset, header.z_offset)
    for i, point in enumerate(SIMPLE_POINTS):
        for axis, name in enumerate("XYZ"):
            assert coords[i, axis] == point[name] * scales[axis] + offsets[axis]


def test_coordinates_default_to_rescaled(simple_las):
    assert np.array_equal(simple_las.coordinates(), simple_las.coordinates(rescale=True))


def test_scaled_axes(simple_las):
    coords = simple_las.coordinates()
    assert np.array_equal(simple_las.x, coords[:, 0])
    assert np.array_equal(simple_las.y, coords[:, 1])
    assert np.array_equal(simple_las.z, coords[:, 2])


def test_colors_boundaries(simple_las):
    colors = simple_las.colors()
    assert colors.dtype == np.uint8
    # red, green, blue of the first point are 0, 32768, 65535
    assert colors[0].tolist() == [0, 127, 255]
    assert colors[1].tolist() == [255, 0, 0]
    assert colors[2].tolist() == [0, 0, 0]


def test_colors_are_truncated():
    points = [dict(red=257, green=514, blue=65534)]
    las = lasdecode.read(build_las(point_format_id=2, points=points))
    assert las.colors()[0].tolist() == [1, 2, 254]


def test_colors_of_format_without_rgb():
    las = lasdecode.read(build_las(point_format_id=1, points=SIMPLE_POINTS))
    colors = las.colors()
    assert colors.shape == (len(SIMPLE_POINTS), 3)
    assert not colors.any()


def test_views_are_not_cached(simple_las):
    coords = simple_las.coordinates()
    coords[:] = 0
    assert simple_las.coordinates().any()


def bounded_las(mins, maxs):
    points = [dict(X=100, Y=-200, Z=5), dict(X=300, Y=400, Z=-5)]
    return lasdecode.read(
        build_las(
            point_format_id=0,
            points=points,
            scales=(0.5, 0.25, 1.0),
            offsets=(10.0, 0.0, 100.0),
            mins=mins,
            maxs=maxs,
        )
    )


def test_validate_bounds_ok():
    las = bounded_las(mins=(60.0, -50.0, 95.0), maxs=(160.0, 100.0, 105.0))
    assert las.validate_bounds() == []


def test_validate_bounds_tolerates_half_a_scale_unit():
    las = bounded_las(mins=(60.2, -50.1, 95.4), maxs=(160.0, 100.0, 105.0))
    assert las.validate_bounds() == []


def test_validate_bounds_mismatch(caplog):
    las = bounded_las(mins=(60.0, -50.0, 0.0), maxs=(160.0, 1000.0, 105.0))
    mismatches = las.validate_bounds()

    assert [m.axis for m in mismatches] == ["y", "z"]
    assert all(isinstance(m, errors.BoundsMismatch) for m in mismatches)
    assert mismatches[0].declared == (-50.0, 1000.0)
    assert mismatches[0].computed == (-50.0, 100.0)
    assert "bounds declared in header" in caplog.text
    # a mismatch is only reported
    assert len(las) == 2
    assert las.diagnostics == []


def test_validate_bounds_without_points():
    las = lasdecode.read(build_las(point_format_id=0, mins=(1.0, 1.0, 1.0)))
    assert las.validate_bounds() == []
