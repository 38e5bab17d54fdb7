from typing import Iterable

import numpy as np

from . import dims
from .dims import DimensionInfo
from .. import errors

MAX_POINT_FORMAT_ID = 10
# Point formats whose point count is stored in the legacy 32-bit header field
LEGACY_POINT_FORMAT_MAX = 5
SUPPORTED_POINT_FORMATS = tuple(sorted(dims.POINT_FORMAT_DIMENSIONS))


def check_point_format_id(point_format_id: int) -> None:
    """Raises InvalidFormatCode if the id is not one defined by the LAS standard

    >>> check_point_format_id(6)
    >>> check_point_format_id(11)
    Traceback (most recent call last):
     ...
    lasdecode.errors.InvalidFormatCode: Invalid point data record format: 11
    """
    if not 0 <= point_format_id <= MAX_POINT_FORMAT_ID:
        raise errors.InvalidFormatCode(
            "Invalid point data record format: {}".format(point_format_id)
        )


class PointFormat:
    """Describes the dimensions decoded for a point format

    >>> fmt = PointFormat(3)
    >>> fmt.size
    34
    >>> fmt.has_gps_time, fmt.has_rgb
    (True, True)
    >>> PointFormat(6)
    Traceback (most recent call last):
     ...
    lasdecode.errors.UnsupportedFormat: Point format 6 is not supported
    """

    def __init__(self, point_format_id: int):
        try:
            self.dimensions = dims.ALL_POINT_FORMATS_DIMENSIONS[point_format_id]
        except KeyError:
            raise errors.UnsupportedFormat(
                "Point format {} is not supported".format(point_format_id)
            ) from None
        self.id = point_format_id

    @property
    def dimension_names(self) -> Iterable[str]:
        """Returns the names of the dimensions decoded for this point format"""
        return (
            dim.name
            for dim in self.dimensions
            if dim.name not in dims.SKIPPED_DIMENSIONS
        )

    @property
    def size(self) -> int:
        """Returns the number of bytes the decoded dimensions span"""
        return sum(dim.size for dim in self.dimensions)

    @property
    def has_gps_time(self) -> bool:
        return "gps_time" in self.dimension_names

    @property
    def has_rgb(self) -> bool:
        dimensions = set(self.dimension_names)
        return all(name in dimensions for name in dims.COLOR_FIELDS_NAMES)

    def dimension_by_name(self, name: str) -> DimensionInfo:
        for dim in self.dimensions:
            if dim.name == name:
                return dim
        raise ValueError(f"Dimension '{name}' does not exist")

    def dtype(self, point_size=None):
        """Returns the numpy.dtype used to read the point records

        point_size is the size of one record in the file, when it
        is bigger than the format size the trailing bytes are not part
        of any field.
        """
        if point_size is None:
            point_size = self.size
        dimensions = [
            dim for dim in self.dimensions if dim.name not in dims.SKIPPED_DIMENSIONS
        ]
        return np.dtype(
            {
                "names": [dim.name for dim in dimensions],
                "formats": ["<" + dim.type_str for dim in dimensions],
                "offsets": [dim.offset for dim in dimensions],
                "itemsize": point_size,
            }
        )

    def __getitem__(self, item):
        if isinstance(item, str):
            return self.dimension_by_name(item)
        return self.dimensions[item]

    def __eq__(self, other):
        return isinstance(other, PointFormat) and self.id == other.id

    def __repr__(self):
        return "<PointFormat({})>".format(self.id)
