""" Contains the class that manages Las PointRecords
Las PointRecords are represented using Numpy's structured arrays,
The PointRecord class provides a few extra things to manage these arrays
in the context of Las point data
"""
import logging
from collections import namedtuple

import numpy as np

from .format import PointFormat
from .. import errors
from ..cursor import FieldCursor

logger = logging.getLogger(__name__)

_point_tuple_classes = {}


def point_tuple_class(point_format: PointFormat):
    """Returns the namedtuple class used to represent one point of the format"""
    try:
        return _point_tuple_classes[point_format.id]
    except KeyError:
        cls = namedtuple(
            "PointDataRecord{}".format(point_format.id),
            tuple(point_format.dimension_names),
        )
        _point_tuple_classes[point_format.id] = cls
        return cls


def raise_if_point_size_too_small(point_format: PointFormat, point_size: int) -> None:
    if point_size < point_format.size:
        raise errors.PointRecordLengthError(
            "Point record length ({}) is smaller than the {} bytes "
            "needed by point format {}".format(
                point_size, point_format.size, point_format.id
            )
        )


class PointRecord:
    """Wraps the numpy structured array containing the points data"""

    def __init__(self, data: np.ndarray, point_format: PointFormat):
        self._array = data
        self._point_format = point_format

    @property
    def point_format(self) -> PointFormat:
        return self._point_format

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def dimensions_names(self):
        return self.point_format.dimension_names

    @classmethod
    def empty(cls, point_format: PointFormat) -> "PointRecord":
        return cls(np.zeros(0, dtype=point_format.dtype()), point_format)

    @classmethod
    def from_buffer(
        cls,
        cursor: FieldCursor,
        point_format: PointFormat,
        count: int,
        offset: int,
        point_size: int,
    ) -> "PointRecord":
        """Decodes `count` point records.

        Record `i` starts at `offset + i * point_size`, bytes past the
        fields of the format up to point_size are not read.

        Parameters
        ----------
        cursor: the cursor over the whole file buffer
        point_format: format of the records
        count: number of records to decode
        offset: absolute offset of the first record
        point_size: size in bytes of one record in the file
        """
        raise_if_point_size_too_small(point_format, point_size)
        if count == 0:
            return cls.empty(point_format)

        last_record_offset = offset + (count - 1) * point_size
        cursor.check_span(offset, 0)
        cursor.check_span(last_record_offset, point_format.size)

        packed_dtype = point_format.dtype()
        view = np.ndarray(
            shape=(count,),
            dtype=packed_dtype,
            buffer=cursor.buffer,
            offset=offset,
            strides=(point_size,),
        )
        logger.debug(
            "Decoded {} points of format {} ({} bytes each)".format(
                count, point_format.id, point_size
            )
        )
        array = view.copy()
        array.setflags(write=False)
        return cls(array, point_format)

    def __getitem__(self, item):
        """Returns a dimension array when item is a name,
        a :func:`point_tuple_class` instance when item is an index
        """
        if isinstance(item, str):
            return self.array[item]
        point = self.array[item]
        if isinstance(point, np.void):
            return point_tuple_class(self.point_format)(*point.item())
        return PointRecord(point, self.point_format)

    def __len__(self):
        return self.array.shape[0]

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __repr__(self):
        return "<{}(fmt: {}, len: {})>".format(
            self.__class__.__name__, self.point_format, len(self)
        )
