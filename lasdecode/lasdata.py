import logging
from typing import List

import numpy as np

from . import errors
from .evlrs import EVLRList
from .header import LasHeader
from .point import PointFormat
from .point.dims import COLOR_FIELDS_NAMES
from .point.record import PointRecord
from .vlrs import VLRList

logger = logging.getLogger(__name__)

COLOR_8BIT_MAX = 255.0
COLOR_16BIT_MAX = 65535.0


def scale_dimension(array_dim, scale, offset):
    return (array_dim * scale) + offset


class LasData:
    """LasData connects the header, vlrs, point records and evlrs together.

    It is what :func:`lasdecode.read` returns.

    To access points dimensions using this class you have two possibilities

    .. code:: python

        las = lasdecode.read('some_file.las')
        las.classification
        # or
        las['classification']

    The real world coordinates (scale and offset applied)
    are given by :meth:`coordinates` or :attr:`x`, :attr:`y`, :attr:`z`.
    """

    def __init__(
        self,
        *,
        header: LasHeader,
        points: PointRecord = None,
        vlrs: VLRList = None,
        evlrs: EVLRList = None,
        diagnostics: List[errors.LasDiagnostic] = None,
    ):
        if points is None:
            points = PointRecord.empty(PointFormat(header.point_format_id))
        self.header = header
        self.points = points
        self.vlrs = vlrs if vlrs is not None else VLRList()
        self.evlrs = evlrs if evlrs is not None else EVLRList()
        self.diagnostics = diagnostics if diagnostics is not None else []

    @property
    def point_format(self) -> PointFormat:
        return self.points.point_format

    @property
    def point_count(self) -> int:
        """The number of points decoded"""
        return len(self.points)

    @property
    def x(self):
        """Returns the scaled x positions of the points as doubles"""
        return scale_dimension(self.X, self.header.x_scale, self.header.x_offset)

    @property
    def y(self):
        """Returns the scaled y positions of the points as doubles"""
        return scale_dimension(self.Y, self.header.y_scale, self.header.y_offset)

    @property
    def z(self):
        """Returns the scaled z positions of the points as doubles"""
        return scale_dimension(self.Z, self.header.z_scale, self.header.z_offset)

    def coordinates(self, rescale: bool = True) -> np.ndarray:
        """Returns the coordinates of the points as a (n, 3) array of doubles

        Parameters
        ----------
        rescale: bool
            if True, `value * scale + offset` is applied on each axis,
            otherwise the raw integers are returned as doubles
        """
        raw = np.empty((len(self.points), 3), dtype=np.float64)
        raw[:, 0] = self.points["X"]
        raw[:, 1] = self.points["Y"]
        raw[:, 2] = self.points["Z"]
        if rescale:
            return scale_dimension(raw, self.header.scales, self.header.offsets)
        return raw

    def colors(self) -> np.ndarray:
        """Returns the colors of the points as a (n, 3) array of uint8

        16-bit channels are brought to 8 bits with
        `channel * 255 / 65535`, truncated.
        Point formats without colors give black points.

        >>> import numpy as np
        >>> c = np.array([0, 32768, 65535], dtype=np.float64)
        >>> (c * COLOR_8BIT_MAX / COLOR_16BIT_MAX).astype(np.uint8).tolist()
        [0, 127, 255]
        """
        colors = np.zeros((len(self.points), 3), dtype=np.uint8)
        if not self.point_format.has_rgb:
            return colors

        for i, name in enumerate(COLOR_FIELDS_NAMES):
            channel = self.points[name].astype(np.float64)
            colors[:, i] = (channel * COLOR_8BIT_MAX / COLOR_16BIT_MAX).astype(
                np.uint8
            )
        return colors

    def validate_bounds(self) -> List[errors.BoundsMismatch]:
        """Compares the bounds declared in the header with the ones of the points.

        Returns the mismatches found (they are also logged),
        they never make the data unusable.
        An axis matches when both its min and max are within
        half a scale unit of the computed ones.
        """
        if len(self.points) == 0:
            return []

        coords = self.coordinates(rescale=True)
        computed_mins = coords.min(axis=0)
        computed_maxs = coords.max(axis=0)
        logger.debug("mins computed: {}, in header: {}".format(computed_mins, self.header.mins))
        logger.debug("maxs computed: {}, in header: {}".format(computed_maxs, self.header.maxs))

        mismatches = []
        tolerances = np.abs(self.header.scales) / 2
        for i, axis in enumerate("xyz"):
            declared = (self.header.mins[i], self.header.maxs[i])
            computed = (computed_mins[i], computed_maxs[i])
            if not np.allclose(declared, computed, rtol=0.0, atol=tolerances[i]):
                mismatch = errors.BoundsMismatch(axis, declared, computed)
                logger.warning(str(mismatch))
                mismatches.append(mismatch)
        return mismatches

    def __len__(self):
        return len(self.points)

    def __getattr__(self, item):
        """Automatically called by Python when the attribute
        named 'item' is no found. We use this function to forward the call the
        point record. This is the mechanism used to allow the users to access
        the points dimensions directly through a LasData.

        Parameters
        ----------
        item: str
            name of the attribute, should be a dimension name

        Returns
        -------
        The requested dimension if it exists

        """
        if item.startswith("__") or item == "points":
            raise AttributeError(item)
        try:
            return self.points[item]
        except (ValueError, KeyError):
            raise AttributeError(
                f"{self.__class__.__name__} object has no attribute '{item}'"
            ) from None

    def __getitem__(self, item):
        return self.points[item]

    def __repr__(self):
        return "<LasData({}, point fmt: {}, {} points, {} vlrs, {} evlrs)>".format(
            self.header.version,
            self.point_format,
            len(self.points),
            len(self.vlrs),
            len(self.evlrs),
        )
