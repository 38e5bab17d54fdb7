__version__ = "0.1.0"

import logging

from . import errors, vlrs
from .errors import LasError
from .evlrs import EVLR
from .header import LasHeader
from .lasdata import LasData
from .lasreader import LasReader
from .lib import read_las as read
from .point import PointFormat
from .point.format import SUPPORTED_POINT_FORMATS

logging.getLogger(__name__).addHandler(logging.NullHandler())
