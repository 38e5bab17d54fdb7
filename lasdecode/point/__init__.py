from .format import PointFormat, check_point_format_id
from .record import PointRecord
