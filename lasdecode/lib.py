""" 'Entry point' of the library, Contains the various functions meant to be
used directly by a user
"""
import logging
import time
from pathlib import Path

from . import errors
from .lasdata import LasData
from .lasreader import LasReader

logger = logging.getLogger(__name__)


def load_bytes(source) -> bytes:
    """Returns the whole content of the source

    Parameters
    ----------
    source: str, pathlib.Path, bytes or file object
        if source is a str or Path it must be a filename,
        a file object must have a read method
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    try:
        if isinstance(source, (str, Path)):
            with open(source, mode="rb") as f:
                return f.read()
        return source.read()
    except OSError as e:
        raise errors.LasIOError("Failed to read '{}': {}".format(source, e)) from e


def read_las(source, point_data_only: bool = True) -> LasData:
    """Entry point for reading las data in lasdecode

    Reads the whole file into memory then decodes it.

    Parameters
    ----------
    source : str, pathlib.Path, bytes or file object
        The source to read data from

    point_data_only: bool
        if True (the default) only the header and the points
        are decoded, the VLRs and EVLRs are skipped

    Returns
    -------
    lasdecode.lasdata.LasData
        The object you can interact with to get access to the LAS points & VLRs

    Raises
    ------
    lasdecode.errors.LasError
        when the source cannot be read or is not valid LAS content
    """
    start = time.perf_counter()
    reader = LasReader(load_bytes(source))
    las = reader.read(point_data_only=point_data_only)
    logger.info("Decoded in {:.6f} [sec]".format(time.perf_counter() - start))
    return las
