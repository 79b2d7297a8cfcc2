"""Properties Loader - Parse Java .properties files into a mapping."""

from .exceptions import MalformedEscapeError, PropertiesError, PropertyValueError
from .loader import load, load_file, loads
from .models import Properties
from .reader import LineReader
from .record import parse_record, split_record
from .unescape import unescape

__version__ = "0.1.0"

__all__ = [
    # Main API
    "load",
    "loads",
    "load_file",
    # Models
    "Properties",
    # Building blocks
    "LineReader",
    "parse_record",
    "split_record",
    "unescape",
    # Exceptions
    "PropertiesError",
    "MalformedEscapeError",
    "PropertyValueError",
]
