"""Public shared error API for errkit packages."""

from .converter import ErrorConverter, convert_result
from .kinds import ErrorKind, define_kinds
from .types import Error, sorted_details
from .variants import ErrorVariant

__all__ = [
    "Error",
    "ErrorConverter",
    "ErrorKind",
    "ErrorVariant",
    "convert_result",
    "define_kinds",
    "sorted_details",
]
