"""Core types: Option, Some, Nothing, Result, Ok, Err."""

from klaw_variant.types.option import Nothing, NothingType, Option, Some
from klaw_variant.types.result import Err, Ok, Result, collect

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "collect",
]
