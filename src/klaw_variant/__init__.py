"""klaw-variant: Option and Result types with structural matching for Python 3.13+.

Flat imports (preferred):
    from klaw_variant import Option, Some, Nothing, Result, Ok, Err
    from klaw_variant import _, range_, any_

Submodule imports (for organization):
    from klaw_variant.types import Option, Result
    from klaw_variant.patterns import Predicate, Literal
"""

# Types
from klaw_variant.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    collect,
)

# Patterns
from klaw_variant.patterns import Literal, Pattern, Predicate
from klaw_variant.predicates import _, any_, range_

# Errors
from klaw_variant.errors import MatchError, UnwrapError, VariantError

# Configuration
from klaw_variant._config import VariantConfig, get_config, init

__all__ = [
    "Err",
    "Literal",
    "MatchError",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Pattern",
    "Predicate",
    "Result",
    "Some",
    "UnwrapError",
    "VariantConfig",
    "VariantError",
    "_",
    "any_",
    "collect",
    "get_config",
    "init",
    "range_",
]
