from .grammar import (
    LineKind,
    classify_line,
    parse_cookbook,
    parse_signature,
    validate_cookbook,
)
from .models import VARIADIC_MARKER, Cookbook, Recipe

__all__ = [
    "VARIADIC_MARKER",
    "Cookbook",
    "LineKind",
    "Recipe",
    "classify_line",
    "parse_cookbook",
    "parse_signature",
    "validate_cookbook",
]
