"""
Type hinting compatibility and utility abstractions.

This module centralizes type-related imports so the rest of the library
has a single entry point for its type hinting needs.
"""

from typing import (
    Any,
    Dict,
    List,
    Type,
    Tuple,
    Union,
    Generic,
    Mapping,
    TypeVar,
    Optional,
    NamedTuple,
    TYPE_CHECKING,
)

# Explicitly defining __all__ ensures that IDEs and static analysis tools
# treat this module as a clean public API for typing.
__all__ = [
    "Any",
    "Dict",
    "List",
    "Type",
    "Tuple",
    "Union",
    "Generic",
    "Mapping",
    "TypeVar",
    "Optional",
    "NamedTuple",
    "TYPE_CHECKING",
]
