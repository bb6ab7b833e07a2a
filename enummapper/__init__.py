"""Public API for turning enum cases into display mappings."""

from .cases import (
    EnumCase,
    Key,
    PlainCase,
    ValuedCase,
    case_value,
    cases,
    has_value,
    is_enum_case,
)
from .errors import (
    CaseHasNoValue,
    CaseIsNotEnum,
    EnumMapperError,
    OptionSetConfigError,
)
from .mapper import EnumMapper, LabelAccessor, key_values, keys
from .option_sets import OptionSet, OptionSetsConfig, load_option_sets

__all__ = [
    "CaseHasNoValue",
    "CaseIsNotEnum",
    "EnumCase",
    "EnumMapper",
    "EnumMapperError",
    "Key",
    "LabelAccessor",
    "OptionSet",
    "OptionSetConfigError",
    "OptionSetsConfig",
    "PlainCase",
    "ValuedCase",
    "case_value",
    "cases",
    "has_value",
    "is_enum_case",
    "key_values",
    "keys",
    "load_option_sets",
]
