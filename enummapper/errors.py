"""Domain exceptions for enum mapping."""

from __future__ import annotations

from typing import Any


class EnumMapperError(Exception):
    """Base exception for all enum mapping failures."""


class CaseIsNotEnum(EnumMapperError):
    """A supplied value is not an enumeration case."""

    def __init__(self, case: Any):
        self.case = case
        self.case_type = type(case).__name__
        super().__init__(
            f"Provided value is not an Enum. Received type: {self.case_type}. "
            "Expected an Enum member, PlainCase or ValuedCase."
        )


class CaseHasNoValue(EnumMapperError):
    """A supplied enumeration case has no backing value."""

    def __init__(self, case: Any):
        self.case = case
        self.case_type = type(case).__name__
        super().__init__(
            f"Provided Enum case has no value. Received type: {self.case_type}. "
            "Expected a valued case (str/int backed Enum member or ValuedCase)."
        )


class OptionSetConfigError(EnumMapperError, ValueError):
    """Invalid option set configuration or option set reference."""
