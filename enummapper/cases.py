"""Enumeration case model: plain and valued cases.

A case is anything with a ``name`` that belongs to a closed set of variants:

- members of Python ``enum.Enum`` classes,
- ``PlainCase`` / ``ValuedCase`` instances for variant sets that are not
  declared as ``Enum`` classes.

Enum members are *valued* when their class mixes in ``str`` or ``int``
(``StrEnum``, ``IntEnum``, ``class Status(str, Enum)``) and the member value
is a ``str`` or ``int``. Members of plain ``Enum`` classes have no backing
value, whatever object sits behind ``.value``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from enummapper.errors import CaseHasNoValue, CaseIsNotEnum

Key = Union[str, int]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


@dataclass(frozen=True)
class PlainCase:
    """A case identified only by its name."""

    name: str


@dataclass(frozen=True)
class ValuedCase:
    """A case carrying a scalar backing value."""

    name: str
    value: Key

    def __post_init__(self) -> None:
        if not _is_scalar(self.value):
            raise TypeError(
                f"ValuedCase '{self.name}' value must be str or int, "
                f"got {type(self.value).__name__}"
            )


EnumCase = Union[Enum, PlainCase, ValuedCase]


def is_enum_case(obj: Any) -> bool:
    """Whether ``obj`` is a case of some enumeration."""
    return isinstance(obj, (Enum, PlainCase, ValuedCase))


def has_value(case: Any) -> bool:
    """Whether ``case`` is a valued case."""
    if isinstance(case, ValuedCase):
        return True
    if isinstance(case, Enum):
        return isinstance(case, (str, int)) and _is_scalar(case.value)
    return False


def case_value(case: Any) -> Key:
    """Return the backing value of a valued case."""
    if not is_enum_case(case):
        raise CaseIsNotEnum(case)
    if not has_value(case):
        raise CaseHasNoValue(case)
    return case.value


def cases(enum_cls: type[Enum]) -> list[Enum]:
    """Return the members of an Enum class in definition order (no aliases)."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise CaseIsNotEnum(enum_cls)
    return list(enum_cls)
