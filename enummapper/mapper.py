"""Transform enumeration cases into display mappings (form options, filters)."""

from __future__ import annotations

import inspect
import logging
from functools import cached_property
from typing import Any, Callable, Iterable, Optional, Union

from enummapper.cases import EnumCase, Key, has_value, is_enum_case
from enummapper.errors import CaseHasNoValue, CaseIsNotEnum

logger = logging.getLogger(__name__)

LabelAccessor = Union[str, Callable[[Any], Any]]

_MISSING = object()


def _accepts_no_arguments(member: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(member)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); assume zero-arg call works
        return True
    return all(
        parameter.default is not inspect.Parameter.empty
        or parameter.kind
        in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in signature.parameters.values()
    )


def _resolve_label(case: EnumCase, attribute: Optional[LabelAccessor]) -> Any:
    """Label from the accessor if it can be used, otherwise the case name."""
    if attribute is None:
        return case.name
    if callable(attribute):
        return attribute(case)

    static = inspect.getattr_static(case, attribute, _MISSING)
    if static is _MISSING:
        return case.name
    if isinstance(static, (property, cached_property)):
        return getattr(case, attribute)

    member = getattr(case, attribute)
    if callable(member) and _accepts_no_arguments(member):
        return member()
    return case.name


class EnumMapper:
    """Stateless utility turning enum cases into keyed labels or value lists.

    Use it when rendering enum lists in templates or view models::

        EnumMapper.key_values(list(Status), "label")
        # {"active": "Active", "inactive": "Inactive"}
    """

    @staticmethod
    def key_values(
        cases: Iterable[Any], attribute: Optional[LabelAccessor] = None
    ) -> dict[Key, Any]:
        """Map each case's key to its label.

        The key is the backing value of valued cases and the name of plain
        cases. The label comes from ``attribute`` when it names a computed
        property or zero-argument method on the case (or is a callable taking
        the case); otherwise it is the case name. Later cases overwrite earlier
        ones with the same key.

        Raises:
            CaseIsNotEnum: If any item is not an enumeration case.

        ``CaseHasNoValue`` belongs to the mapper's error family but is never
        raised here: plain cases fall back to their name as key.
        """
        transformed: dict[Key, Any] = {}
        for case in cases:
            if not is_enum_case(case):
                raise CaseIsNotEnum(case)

            key = case.value if has_value(case) else case.name
            transformed[key] = _resolve_label(case, attribute)

        logger.debug(f"Mapped {len(transformed)} enum key(s) to labels")
        return transformed

    @staticmethod
    def keys(cases: Iterable[Any]) -> list[Key]:
        """Return the backing value of each case, in input order.

        Raises:
            CaseIsNotEnum: If any item is not an enumeration case.
            CaseHasNoValue: If any case is a plain case.
        """
        values: list[Key] = []
        for case in cases:
            if not is_enum_case(case):
                raise CaseIsNotEnum(case)
            if not has_value(case):
                raise CaseHasNoValue(case)
            values.append(case.value)

        logger.debug(f"Extracted {len(values)} enum value(s)")
        return values


def key_values(
    cases: Iterable[Any], attribute: Optional[LabelAccessor] = None
) -> dict[Key, Any]:
    """Module-level shortcut for ``EnumMapper.key_values``."""
    return EnumMapper.key_values(cases, attribute)


def keys(cases: Iterable[Any]) -> list[Key]:
    """Module-level shortcut for ``EnumMapper.keys``."""
    return EnumMapper.keys(cases)
