"""Named option sets declared in YAML and resolved through ``EnumMapper``.

Example ``options.yaml``::

    option_sets:
      statuses:
        enum: myapp.models:Status
        attribute: label
      payment_methods:
        enum: myapp.models:PaymentMethod
"""

from __future__ import annotations

import importlib
import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from enummapper.cases import Key, cases
from enummapper.errors import OptionSetConfigError
from enummapper.mapper import EnumMapper

logger = logging.getLogger(__name__)

_IMPORT_PATH_PATTERN = re.compile(
    r"^[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*:[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*$"
)


class OptionSet(BaseModel):
    """An enum class paired with an optional label accessor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enum: str
    attribute: str | None = None

    @field_validator("enum")
    @classmethod
    def _validate_enum_path(cls, value: str) -> str:
        normalized = value.strip()
        if not _IMPORT_PATH_PATTERN.match(normalized):
            raise ValueError("must be an import path like 'package.module:EnumClass'")
        return normalized

    @field_validator("attribute")
    @classmethod
    def _normalize_attribute(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        if not normalized:
            raise ValueError("must be a non-empty string")
        return normalized

    def resolve_enum(self) -> type[Enum]:
        """Import the configured Enum class."""
        module_name, _, qualname = self.enum.partition(":")
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as error:
            raise OptionSetConfigError(
                f"Cannot import module '{module_name}' for option set enum "
                f"'{self.enum}': {error}"
            ) from error

        for part in qualname.split("."):
            try:
                target = getattr(target, part)
            except AttributeError:
                raise OptionSetConfigError(
                    f"Option set enum '{self.enum}' was not found"
                ) from None

        if not (isinstance(target, type) and issubclass(target, Enum)):
            raise OptionSetConfigError(
                f"Option set enum '{self.enum}' is not an Enum class"
            )
        return target

    def options(self) -> dict[Key, Any]:
        """Keyed labels for every member of the configured enum."""
        return EnumMapper.key_values(cases(self.resolve_enum()), self.attribute)

    def values(self) -> list[Key]:
        """Backing values for every member of the configured enum."""
        return EnumMapper.keys(cases(self.resolve_enum()))


class OptionSetsConfig(BaseModel):
    """Collection of option sets keyed by name."""

    model_config = ConfigDict(extra="forbid")

    option_sets: dict[str, OptionSet] = Field(min_length=1)

    @field_validator("option_sets")
    @classmethod
    def _validate_names(cls, value: dict[str, OptionSet]) -> dict[str, OptionSet]:
        for name in value:
            if not name.strip():
                raise ValueError("option set names must be non-empty strings")
        return value

    def names(self) -> list[str]:
        return list(self.option_sets)

    def get(self, name: str) -> OptionSet:
        """Return an option set by name."""
        option_set = self.option_sets.get(name)
        if option_set is None:
            known = ", ".join(sorted(self.option_sets))
            raise OptionSetConfigError(f"Unknown option set '{name}'. Known: {known}")
        return option_set


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists() or not path.is_file():
        raise OptionSetConfigError(f"Option sets file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise OptionSetConfigError(
                f"Option sets file is not valid YAML: {path}: {error}"
            ) from error
    if not isinstance(raw, dict):
        raise OptionSetConfigError(f"Option sets file must be a YAML mapping: {path}")
    return raw


def load_option_sets(path: str | Path) -> OptionSetsConfig:
    """Load and validate option sets from a YAML file."""
    path = Path(path)
    raw = _load_yaml_mapping(path)

    try:
        config = OptionSetsConfig.model_validate(raw)
    except ValidationError as error:
        first = error.errors()[0]
        field_path = ".".join(str(part) for part in first.get("loc", ()))
        detail = first.get("msg", "invalid value")
        if field_path:
            raise OptionSetConfigError(
                f"Invalid option sets file '{path}' field '{field_path}': {detail}"
            ) from None
        raise OptionSetConfigError(f"Invalid option sets file '{path}': {detail}") from None

    logger.debug(f"Loaded option sets {config.names()} from {path}")
    return config
