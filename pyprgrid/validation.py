"""Schema-driven checks for the configuration file.

Each option is described by a `ConfigField`; `ConfigValidator` reports the
values which don't match, so the loader can replace them with the defaults.
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, get_args, get_origin

from .config import BOOL_STRINGS

__all__ = [
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
]


@dataclass
class ConfigField:
    """One configuration option.

    Attributes:
        name: key in the TOML file
        field_type: bool, int, str, list or a parametrized list (list[str])
        default: value used when the key is missing or rejected
        validator: extra checks on a well-typed value, returns error messages
    """

    name: str
    field_type: type = str
    default: Any = None
    validator: Callable[[Any], list[str]] | None = None

    @property
    def type_name(self) -> str:
        """Readable type, eg. "list[int]"."""
        origin = get_origin(self.field_type)
        if origin is None:
            return self.field_type.__name__
        return f"{origin.__name__}[{', '.join(arg.__name__ for arg in get_args(self.field_type))}]"


class ConfigItems(list):
    """The fields of a schema, in documentation order."""

    def __init__(self, *fields: ConfigField) -> None:
        super().__init__(fields)


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Return the known key closest to a misspelled one."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    return matches[0] if matches else None


def format_config_error(section: str, field: str, message: str, suggestion: str = "") -> str:
    """Build the message reported for an invalid option."""
    msg = f"[{section}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Checks a parsed configuration against a schema.

    After `validate`, `invalid_fields` holds the names of the rejected options.
    """

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Prepare the checks.

        Args:
            config: parsed configuration
            section: prefix of the messages (usually the file name)
            logger: where the unknown keys are reported
        """
        self.config = config
        self.section = section
        self.log = logger
        self.invalid_fields: set[str] = set()

    def validate(self, schema: ConfigItems) -> list[str]:
        """Return the error messages, missing options are fine."""
        errors: list[str] = []
        self.invalid_fields.clear()
        for field_def in schema:
            value = self.config.get(field_def.name)
            if value is None:
                continue
            type_error = self._check_type(field_def, value)
            field_errors = [type_error] if type_error else []
            if not type_error and field_def.validator:
                field_errors = [format_config_error(self.section, field_def.name, msg) for msg in field_def.validator(value)]
            if field_errors:
                self.invalid_fields.add(field_def.name)
                errors.extend(field_errors)
        return errors

    def _check_type(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        checker = {
            bool: self._check_bool,
            int: self._check_int,
            str: self._check_str,
            list: self._check_list,
        }.get(get_origin(field_def.field_type) or field_def.field_type)
        return checker(field_def, value) if checker else None

    def _error(self, field_def: ConfigField, value: Any, suggestion: str = "") -> str:  # noqa: ANN401
        return format_config_error(self.section, field_def.name, f"Expected {field_def.type_name}, got {type(value).__name__}", suggestion)

    def _check_bool(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        if isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_STRINGS):
            return None
        return self._error(field_def, value, "Use true/false (without quotes)")

    def _check_int(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        # bool is an int subclass, but `polling_rate = true` is a mistake
        if isinstance(value, bool):
            return self._error(field_def, value, f"Use {field_def.name} = 42")
        try:
            int(value)
        except (ValueError, TypeError):
            return self._error(field_def, value, f"Use {field_def.name} = 42 (without quotes)")
        return None

    def _check_str(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        if isinstance(value, str):
            return None
        return self._error(field_def, value, f'Use {field_def.name} = "value"')

    def _check_list(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        if not isinstance(value, list):
            return self._error(field_def, value, f'Use {field_def.name} = ["item1", "item2"]')
        item_types = get_args(field_def.field_type)
        if not item_types:
            return None
        item_type = item_types[0]
        for item in value:
            if not isinstance(item, item_type) or (isinstance(item, bool) and item_type is not bool):
                return format_config_error(self.section, field_def.name, f"Expected {field_def.type_name}, found item {item!r}")
        return None

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log (and return) a warning for every key the schema doesn't know."""
        known_keys = [field.name for field in schema]
        warnings = []
        for key in self.config:
            if key in known_keys:
                continue
            similar = _find_similar_key(key, known_keys)
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"
            self.log.warning(msg)
            warnings.append(msg)
        return warnings
