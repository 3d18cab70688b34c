"""
Strictness options for address parsing.

Leaving every option off is the AIP-40 compliant behaviour. The options exist
so integrations migrating from stricter formats can opt in to rejecting short
or unprefixed input while they transition.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

# camelCase names used by JSON payloads from UIs and other SDKs.
_ALIASES = {
    "requireLeadingZeroX": "require_leading_zero_x",
    "requireLongForm": "require_long_form",
    "requireLongFormUnlessSpecial": "require_long_form_unless_special",
}


@dataclass(frozen=True)
class ValidityOptions:
    # If set, the address string must start with 0x.
    require_leading_zero_x: bool = False
    # Only long form (64 chars + optional 0x) is accepted, special or not.
    require_long_form: bool = False
    # Only long form is accepted unless the address is special.
    require_long_form_unless_special: bool = False

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any]) -> "ValidityOptions":
        """
        Build options from a mapping with snake_case or camelCase keys.
        Values may be bools, 0/1, or the strings true/false, yes/no, on/off, 1/0.
        Unknown keys and any other value raise ConfigError.
        """
        kwargs: Dict[str, bool] = {}
        for key, value in m.items():
            name = _ALIASES.get(key, key)
            if name not in _FIELDS:
                raise ConfigError(f"unknown validity option: {key!r}", key=key)
            kwargs[name] = _as_flag(key, value)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _as_flag(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        t = value.strip().lower()
        if t in _TRUE:
            return True
        if t in _FALSE:
            return False
    raise ConfigError(f"validity option {key!r} must be a boolean, got {value!r}", key=key)


_FIELDS = frozenset(ValidityOptions.__dataclass_fields__)

DEFAULT_VALIDITY_OPTIONS = ValidityOptions()


def resolve(options: Optional[ValidityOptions]) -> ValidityOptions:
    return DEFAULT_VALIDITY_OPTIONS if options is None else options


__all__ = ["ValidityOptions", "DEFAULT_VALIDITY_OPTIONS", "resolve"]
