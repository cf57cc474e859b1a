"""Typed value models for eircode."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from eircode.exceptions import ConfigurationError, UsageError


@dataclass(frozen=True)
class CheckOptions:
    """Validation mode for check_eircode. strict and lax are exclusive."""

    strict: bool = False     # exact case, separator required
    lax: bool = False        # spaces ignored entirely

    def __post_init__(self) -> None:
        if self.strict and self.lax:
            raise ConfigurationError(
                "Can't be strict and lax at the same time"
            )

    @classmethod
    def from_mapping(
        cls, opt: CheckOptions | Mapping | None
    ) -> CheckOptions:
        """
        Build options from an existing CheckOptions or a mapping; any
        falsy value (None, False, 0, "") means the default mode.

        Only the 'strict' and 'lax' keys of a mapping are read; anything
        else is ignored. Raises UsageError for any other type.
        """
        if not opt:
            return cls()
        if isinstance(opt, cls):
            return opt
        if isinstance(opt, Mapping):
            return cls(
                strict=bool(opt.get("strict")),
                lax=bool(opt.get("lax")),
            )
        raise UsageError(
            "Usage: check_eircode(data, {'strict': bool, 'lax': bool})"
        )


@dataclass(frozen=True)
class Eircode:
    """A normalised Eircode split into its two parts."""

    routing_key: str         # e.g. 'A65', identifies the area
    uid: str                 # e.g. 'B2CD', identifies the address

    def __str__(self) -> str:
        return f"{self.routing_key} {self.uid}"

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "eircode": str(self),
            "routing_key": self.routing_key,
            "uid": self.uid,
        }
