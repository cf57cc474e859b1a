"""Eircode validation, splitting and normalisation."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from eircode.exceptions import InvalidEircodeError, UsageError
from eircode.models import CheckOptions, Eircode

logger = logging.getLogger(__name__)

# O is never used, to avoid confusion with 0
_EIR_LETTER = "A-NP-Z"


def _fragments(letters: str) -> tuple[str, str]:
    """Return (routing_key, uid) regex fragments for a letter range."""
    letter_class = f"[{letters}]"
    any_class = f"[{letters}0-9]"
    return f"{letter_class}{any_class}{{2}}", f"{any_class}{{4}}"


_ROUTING_KEY, _UID = _fragments(_EIR_LETTER)
_ROUTING_KEY_ANY_CASE, _UID_ANY_CASE = _fragments(
    _EIR_LETTER + _EIR_LETTER.lower()
)

# Upper-case only: the non-strict path folds its input before matching.
_LAX_RE = re.compile(f"{_ROUTING_KEY}{_UID}")
_SPACED_RE = re.compile(rf"{_ROUTING_KEY}\s+{_UID}")
_SPLIT_RE = re.compile(rf"({_ROUTING_KEY_ANY_CASE})\s*({_UID_ANY_CASE})")


def check_eircode(
    data: str, opt: CheckOptions | Mapping | None = None, *extra: object
) -> bool:
    """
    Return True if *data* looks like a valid Eircode.

    *opt* selects the mode, either a CheckOptions or a mapping with the
    keys 'strict' and 'lax':

      default  space required, any case       'a65 b2cd' passes
      lax      spaces ignored, any case       'a65b2cd' passes
      strict   space required, upper case     'a65 b2cd' fails

    Raises ConfigurationError if strict and lax are both set, and
    UsageError if called with extra positional arguments. Malformed data
    never raises.
    """
    if extra:
        raise UsageError(
            "Usage: check_eircode(data, {'strict': bool, 'lax': bool})"
        )
    options = CheckOptions.from_mapping(opt)

    if options.lax:
        data = data.replace(" ", "")
    if not options.strict:
        data = data.upper()

    if not data:
        return False

    pattern = _LAX_RE if options.lax else _SPACED_RE
    if pattern.fullmatch(data) is None:
        logger.debug("Rejected Eircode %r (%s)", data, options)
        return False
    return True


def split_eircode(data: str) -> tuple[str, str]:
    """
    Split *data* into (routing_key, uid), e.g. 'a65 b2cd' -> ('a65', 'b2cd').

    Any amount of whitespace, including none, may separate the parts and
    case is ignored. The captured parts are returned unchanged.

    Raises InvalidEircodeError if *data* does not split cleanly.
    """
    match = _SPLIT_RE.fullmatch(data)
    if match is None:
        logger.debug("Cannot split Eircode %r", data)
        raise InvalidEircodeError(data)
    routing_key, uid = match.groups()
    return routing_key, uid


def normalise_eircode(data: str) -> str:
    """
    Normalise to the canonical 'RRR UUUU' form, e.g. 'a65b2cd' -> 'A65 B2CD'.

    Raises InvalidEircodeError if the input is not a valid Eircode.
    """
    cleaned = data.upper().replace(" ", "").replace("\t", "")
    routing_key, uid = split_eircode(cleaned)
    return f"{routing_key} {uid}"


def parse_eircode(data: str) -> Eircode:
    """Normalise *data* and return it as an Eircode."""
    routing_key, uid = normalise_eircode(data).split(" ")
    return Eircode(routing_key=routing_key, uid=uid)
