"""eircode — Validate, split and normalise Irish postcodes (Eircodes)."""

import logging

from eircode.exceptions import (
    ConfigurationError,
    EircodeError,
    InvalidEircodeError,
    UsageError,
)
from eircode.models import CheckOptions, Eircode
from eircode.postcode import (
    check_eircode,
    normalise_eircode,
    parse_eircode,
    split_eircode,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "check_eircode",
    "normalise_eircode",
    "split_eircode",
    "parse_eircode",
    "CheckOptions",
    "Eircode",
    "EircodeError",
    "ConfigurationError",
    "UsageError",
    "InvalidEircodeError",
]
