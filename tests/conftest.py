"""Shared test fixtures — realistic Eircodes and mode options."""

import pytest

from eircode.models import CheckOptions

# Real-world formatted codes, all upper case with a single space
VALID_EIRCODES = [
    "A65 B2CD",
    "D02 X285",
    "T12 XHT7",
    "H91 E2K3",
    "V94 T9PX",
    "D6W 1234",
    "K78 YD27",
]


@pytest.fixture(params=VALID_EIRCODES)
def valid_eircode(request) -> str:
    """Each well-formed Eircode in turn."""
    return request.param


@pytest.fixture(
    params=[CheckOptions(), CheckOptions(lax=True), CheckOptions(strict=True)],
    ids=["default", "lax", "strict"],
)
def any_mode(request) -> CheckOptions:
    """Each of the three validation modes in turn."""
    return request.param
