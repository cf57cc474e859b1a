"""Custom exception hierarchy for eircode."""


class EircodeError(Exception):
    """Base exception for all eircode errors."""


class ConfigurationError(EircodeError):
    """Mutually exclusive or unrecognised validation options were requested."""


class UsageError(EircodeError):
    """A function was called with a malformed argument list."""


class InvalidEircodeError(EircodeError):
    """The provided string does not split into a routing key and UID."""

    def __init__(self, eircode: str):
        self.eircode = eircode
        super().__init__(f"Invalid Eircode: '{eircode}'")
