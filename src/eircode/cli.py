"""
Eircode Checker — Interactive CLI
=================================
Thin wrapper around the eircode library.

Usage:
    eircode                          # interactive mode
    eircode "A65 B2CD" [...]         # check one or more codes

The validation mode is read from an environment variable:
    EIRCODE_MODE   default | strict | lax

If not set, the default mode is used (space required, any case).
"""

import os
import sys

from eircode import __version__
from eircode.exceptions import ConfigurationError, EircodeError
from eircode.models import CheckOptions
from eircode.postcode import check_eircode, parse_eircode

_MODES = {
    "default": CheckOptions(),
    "strict": CheckOptions(strict=True),
    "lax": CheckOptions(lax=True),
}

_BANNER = f"""\
╔══════════════════════════════════════╗
║         Eircode Checker {__version__:<13}║
║   Validate → Split → Normalise       ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _options_from_env() -> CheckOptions:
    """Resolve EIRCODE_MODE; raises ConfigurationError on unknown values."""
    mode = os.environ.get("EIRCODE_MODE", "").strip().lower() or "default"
    try:
        return _MODES[mode]
    except KeyError:
        raise ConfigurationError(
            f"Unknown EIRCODE_MODE '{mode}', "
            f"expected one of: {', '.join(_MODES)}"
        ) from None


def _run_interactive(options: CheckOptions) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nEircode:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ Eircode is required.")
            continue
        if not check_eircode(raw, options):
            print(f"  ✗ Invalid Eircode format: '{raw}'")
            continue

        try:
            eircode = parse_eircode(raw)
        except EircodeError as exc:
            print(f"  ✗ Error: {exc}")
            continue

        print(f"  ✓ {eircode}")
        print()
        print(f"  ┌──────────────────────────────────────┐")
        print(f"  │  Routing Key   {eircode.routing_key:<22}│")
        print(f"  │  Unique ID     {eircode.uid:<22}│")
        print(f"  └──────────────────────────────────────┘")


def _check_all(codes: list[str], options: CheckOptions) -> int:
    """Print each valid code's parts; return the process exit status."""
    status = 0
    for raw in codes:
        if not check_eircode(raw, options):
            print(f"Invalid Eircode: '{raw}'", file=sys.stderr)
            status = 1
            continue
        for key, val in parse_eircode(raw).to_dict().items():
            print(f"{key:>12}: {val}")
    return status


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    args = sys.argv[1:]
    if args and args[0] in ("-h", "--help"):
        print(__doc__)
        sys.exit(0)

    try:
        options = _options_from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args:
        sys.exit(_check_all(args, options))
    _run_interactive(options)


if __name__ == "__main__":
    main()
