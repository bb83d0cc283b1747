"""Command-line options of the application."""

import os
import sys
from dataclasses import dataclass

HELP_TEXT = (
    "Allowed options:\n"
    "  --help                produce help message\n"
    "  --threads arg         Number of threads to run\n"
    "  --headless            Run in headless mode\n"
)

_KNOWN_OPTIONS = frozenset({"help", "threads", "headless"})


@dataclass
class ApplicationOptions:
    """Settings the application starts with."""

    headless: bool = False
    threads: int = 1


class HelpRequested(Exception):
    """Raised after the help text was printed instead of parsing options."""

    def __init__(self, text=HELP_TEXT):
        super().__init__("help")
        self.text = text


def _default_threads():
    count = os.cpu_count()
    return count if count is not None and count > 1 else 1


def _parse_threads(value):
    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"the argument ('{value}') for option '--threads' is invalid"
        ) from None


def parse_application_options(argv=None):
    """Parse ``argv`` (without the program name) into :class:`ApplicationOptions`.

    Unrecognised arguments are ignored.  ``--help`` prints the option summary
    and raises :class:`HelpRequested`; malformed options raise ``ValueError``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    seen = {}
    tokens = iter(args)
    for token in tokens:
        if not token.startswith("--"):
            continue
        name, has_value, value = token[2:].partition("=")
        if name not in _KNOWN_OPTIONS:
            continue
        if name in seen:
            raise ValueError(f"option '--{name}' cannot be specified more than once")
        if name == "threads":
            if not has_value:
                value = next(tokens, None)
                if value is None:
                    raise ValueError(
                        "the required argument for option '--threads' is missing"
                    )
            seen[name] = _parse_threads(value)
        else:
            if has_value:
                raise ValueError(f"option '--{name}' does not take any arguments")
            seen[name] = True

    if "help" in seen:
        print(HELP_TEXT)
        raise HelpRequested()

    return ApplicationOptions(
        headless="headless" in seen,
        threads=seen["threads"] if "threads" in seen else _default_threads(),
    )