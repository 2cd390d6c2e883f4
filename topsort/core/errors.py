"""Exception taxonomy and cycle-reporting helpers."""
from typing import List, Optional, Sequence


class TopsortError(Exception):
    """Base class for every error raised by topsort."""


class InvalidSeparatorError(TopsortError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name.capitalize()} separator is empty.")


class ParseError(TopsortError):
    """A pair-token with an empty source or target."""

    def __init__(self, line_no: int, line: str, token: str):
        self.line_no = line_no
        self.line = line
        self.token = token
        super().__init__(f"line {line_no}: malformed pair {token!r} in {line!r}")


def format_cycle(cycle: Sequence[str]) -> str:
    """Render a closed path as ``A -> B -> A``."""
    return " -> ".join(cycle)


class CycleError(TopsortError):
    """The graph holds at least one directed cycle.

    Attributes:
        cycle: One closed path, first and last labels equal.
        unresolved: Every node the classifier could not place, when known.
    """

    def __init__(self, cycle: Sequence[str], unresolved: Optional[Sequence[str]] = None):
        self.cycle: List[str] = list(cycle)
        self.unresolved: List[str] = list(unresolved) if unresolved else list(dict.fromkeys(cycle))
        message = f"cycle detected: {format_cycle(self.cycle)}"
        if len(self.unresolved) > len(set(self.cycle)):
            message += f" (unresolved: {', '.join(self.unresolved)})"
        super().__init__(message)


class SourceError(TopsortError):
    """Reading or parsing one input source failed."""

    def __init__(self, source: str, reason: Exception):
        self.source = source
        self.reason = reason
        super().__init__(f'Read from "{source}" failed: {reason}')


class ConfigError(TopsortError):
    pass
