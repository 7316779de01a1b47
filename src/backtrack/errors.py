"""Errors raised by backtrack."""


class BacktrackError(Exception):
    """Base exception for backtrack errors."""


class UnknownMilestoneError(BacktrackError):
    """Raised when a milestone name is not in the catalog."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"Unknown milestone: {name!r} (known: {', '.join(known)})")


class ConfigError(BacktrackError):
    """Raised when backtrack.toml cannot be read or validated."""


class SelectionError(BacktrackError):
    """Raised when a milestone selection lists no names."""
