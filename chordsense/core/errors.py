"""Exception types raised by chordsense."""


class ChordsenseError(Exception):
    """Base class for all chordsense errors."""


class InvalidNoteIdentifier(ChordsenseError, ValueError):
    """A note string that does not parse to a known pitch class."""

    def __init__(self, identifier, reason: str = "unrecognized note"):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid note identifier {identifier!r}: {reason}")


class RegistryError(ChordsenseError):
    """The pattern reference tables are inconsistent."""
