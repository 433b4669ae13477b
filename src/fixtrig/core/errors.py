class FixtrigError(Exception):
    """Base error."""

class TableFormatError(FixtrigError):
    """Raised when an amplitude table is malformed or does not conform to the quarter-wave contract."""
