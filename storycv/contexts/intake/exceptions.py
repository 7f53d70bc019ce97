"""Custom exceptions for the intake context."""

from typing import Optional


class InvalidProfileStructureError(ValueError):
    """
    Raised when a profile mapping (dict or YAML) does not match the ParsedProfile shape.

    Extraction from text never raises; this only guards profiles that were
    stored, hand-edited and loaded back.

    Attributes:
        message: Error description
        field_path: Dotted path to the offending field (e.g., 'roles[1].title')
    """

    def __init__(self, message: str, field_path: Optional[str] = None):
        self.message = message
        self.field_path = field_path

        if field_path:
            super().__init__(f"{message} (at '{field_path}')")
        else:
            super().__init__(message)
