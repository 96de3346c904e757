"""Exceptions for yobreak word-break segmentation."""

from dataclasses import dataclass


class SegmentationError(Exception):
    """Base exception for all segmentation errors."""

    pass


@dataclass
class InvalidInputError(SegmentationError):
    """Input is not valid for segmentation.

    Raised when the value passed in is not a string. Any string,
    including the empty string, is valid input.
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class PatternCompileError(SegmentationError):
    """A pattern in the pattern library failed to compile.

    Only raised while ``yobreak.patterns`` is being imported, never
    from a segmentation call.

    Attributes:
        pattern_name: Name of the pattern that failed.
        message: Error reported by the regex engine.
    """

    pattern_name: str
    message: str

    def __str__(self) -> str:
        return f"Failed to compile pattern '{self.pattern_name}': {self.message}"
