"""Named, eagerly compiled patterns shared by every segmentation call."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from yobreak.exceptions import PatternCompileError


@dataclass(frozen=True, slots=True)
class NamedPattern:
    """A compiled regular expression with a stable name.

    Attributes:
        name: Identifier used in error messages and debugging output.
        regex: The compiled pattern.
    """

    name: str
    regex: re.Pattern[str]

    def count(self, text: str) -> int:
        """Count non-overlapping matches in text."""
        return sum(1 for _ in self.regex.finditer(text))

    def fullmatch(self, text: str) -> bool:
        """Whether the whole of text is one match."""
        return self.regex.fullmatch(text) is not None

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        return self.regex.finditer(text)


def compile_pattern(name: str, source: str) -> NamedPattern:
    """Compile a library pattern, failing fast on a bad expression.

    Args:
        name: Pattern name.
        source: Regular expression source.

    Returns:
        The compiled NamedPattern.

    Raises:
        PatternCompileError: If the expression does not compile.
    """
    try:
        regex = re.compile(source)
    except re.error as exc:
        raise PatternCompileError(pattern_name=name, message=str(exc)) from exc
    return NamedPattern(name=name, regex=regex)
