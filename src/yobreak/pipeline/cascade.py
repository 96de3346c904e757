"""Cascade splitting of text into script and pattern fragments.

The cascade applies a fixed, ordered tuple of patterns. Each stage
re-splits every fragment produced by the previous stage, so a span
isolated early (a kanji run, say) can still be divided by a later stage
if that stage matches inside it. The stages run one by one, never as a
single combined pattern, and their order must not change.
"""

from functools import reduce

from yobreak.patterns import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    KEYWORDS,
    LINE_BREAK,
    NUMBERS,
    PARTICLES,
    NamedPattern,
)

# Stage order is significant
CASCADE_STAGES: tuple[NamedPattern, ...] = (
    KEYWORDS,
    PARTICLES,
    NUMBERS,
    BRACKET_OPEN,
    BRACKET_CLOSE,
    LINE_BREAK,
)


def split_one(pattern: NamedPattern, text: str) -> tuple[str, ...]:
    """Split text into matched and unmatched runs of a single pattern.

    Matches are found left to right without overlap. Each match and each
    non-empty gap around the matches becomes a fragment, so joining the
    result gives back text exactly.

    Args:
        pattern: Pattern to split on.
        text: Text to split.

    Returns:
        Fragments in original order. Empty text gives an empty tuple.
    """
    fragments: list[str] = []
    previous_end = 0

    for match in pattern.finditer(text):
        start, end = match.span()
        if start != previous_end:
            fragments.append(text[previous_end:start])
        fragments.append(match.group())
        previous_end = end

    if previous_end != len(text):
        fragments.append(text[previous_end:])

    return tuple(fragments)


def split_cascade(stages: tuple[NamedPattern, ...], text: str) -> tuple[str, ...]:
    """Run text through every stage in order.

    Args:
        stages: Ordered patterns to apply.
        text: Text to split.

    Returns:
        Flat tuple of fragments whose concatenation equals text.
    """
    return reduce(
        lambda fragments, stage: tuple(
            piece for fragment in fragments for piece in split_one(stage, fragment)
        ),
        stages,
        (text,) if text else (),
    )


class CascadeSplitter:
    """Splits text into fragments using the fixed cascade of patterns."""

    def __init__(self, stages: tuple[NamedPattern, ...] = CASCADE_STAGES) -> None:
        """Initialize the splitter.

        Args:
            stages: Patterns to apply in order. Defaults to CASCADE_STAGES.
        """
        self._stages = stages

    @property
    def stages(self) -> tuple[NamedPattern, ...]:
        """The patterns applied, in order."""
        return self._stages

    def split(self, text: str) -> tuple[str, ...]:
        """Split text into cascade fragments."""
        return split_cascade(self._stages, text)
