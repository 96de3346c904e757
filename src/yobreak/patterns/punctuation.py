"""Sentence-ending punctuation."""

from yobreak.patterns.base import compile_pattern

# One or more terminators at the very end of a fragment
TERMINATORS = compile_pattern("terminators", r"([.,。、！!？?]+)$")


def ends_with_terminator(text: str) -> bool:
    """Check whether text ends with sentence-ending punctuation.

    Args:
        text: A fragment of text.

    Returns:
        True if the fragment ends in one of . , 。 、 ！ ! ？ ?
    """
    return TERMINATORS.count(text) > 0
