"""Opening and closing bracket patterns across ASCII and CJK punctuation.

Each pattern matches a single glyph, so the cascade isolates every
bracket as its own fragment.
"""

from yobreak.patterns.base import compile_pattern

BRACKET_OPEN = compile_pattern(
    "bracket_open",
    r"([〈《「『｢（(\[【〔〚〖〘❮❬❪❨<{❲❰｛❴])",
)

BRACKET_CLOSE = compile_pattern(
    "bracket_close",
    r"([〉》」』｣)）\]】〕〗〙〛}>❩❫❭❯❱❳❵｝])",
)


def has_bracket_open(text: str) -> bool:
    """Check whether text contains an opening bracket or quote."""
    return BRACKET_OPEN.count(text) > 0


def has_bracket_close(text: str) -> bool:
    """Check whether text contains a closing bracket or quote."""
    return BRACKET_CLOSE.count(text) > 0
