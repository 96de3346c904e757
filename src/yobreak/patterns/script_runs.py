"""Script-run patterns: kanji, kana, Latin, digits and line breaks.

The keyword pattern isolates runs of a single script so that later
cascade stages only ever see script-homogeneous fragments (or the
punctuation and symbols left between them).
"""

from yobreak.patterns.base import compile_pattern

# Priority order inside the alternation:
# HTML entity, dotted domain, kanji, hiragana, katakana, Latin, full-width Latin
KEYWORDS = compile_pattern(
    "keywords",
    r"(&nbsp;"
    r"|[a-zA-Z0-9]+\.[a-z]{2,}"
    r"|[一-龠々〆ヵヶゝ]+"
    r"|[ぁ-んゝ]+"
    r"|[ァ-ヴー]+"
    r"|[a-zA-Z0-9]+"
    r"|[ａ-ｚＡ-Ｚ０-９]+)",
)

# ASCII digits, full-width digits and kanji numerals
NUMBERS = compile_pattern("numbers", r"([0-9０-９零一二三四五六七八九十]+)")

HIRAGANA = compile_pattern("hiragana", r"[ぁ-んゝ]+")

LINE_BREAK = compile_pattern("line_break", r"\n")


def has_number(text: str) -> bool:
    """Check whether text contains a digit or numeral run."""
    return NUMBERS.count(text) > 0


def is_pure_hiragana(text: str) -> bool:
    """Check whether text consists entirely of hiragana.

    Args:
        text: A fragment of text.

    Returns:
        True if every character is hiragana (or the ゝ iteration mark).
    """
    return HIRAGANA.fullmatch(text)


def is_line_break(text: str) -> bool:
    """Check whether text is exactly the line-break marker."""
    return LINE_BREAK.fullmatch(text)
