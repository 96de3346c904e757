"""Measurement unit words and symbols.

Units are matched anywhere in a fragment. A unit fragment is only fused
when it directly follows a number, so the loose match is harmless for
ordinary words.
"""

from yobreak.patterns.base import compile_pattern

_UNIT_WORDS: tuple[str, ...] = (
    "px",
    "point",
    "＄",
    r"\$",
    "€",
    "￥",
    "ノット",
    "ユーロ",
    "ドル",
    "円",
    "里",
    "百",
    "千",
    "万",
    "億",
    "兆",
    "京",
    "㌫",
    "％",
    "%",
    "cm",
    "m",
    "km",
    "㌢",
    "㍍",
    "㌖",
    "センチメートル",
    "メートル",
    "キロ",
    "キロメートル",
    "°",
    "度",
    "ℓ",
    "リットル",
    "mℓ",
    "ミリリットル",
    "マイル",
    "フィート",
)

UNITS = compile_pattern("units", "(" + "|".join(_UNIT_WORDS) + ")")


def has_unit(text: str) -> bool:
    """Check whether text contains a unit word or symbol."""
    return UNITS.count(text) > 0
