"""Pattern library for Japanese word-break segmentation.

All patterns are compiled when this package is imported. A pattern that
fails to compile raises PatternCompileError at import time.
"""

from yobreak.patterns.base import NamedPattern, compile_pattern
from yobreak.patterns.brackets import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    has_bracket_close,
    has_bracket_open,
)
from yobreak.patterns.particles import (
    PARTICLES,
    SINGLE_PARTICLE,
    count_particles,
    is_single_particle,
)
from yobreak.patterns.punctuation import TERMINATORS, ends_with_terminator
from yobreak.patterns.script_runs import (
    HIRAGANA,
    KEYWORDS,
    LINE_BREAK,
    NUMBERS,
    has_number,
    is_line_break,
    is_pure_hiragana,
)
from yobreak.patterns.units import UNITS, has_unit

__all__ = [
    "BRACKET_CLOSE",
    "BRACKET_OPEN",
    "HIRAGANA",
    "KEYWORDS",
    "LINE_BREAK",
    "NUMBERS",
    "NamedPattern",
    "PARTICLES",
    "SINGLE_PARTICLE",
    "TERMINATORS",
    "UNITS",
    "compile_pattern",
    "count_particles",
    "ends_with_terminator",
    "has_bracket_close",
    "has_bracket_open",
    "has_number",
    "has_unit",
    "is_line_break",
    "is_pure_hiragana",
    "is_single_particle",
]
