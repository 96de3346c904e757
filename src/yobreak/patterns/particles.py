"""Japanese particle (joshi) patterns.

Particles are short function words and suffixes that stay attached to
the word they follow. Longer alternatives come first so that, for
example, について wins over に at the same position.
"""

from yobreak.patterns.base import compile_pattern

# Alternation order matters: re tries alternatives left to right
_PARTICLE_WORDS: tuple[str, ...] = (
    "でなければ",
    "について",
    "かしら",
    "くらい",
    "けれど",
    "なのか",
    "ばかり",
    "ながら",
    "ことよ",
    "こそ",
    "こと",
    "さえ",
    "しか",
    "した",
    "たり",
    "だけ",
    "だに",
    "だの",
    "つつ",
    "ても",
    "てよ",
    "でも",
    "とも",
    "から",
    "など",
    "なり",
    "ので",
    "のに",
    "ほど",
    "まで",
    "もの",
    "やら",
    "より",
    "って",
    "で",
    "と",
    "な",
    "に",
    "ね",
    "の",
    "も",
    "は",
    "ば",
    "へ",
    "や",
    "わ",
    "を",
    "か",
    "が",
    "さ",
    "し",
    "ぞ",
    "て",
)

PARTICLES = compile_pattern("particles", "(" + "|".join(_PARTICLE_WORDS) + ")")

# Particles after which a following hiragana run is not glued on
SINGLE_PARTICLE = compile_pattern("single_particle", r"[とのに]")


def count_particles(text: str) -> int:
    """Count particle occurrences in text.

    Args:
        text: A fragment of text.

    Returns:
        Number of non-overlapping particle matches.
    """
    return PARTICLES.count(text)


def is_single_particle(text: str) -> bool:
    """Check whether text is exactly と, の or に."""
    return SINGLE_PARTICLE.fullmatch(text)
