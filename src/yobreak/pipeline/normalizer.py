"""Optional text normalization before segmentation.

Handles:
- Line ending normalization
- Japanese text normalization (neologdn + NFKC)

Segmentation does not normalize by default, because the token sequence
must reconstruct the caller's text exactly. When normalization is
enabled the tokens reconstruct the normalized text instead.
"""

import unicodedata

import neologdn


class Normalizer:
    """Normalizes Japanese text ahead of word-break segmentation.

    Applies the following transformations:
    1. Line ending normalization (CRLF/CR → LF)
    2. neologdn normalization (Japanese-specific)
    3. Unicode NFKC normalization
    """

    def __init__(self, *, repeat: int = 0) -> None:
        """Initialize the normalizer.

        Args:
            repeat: Maximum run length neologdn keeps for repeated
                characters. 0 leaves repeats alone.
        """
        self._repeat = repeat

    def normalize(self, text: str) -> str:
        """Normalize text.

        Args:
            text: Raw text.

        Returns:
            Normalized text. Empty input gives an empty string.
        """
        if not text:
            return text

        # Normalize line endings: CRLF and CR to LF
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        # neologdn trims surrounding whitespace, so lines go through one at a time
        return "\n".join(self._normalize_japanese(line) for line in text.split("\n"))

    def _normalize_japanese(self, line: str) -> str:
        """Apply Japanese-specific normalization to a single line.

        neologdn handles:
        - Full-width ASCII → half-width (Ａ→A, １→1)
        - Half-width katakana → full-width (ｶﾀｶﾅ→カタカナ)
        - Repeated prolonged sound marks (ーーー→ー)
        - Tilde/wave dash variants

        NFKC handles remaining Unicode compatibility decomposition.
        """
        line = neologdn.normalize(line, repeat=self._repeat)

        return unicodedata.normalize("NFKC", line)
