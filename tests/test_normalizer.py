"""Tests for the Normalizer component."""

from yobreak import Normalizer


class TestNormalizerBasic:
    """Basic normalization tests."""

    def test_plain_text(self) -> None:
        """Plain text passes through unchanged."""
        normalizer = Normalizer()

        assert normalizer.normalize("猫は犬") == "猫は犬"

    def test_empty_input(self) -> None:
        """Empty input stays empty."""
        normalizer = Normalizer()

        assert normalizer.normalize("") == ""

    def test_crlf_normalization(self) -> None:
        """CRLF line endings are converted to LF."""
        normalizer = Normalizer()

        assert normalizer.normalize("猫\r\nは") == "猫\nは"

    def test_cr_normalization(self) -> None:
        """Bare CR line endings are converted to LF."""
        normalizer = Normalizer()

        assert normalizer.normalize("猫\rは") == "猫\nは"

    def test_blank_lines_preserved(self) -> None:
        """Blank lines survive normalization."""
        normalizer = Normalizer()

        assert normalizer.normalize("猫\n\n犬") == "猫\n\n犬"


class TestJapaneseNormalization:
    """Japanese-specific normalization tests."""

    def test_fullwidth_ascii_to_halfwidth(self) -> None:
        """Full-width ASCII characters become half-width."""
        normalizer = Normalizer()

        assert normalizer.normalize("ＡＢＣ１２３") == "ABC123"

    def test_halfwidth_katakana_to_fullwidth(self) -> None:
        """Half-width katakana becomes full-width."""
        normalizer = Normalizer()

        assert normalizer.normalize("ｶﾀｶﾅ") == "カタカナ"

    def test_prolonged_sound_marks(self) -> None:
        """Repeated prolonged sound marks are reduced."""
        normalizer = Normalizer()
        result = normalizer.normalize("すごーーーい")

        assert "ーーー" not in result
        assert "ー" in result

    def test_repeat_limit(self) -> None:
        """Repeated characters are capped when repeat is set."""
        normalizer = Normalizer(repeat=2)

        assert normalizer.normalize("わーいwwwwww") == "わーいww"
