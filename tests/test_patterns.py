"""Tests for the pattern library."""

import pytest

from yobreak import PatternCompileError
from yobreak.patterns import (
    KEYWORDS,
    compile_pattern,
    count_particles,
    ends_with_terminator,
    has_bracket_close,
    has_bracket_open,
    has_number,
    has_unit,
    is_line_break,
    is_pure_hiragana,
    is_single_particle,
)


class TestParticles:
    """Tests for particle (joshi) detection."""

    def test_single_particles(self) -> None:
        """Common one-character particles are detected."""
        assert count_particles("は") == 1
        assert count_particles("を") == 1
        assert count_particles("が") == 1

    def test_longest_particle_wins(self) -> None:
        """Longer particles are matched before their prefixes."""
        assert count_particles("について") == 1
        assert count_particles("でなければ") == 1

    def test_multiple_particles_counted(self) -> None:
        """Each non-overlapping particle counts once."""
        assert count_particles("はを") == 2

    def test_no_particle_in_kanji_or_latin(self) -> None:
        """Kanji, katakana and Latin text carry no particles."""
        assert count_particles("猫") == 0
        assert count_particles("カタカナ") == 0
        assert count_particles("Android") == 0

    def test_single_particle_exact(self) -> None:
        """Only と, の and に on their own count as a single particle."""
        assert is_single_particle("と")
        assert is_single_particle("の")
        assert is_single_particle("に")
        assert not is_single_particle("は")
        assert not is_single_particle("のに")
        assert not is_single_particle("")


class TestNumbersAndUnits:
    """Tests for numeral and unit detection."""

    def test_ascii_digits(self) -> None:
        """ASCII digits count as numbers."""
        assert has_number("500")

    def test_fullwidth_digits(self) -> None:
        """Full-width digits count as numbers."""
        assert has_number("５００")

    def test_kanji_numerals(self) -> None:
        """Kanji numerals count as numbers."""
        assert has_number("十二")
        assert has_number("零")

    def test_no_number(self) -> None:
        """Text without numerals has no number."""
        assert not has_number("abc")
        assert not has_number("猫")

    def test_units_anywhere(self) -> None:
        """Units match as a substring of the fragment."""
        assert has_unit("円")
        assert has_unit("km")
        assert has_unit("メートル")
        assert has_unit("％")
        assert has_unit("$")

    def test_not_a_unit(self) -> None:
        """Ordinary words are not units."""
        assert not has_unit("猫")
        assert not has_unit("は")


class TestBracketsAndTerminators:
    """Tests for bracket and punctuation detection."""

    def test_opening_brackets(self) -> None:
        """ASCII and CJK opening brackets are detected."""
        assert has_bracket_open("「")
        assert has_bracket_open("（")
        assert has_bracket_open("(")
        assert has_bracket_open("【")

    def test_closing_brackets(self) -> None:
        """ASCII and CJK closing brackets are detected."""
        assert has_bracket_close("」")
        assert has_bracket_close("）")
        assert has_bracket_close(")")
        assert has_bracket_close("】")

    def test_brackets_do_not_cross(self) -> None:
        """Opening and closing sets are disjoint."""
        assert not has_bracket_open("」")
        assert not has_bracket_close("「")

    def test_terminator_at_end(self) -> None:
        """Trailing punctuation is detected."""
        assert ends_with_terminator("です。")
        assert ends_with_terminator("、")
        assert ends_with_terminator("!?")

    def test_terminator_not_at_end(self) -> None:
        """Punctuation earlier in the fragment does not count."""
        assert not ends_with_terminator("。です")
        assert not ends_with_terminator("猫")


class TestScriptRuns:
    """Tests for script run patterns."""

    def test_pure_hiragana(self) -> None:
        """Only all-hiragana text is pure hiragana."""
        assert is_pure_hiragana("ひらがな")
        assert not is_pure_hiragana("ひらカナ")
        assert not is_pure_hiragana("猫は")
        assert not is_pure_hiragana("")

    def test_line_break(self) -> None:
        """Only a single newline is the line-break marker."""
        assert is_line_break("\n")
        assert not is_line_break("\n\n")
        assert not is_line_break("a")

    def test_keyword_matches_domain_before_latin(self) -> None:
        """A dotted domain is one keyword rather than two Latin runs."""
        matches = [m.group() for m in KEYWORDS.finditer("example.comへ")]
        assert matches == ["example.com", "へ"]

    def test_keyword_matches_html_space_entity(self) -> None:
        """The &nbsp; entity is one keyword."""
        matches = [m.group() for m in KEYWORDS.finditer("&nbsp;です")]
        assert matches == ["&nbsp;", "です"]


class TestCompilePattern:
    """Tests for eager pattern compilation."""

    def test_valid_pattern(self) -> None:
        """A valid expression compiles into a usable NamedPattern."""
        pattern = compile_pattern("digits", r"\d+")

        assert pattern.name == "digits"
        assert pattern.count("a1b22") == 2
        assert pattern.fullmatch("123")

    def test_invalid_pattern_fails_fast(self) -> None:
        """A broken expression raises PatternCompileError with its name."""
        with pytest.raises(PatternCompileError) as exc_info:
            compile_pattern("broken", "(")

        assert exc_info.value.pattern_name == "broken"
        assert "broken" in str(exc_info.value)
