"""Token classification and merging.

A single left-to-right pass over cascade fragments. For each fragment
the merger either starts a new output token or fuses the fragment onto
the most recent token, based on a small carried state: the class of the
previous fragment and its text.

Rules are tried in order and the first that applies consumes the
fragment:

0. Line break: always its own token.
1. Digits: new token (NUMBER).
2. Unit after a number: fused onto the number (UNIT).
3. Opening bracket: held back and prefixed onto the next general token.
4. Closing bracket: fused onto the previous token.
5. Anything else: see _general_rule.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Literal

from yobreak.patterns import (
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

TokenClass = Literal[
    "UNKNOWN",
    "NUMBER",
    "UNIT",
    "BRACKET_OPEN_PENDING",
    "BRACKET_CLOSE",
    "KEYWORD",
]

TOKEN_CLASSES: tuple[TokenClass, ...] = (
    "UNKNOWN",
    "NUMBER",
    "UNIT",
    "BRACKET_OPEN_PENDING",
    "BRACKET_CLOSE",
    "KEYWORD",
)


@dataclass(frozen=True, slots=True)
class ClassifierState:
    """State carried from one fragment to the next.

    Attributes:
        word_class: Class of the previously processed fragment.
        previous: Text of the previously processed fragment. While an
            opening bracket is pending this is the bracket itself.
    """

    word_class: TokenClass
    previous: str


INITIAL_STATE = ClassifierState(word_class="UNKNOWN", previous="")

MergeRule = Callable[[str, ClassifierState, list[str]], ClassifierState | None]


def _fuse(tokens: list[str], word: str) -> None:
    """Append word onto the last token, or start a token if there is none.

    A line-break token never absorbs text.
    """
    if tokens and not is_line_break(tokens[-1]):
        tokens[-1] += word
    else:
        tokens.append(word)


def _line_break_rule(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState | None:
    if not is_line_break(word):
        return None
    # A pending opening bracket stays on its own line as a separate token
    if state.word_class == "BRACKET_OPEN_PENDING":
        tokens.append(state.previous)
    tokens.append(word)
    return INITIAL_STATE


def _number_rule(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState | None:
    if not has_number(word):
        return None
    tokens.append(word)
    return ClassifierState(word_class="NUMBER", previous=word)


def _unit_rule(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState | None:
    if state.word_class != "NUMBER" or not has_unit(word):
        return None
    _fuse(tokens, word)
    return ClassifierState(word_class="UNIT", previous=word)


def _bracket_open_rule(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState | None:
    if not has_bracket_open(word):
        return None
    return ClassifierState(word_class="BRACKET_OPEN_PENDING", previous=word)


def _bracket_close_rule(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState | None:
    if not has_bracket_close(word):
        return None
    _fuse(tokens, word)
    return ClassifierState(word_class="BRACKET_CLOSE", previous=word)


def _general_rule(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState:
    """Handle a fragment that is not a number, unit or bracket.

    a. A pending opening bracket is prefixed onto the fragment.
    b. A particle or terminator directly after an unclassified fragment
       is attached to the previous token.
    c. A particle or terminator once two tokens exist, or a hiragana
       continuation after a keyword, is attached to the previous token.
    d. Otherwise the fragment starts a new token.
    """
    particle_count = count_particles(word)
    attachable = ends_with_terminator(word) or particle_count > 0

    word_class = state.word_class
    previous = state.previous
    if word_class == "BRACKET_OPEN_PENDING":
        word = previous + word
        previous = ""
        word_class = "UNKNOWN"

    if tokens and attachable and word_class == "UNKNOWN":
        _fuse(tokens, word)
        return ClassifierState(word_class="KEYWORD", previous=word)

    continues_keyword = (
        word_class == "KEYWORD"
        and not is_single_particle(previous)
        and not ends_with_terminator(previous)
        and is_pure_hiragana(word)
    )
    if (len(tokens) > 1 and attachable) or continues_keyword:
        _fuse(tokens, word)
        if particle_count == 0:
            word_class = "UNKNOWN"
        return ClassifierState(word_class=word_class, previous=word)

    tokens.append(word)
    return ClassifierState(word_class="KEYWORD", previous=word)


# Tried in order before falling back to _general_rule
MERGE_RULES: tuple[MergeRule, ...] = (
    _line_break_rule,
    _number_rule,
    _unit_rule,
    _bracket_open_rule,
    _bracket_close_rule,
)


def classify_fragment(word: str, state: ClassifierState, tokens: list[str]) -> ClassifierState:
    """Apply the first matching rule to one fragment.

    Args:
        word: The fragment to process.
        state: State left by the previous fragment.
        tokens: Output tokens so far. Extended or grown in place.

    Returns:
        State to carry into the next fragment.
    """
    for rule in MERGE_RULES:
        next_state = rule(word, state, tokens)
        if next_state is not None:
            return next_state
    return _general_rule(word, state, tokens)


class TokenMerger:
    """Classifies cascade fragments and merges them into wrap units.

    The merger holds no state between calls. A pending opening bracket
    that is never followed by a general fragment (end of input, a
    closing bracket or a number) is dropped. Before a line break it is
    kept as a token of its own.
    """

    def merge(self, fragments: Iterable[str]) -> list[str]:
        """Merge fragments into output tokens.

        Args:
            fragments: Cascade fragments in order.

        Returns:
            Output tokens in order.
        """
        tokens: list[str] = []
        state = INITIAL_STATE
        for fragment in fragments:
            state = classify_fragment(fragment, state, tokens)
        return tokens
