"""Segmenter - Main public interface for word-break segmentation.

Provides three segmentation methods:
- segment(): Token list, raises InvalidInputError on non-string input
- segment_safe(): Token list, or None on failure
- segment_with_metadata(): Full result with cascade fragments
"""

import logging
from dataclasses import dataclass

from yobreak.exceptions import InvalidInputError
from yobreak.pipeline.cascade import CascadeSplitter
from yobreak.pipeline.merger import TokenMerger
from yobreak.pipeline.normalizer import Normalizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SegmentationResult:
    """Full segmentation result with metadata.

    Attributes:
        tokens: Output tokens (wrap units) in order.
        fragments: Cascade fragments the tokens were merged from.
        text: The text that was segmented, after normalization if enabled.
        normalized: Whether normalization was applied.
    """

    tokens: tuple[str, ...]
    fragments: tuple[str, ...]
    text: str
    normalized: bool


class Segmenter:
    """Splits Japanese and mixed-script text into indivisible wrap units.

    The pipeline:
    1. Normalize text (optional)
    2. Split into fragments with the pattern cascade
    3. Classify fragments and merge them into tokens

    Line breaks may only be placed between tokens. Joining the tokens
    gives back the segmented text.

    Example:
        segmenter = Segmenter()

        tokens = segmenter.segment("Androidを開発した")
        # ["Androidを", "開発した"]

        result = segmenter.segment_with_metadata("500円")
        # result.fragments == ("500", "円"), result.tokens == ("500円",)
    """

    def __init__(self, *, normalize: bool = False) -> None:
        """Initialize the segmenter.

        Args:
            normalize: If True, run neologdn + NFKC normalization before
                segmenting. Tokens then reconstruct the normalized text.
        """
        self._normalizer = Normalizer() if normalize else None
        self._splitter = CascadeSplitter()
        self._merger = TokenMerger()

    @property
    def normalizes(self) -> bool:
        """Whether input is normalized before segmentation."""
        return self._normalizer is not None

    def segment(self, text: str) -> list[str]:
        """Segment text into wrap units.

        Args:
            text: Text to segment.

        Returns:
            Tokens in order. Empty input gives [""].

        Raises:
            InvalidInputError: If text is not a string.
        """
        return list(self.segment_with_metadata(text).tokens)

    def segment_safe(self, text: str) -> list[str] | None:
        """Segment text, returning None on any failure.

        Args:
            text: Text to segment.

        Returns:
            Tokens in order, or None if segmentation failed.
        """
        try:
            return self.segment(text)
        except InvalidInputError as exc:
            logger.warning("Segmentation skipped: %s", exc)
            return None
        except Exception:
            logger.exception("Unexpected error during segmentation")
            return None

    def segment_with_metadata(self, text: str) -> SegmentationResult:
        """Segment text and keep the intermediate fragments.

        Args:
            text: Text to segment.

        Returns:
            SegmentationResult with tokens, fragments and segmented text.

        Raises:
            InvalidInputError: If text is not a string.
        """
        if not isinstance(text, str):
            raise InvalidInputError(message=f"Expected str, got {type(text).__name__}")

        if self._normalizer is not None:
            text = self._normalizer.normalize(text)

        # Empty input is a defined boundary case, not derived from the cascade
        if not text:
            return SegmentationResult(
                tokens=("",),
                fragments=(),
                text=text,
                normalized=self.normalizes,
            )

        fragments = self._splitter.split(text)
        tokens = self._merger.merge(fragments)
        logger.debug("Segmented %d chars: %d fragments -> %d tokens", len(text), len(fragments), len(tokens))

        return SegmentationResult(
            tokens=tuple(tokens),
            fragments=fragments,
            text=text,
            normalized=self.normalizes,
        )


_default_segmenter = Segmenter()


def segment(text: str) -> list[str]:
    """Segment text into wrap units with the default Segmenter.

    Args:
        text: Text to segment.

    Returns:
        Tokens in order. Empty input gives [""].

    Raises:
        InvalidInputError: If text is not a string.
    """
    return _default_segmenter.segment(text)
