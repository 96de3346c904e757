"""yobreak - Word-break segmentation for Japanese and mixed-script text."""

from yobreak.exceptions import (
    InvalidInputError,
    PatternCompileError,
    SegmentationError,
)
from yobreak.pipeline import (
    CASCADE_STAGES,
    TOKEN_CLASSES,
    CascadeSplitter,
    ClassifierState,
    Normalizer,
    TokenClass,
    TokenMerger,
    split_cascade,
    split_one,
)
from yobreak.segmenter import SegmentationResult, Segmenter, segment

__version__ = "0.1.0"

__all__ = [
    "CASCADE_STAGES",
    "CascadeSplitter",
    "ClassifierState",
    "InvalidInputError",
    "Normalizer",
    "PatternCompileError",
    "SegmentationError",
    "SegmentationResult",
    "Segmenter",
    "TOKEN_CLASSES",
    "TokenClass",
    "TokenMerger",
    "segment",
    "split_cascade",
    "split_one",
]
