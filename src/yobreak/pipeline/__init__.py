"""Pipeline components for word-break segmentation."""

from yobreak.pipeline.cascade import CASCADE_STAGES, CascadeSplitter, split_cascade, split_one
from yobreak.pipeline.merger import (
    INITIAL_STATE,
    MERGE_RULES,
    TOKEN_CLASSES,
    ClassifierState,
    TokenClass,
    TokenMerger,
    classify_fragment,
)
from yobreak.pipeline.normalizer import Normalizer

__all__ = [
    "CASCADE_STAGES",
    "CascadeSplitter",
    "ClassifierState",
    "INITIAL_STATE",
    "MERGE_RULES",
    "Normalizer",
    "TOKEN_CLASSES",
    "TokenClass",
    "TokenMerger",
    "classify_fragment",
    "split_cascade",
    "split_one",
]
