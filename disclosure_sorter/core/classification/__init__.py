"""
Keyword-based classification of procedure-type labels.
"""

from .categories import (
    DEFAULT_CATEGORY_RULES,
    REVIEW_BUCKET,
    Category,
    CategoryRule,
)
from .classifier import KeywordClassifier

__all__ = [
    "Category",
    "CategoryRule",
    "DEFAULT_CATEGORY_RULES",
    "KeywordClassifier",
    "REVIEW_BUCKET",
]
