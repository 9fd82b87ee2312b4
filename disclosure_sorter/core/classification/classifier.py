"""
Keyword classifier for procedure-type labels.
"""

from collections.abc import Sequence

from .categories import (
    DEFAULT_CATEGORY_RULES,
    REVIEW_CRITERIA_KEY,
    REVIEW_DESCRIPTION,
    UNCLASSIFIED_DESCRIPTION,
    Category,
    CategoryRule,
)


class KeywordClassifier:
    """
    Maps a single procedure-type label to a Category.

    The label is upper-cased and tested against each rule in order; the
    first rule with a keyword contained in the label decides the category.
    Labels that are empty or match nothing are UNCLASSIFIED.
    """

    def __init__(self, rules: Sequence[CategoryRule] | None = None):
        """
        Initialize the classifier.

        Args:
            rules: Ordered category rules (defaults to the built-in table)
        """
        self.rules: tuple[CategoryRule, ...] = tuple(
            DEFAULT_CATEGORY_RULES if rules is None else rules
        )
        categories = [rule.category for rule in self.rules]
        if len(categories) != len(set(categories)):
            raise ValueError("Each category may appear only once in the rule table")

    def classify(self, label: str | None) -> Category:
        if not label:
            return Category.UNCLASSIFIED

        normalized = str(label).upper()
        for rule in self.rules:
            if any(keyword in normalized for keyword in rule.keywords):
                return rule.category

        return Category.UNCLASSIFIED

    def describe_criteria(self) -> dict[str, str]:
        """Human description of the matching criteria, keyed by category."""
        criteria = {}
        for rule in self.rules:
            criteria[rule.category.value] = rule.description or ", ".join(rule.keywords)
        criteria[Category.UNCLASSIFIED.value] = UNCLASSIFIED_DESCRIPTION
        criteria[REVIEW_CRITERIA_KEY] = REVIEW_DESCRIPTION
        return criteria
