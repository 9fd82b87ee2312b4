"""
Record validation rules and classification rule configuration.
"""

from .rule_config import ClassificationConfigLoader
from .rule_engine import IDENTITY_FIELDS, RuleEngine, identity_rules

__all__ = [
    "ClassificationConfigLoader",
    "IDENTITY_FIELDS",
    "RuleEngine",
    "identity_rules",
]
