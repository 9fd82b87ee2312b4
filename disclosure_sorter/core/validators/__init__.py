"""
Validation rule implementations.

Only presence checks are performed on raw disclosure records.
"""

from .base_validator import BaseValidator, ValidationError
from .required_field_validator import RequiredFieldValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
]
