"""
RequiredFieldValidator - ensures an identity field is present and not empty.
"""

from collections.abc import Mapping
from typing import Any

from disclosure_sorter.utils.fields import is_absent

from .base_validator import BaseValidator, ValidationError


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and not null/empty.

    Fails if:
    - Field is missing from the record
    - Field value is None
    - Field value is an empty or whitespace-only string
    - Field value is another falsy scalar (0, false)
    """

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if self.field_name not in record:
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message="Field is missing from record"
            )

        if value is None:
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message="Field value is null"
            )

        if isinstance(value, str):
            if value.strip() == "":
                raise ValidationError(
                    rule_name="required_field",
                    field_name=self.field_name,
                    message="Field value is empty string"
                )
        elif is_absent(value):
            raise ValidationError(
                rule_name="required_field",
                field_name=self.field_name,
                message=f"Field value is empty ({value!r})"
            )

    @property
    def rule_type(self) -> str:
        return "required_field"
