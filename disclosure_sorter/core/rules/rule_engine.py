"""
Rule engine for the presence checks applied to raw disclosure records.

A record must carry a given name and a first surname; everything else is
optional.
"""

from collections.abc import Mapping
from typing import Any

from disclosure_sorter.core.models import ValidationResult
from disclosure_sorter.core.validators import (
    BaseValidator,
    RequiredFieldValidator,
    ValidationError,
)

# Fields without which a record cannot be named or filed.
IDENTITY_FIELDS = ("nombres", "primerApellido")


class RuleEngine:
    """
    Applies validation rules to raw records in order, collecting every
    failure rather than stopping at the first one.
    """

    VALIDATOR_REGISTRY = {
        "required_field": RequiredFieldValidator,
    }

    def __init__(self, rules: list[dict[str, Any]] | None = None):
        """
        Initialize the rule engine.

        Args:
            rules: Rule configurations, each containing rule_name, rule_type,
                   field_name and optional parameters. Defaults to the
                   identity presence checks.
        """
        self.rules = rules if rules is not None else identity_rules()
        self.validators: list[tuple[str, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        for rule in self.rules:
            rule_name = rule["rule_name"]
            validator_class = self.VALIDATOR_REGISTRY.get(rule["rule_type"])
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule['rule_type']}")

            validator = validator_class(rule["field_name"], rule.get("parameters", {}))
            self.validators.append((rule_name, validator))

    def validate_record(self, index: int, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a raw record against all rules.

        Args:
            index: Position of the record in the batch
            payload: The raw record

        Returns:
            ValidationResult containing pass/fail status and failed fields
        """
        passed_rules = []
        failed_rules = []
        failed_fields = []
        messages = []

        for rule_name, validator in self.validators:
            value = payload.get(validator.field_name)
            try:
                validator.validate(value, payload)
                passed_rules.append(rule_name)
            except ValidationError as e:
                failed_rules.append(rule_name)
                failed_fields.append(validator.field_name)
                messages.append(str(e))

        return ValidationResult(
            record_index=index,
            passed=not failed_rules,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            failed_fields=failed_fields,
            error_messages=messages,
        )


def identity_rules() -> list[dict[str, Any]]:
    """Required-field rules for the identity fields."""
    return [
        {
            "rule_name": f"{field_name}_required",
            "rule_type": "required_field",
            "field_name": field_name,
            "parameters": {},
        }
        for field_name in IDENTITY_FIELDS
    ]
