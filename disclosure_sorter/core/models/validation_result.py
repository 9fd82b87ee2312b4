"""
ValidationResult model representing the outcome of the presence checks on a
raw record (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of validating a record.

    Attributes:
        record_index: Position of the record in the batch
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Rules that failed
        failed_fields: Fields named by the failed rules
        error_messages: One message per failed rule
    """

    record_index: int = Field(..., ge=0)
    passed: bool
    passed_rules: list[str] = Field(default_factory=list)
    failed_rules: list[str] = Field(default_factory=list)
    failed_fields: list[str] = Field(default_factory=list)
    error_messages: list[str] = Field(default_factory=list)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "record_index": 3,
                "passed": False,
                "passed_rules": ["nombres_required"],
                "failed_rules": ["primerApellido_required"],
                "failed_fields": ["primerApellido"],
                "error_messages": ["[required_field] primerApellido: Field is missing from record"]
            }
        }
