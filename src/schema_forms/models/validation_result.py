"""
Validation result models.

CheckResult is the outcome of running one field's compiled rules.
SubmitResult is what the form controller returns when asked to submit.
"""

from typing import Any

from pydantic import BaseModel, Field


class CheckResult(BaseModel):
    """Outcome of validating a single value: valid, or the first failure."""

    valid: bool = Field(..., description="Whether every rule passed")
    rule: str | None = Field(default=None, description="Kind of the first failing rule")
    message: str | None = Field(default=None, description="Message of the first failing rule")

    model_config = {"frozen": True}

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, rule: str, message: str) -> "CheckResult":
        return cls(valid=False, rule=rule, message=message)


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Name of the field with error")
    error_type: str = Field(..., description="Type of validation error")
    message: str = Field(..., description="Human-readable error message")
    received: Any | None = Field(default=None, description="Received value")


class SubmitResult(BaseModel):
    """Result of a submission attempt."""

    is_valid: bool = Field(..., description="Whether the form was accepted")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Submitted values if valid"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Non-blocking warnings"
    )

    @property
    def error_count(self) -> int:
        """Number of fields that blocked the submission."""
        return len(self.errors)

    def get_field_error(self, field_name: str) -> FieldValidationError | None:
        """The error recorded for a field, if any."""
        for error in self.errors:
            if error.field_name == field_name:
                return error
        return None

    def error_map(self) -> dict[str, str]:
        """Field name to message, one entry per failing field."""
        return {error.field_name: error.message for error in self.errors}
