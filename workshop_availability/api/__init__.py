from workshop_availability.api.validation import ValidationResult, validate_availability_request

__all__ = ["ValidationResult", "validate_availability_request"]
