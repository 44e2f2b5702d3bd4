from tailmerge.validation.validator import (
    ValidationError,
    validate,
    validate_or_raise,
    validate_tailwind_order,
)

__all__ = ["ValidationError", "validate", "validate_or_raise", "validate_tailwind_order"]
