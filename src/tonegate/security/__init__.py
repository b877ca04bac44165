"""Security utilities -- boundary input validation and text sanitising."""
from .sanitize import sanitize_text
from .validators import (
    ValidationError,
    validate_in_choices,
    validate_length,
    validate_not_empty,
    validate_text_input,
)
