import re

from exceptions import ValidationException


class InputValidator:

    SCRIPT_PATTERNS = [
        re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL),
        re.compile(r"javascript:", re.IGNORECASE),
        re.compile(r"<[^>]*\bon\w+\s*=", re.IGNORECASE),
        re.compile(r"<iframe", re.IGNORECASE),
    ]

    EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

    @staticmethod
    def sanitize_text(value: str, field: str = "text", max_length: int = 2000) -> str:
        if value is None or not value.strip():
            raise ValidationException(field, "cannot be empty")

        value = value.strip()

        if len(value) > max_length:
            raise ValidationException(field, f"cannot exceed {max_length} characters")

        for pattern in InputValidator.SCRIPT_PATTERNS:
            if pattern.search(value):
                raise ValidationException(field, "contains suspicious HTML/JavaScript patterns")

        value = InputValidator.CONTROL_CHARS_PATTERN.sub('', value)

        value = re.sub(r'[ \t]+', ' ', value)

        return value

    @staticmethod
    def validate_email(value: str) -> str:
        value = value.strip().lower()
        if not InputValidator.EMAIL_PATTERN.match(value):
            raise ValidationException("email", "is not a valid address")
        return value

    @staticmethod
    def sanitize_filter_value(value: str, max_length: int = 100) -> str:
        if not value:
            return ""

        value = str(value).strip()

        if len(value) > max_length:
            value = value[:max_length]

        return InputValidator.CONTROL_CHARS_PATTERN.sub('', value)
