from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from exceptions import ValidationException


class FeedbackSubmission(BaseModel):
    """Request body for the feedback form with sanitization."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Siti Rahma",
                "email": "siti@example.id",
                "message": "Grafik NTP sangat membantu, mohon tambahkan data per kabupaten."
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=254)
    message: str = Field(..., min_length=3, max_length=2000)

    @field_validator("name", "message")
    @classmethod
    def sanitize_text(cls, v, info):
        from utils.validation import InputValidator

        try:
            return InputValidator.sanitize_text(v, field=info.field_name)
        except ValidationException as e:
            raise ValueError(e.message) from e

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        from utils.validation import InputValidator

        if v is None or not v.strip():
            return None
        try:
            return InputValidator.validate_email(v)
        except ValidationException as e:
            raise ValueError(e.message) from e
