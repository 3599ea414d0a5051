from typing import Optional, Dict, Any

class DashboardException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class ConfigurationException(DashboardException):
    pass

class UnknownIndicatorException(DashboardException):
    def __init__(self, key: str):
        super().__init__(
            f"Unknown visualization type: {key}",
            {"key": key}
        )
        self.key = key

class ValidationException(DashboardException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class SchemaValidationException(ValidationException):
    def __init__(self, schema: str, reason: str):
        super().__init__(schema, reason)
        self.schema = schema
