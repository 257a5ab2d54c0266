from typing import Any, Dict, Optional


class StringAnalyzerError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 400

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class MissingFieldError(StringAnalyzerError):
    status_code = 400


class TypeMismatchError(StringAnalyzerError):
    status_code = 422


class DuplicateStringError(StringAnalyzerError):
    status_code = 409

    def __init__(self, message: str = "String already exists in the system", extra=None):
        super().__init__(message, extra)


class StringNotFoundError(StringAnalyzerError):
    status_code = 404

    def __init__(self, message: str = "String does not exist in the system", extra=None):
        super().__init__(message, extra)


class UnparsedQueryError(StringAnalyzerError):
    status_code = 400


class FilterConflictError(StringAnalyzerError):
    status_code = 422
