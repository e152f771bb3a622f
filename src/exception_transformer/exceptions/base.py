"""
Errors raised by the transformation utilities.
"""

# canonical library-level exception

class ExceptionTransformerError(Exception):
    """
    Base exception for failures detected while transforming an API error payload.

    - message: human-friendly description of what went wrong
    - path: optional dotted path (or field name) the failure relates to
    - error_code: canonical short code (e.g., 'invalid_argument', 'unexpected_shape')
    """

    def __init__(self, message: str, *, path: str | None = None, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.path:
            parts.append(f"path: {self.path}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict describing the failure.
        Standard shape:
            {
                "detail": "fieldName can be string only",
                "code": "invalid_argument",    # optional canonical code
                "path": "additional_info.name" # optional
            }
        """
        payload = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.path:
            payload["path"] = self.path
        return payload


class InvalidArgumentError(ExceptionTransformerError):
    """Raised when a path, field name or payload argument has the wrong type."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message, path=path, error_code="invalid_argument")


class UnexpectedShapeError(ExceptionTransformerError):
    """Raised when an error detail holds a value none of the detail shapes can render."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message, path=path, error_code="unexpected_shape")


__all__ = [
    "ExceptionTransformerError",
    "InvalidArgumentError",
    "UnexpectedShapeError",
]
