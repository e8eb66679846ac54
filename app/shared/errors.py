# app/shared/errors.py
from typing import Optional


class AppError(Exception):
    """Errors the HTTP layer renders as {"detail": message, "kind": kind}."""
    status_code: int = 400
    kind: Optional[str] = None

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    status_code = 404
    kind = "NotFound"


class CreationFailedError(AppError):
    status_code = 500
    kind = "CreationFailed"
