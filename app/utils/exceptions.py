from fastapi import HTTPException, status
from typing import Optional


class APIException(HTTPException):
    """Flexible API Exception carrying a machine-readable code."""

    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An error occurred"

    def __init__(
        self,
        code: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        detail = {"code": code, "message": message or self.default_message}
        super().__init__(
            status_code=status_code or self.status_code_default, detail=detail
        )

    @property
    def code(self) -> str:
        return self.detail["code"]


class NotFoundError(APIException):
    """404 Not Found Error."""

    status_code_default = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class BadRequestError(APIException):
    """400 Bad Request Error."""

    status_code_default = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ServerError(APIException):
    """500 Internal Server Error."""

    default_message = "Internal server error"
