from fastapi import status
from fastapi.responses import JSONResponse

class ApplicationException(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_response(self):
        return JSONResponse(
            status_code=self.status_code,
            content={"error": self.message}
        )


class ConflictError(ApplicationException):
    """Existing state forbids the operation, e.g. starting while a session is active."""

    def __init__(self, message: str = "Active session already exists"):
        super().__init__(message, status.HTTP_409_CONFLICT)


class NotFoundError(ApplicationException):
    """The operation needs state that does not exist, e.g. an active session."""

    def __init__(self, message: str = "No active session found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)
