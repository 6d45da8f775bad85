from fastapi import status


class ClinicServiceError(Exception):
    """Base class for errors that map onto a client-facing HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict:
        return {self.body_key: self.message}


class NotFound(ClinicServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    body_key = "message"


class InvalidArgument(ClinicServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ClinicNotFound(NotFound):
    def __init__(self, clinic_id: int):
        super().__init__("找不到該診所")
        self.clinic_id = clinic_id
