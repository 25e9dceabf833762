from fastapi import status


class StringAnalyzerError(Exception):
    """Base error; carries the HTTP status it maps to at the handler boundary"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StringAnalyzerError):
    """Malformed request body or query"""
    status_code = status.HTTP_400_BAD_REQUEST


class MissingFieldError(ValidationError):
    status_code = status.HTTP_400_BAD_REQUEST


class WrongTypeError(ValidationError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(StringAnalyzerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
