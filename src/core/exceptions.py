"""Custom exceptions for the application."""

from typing import Optional

from fastapi import HTTPException, status
from ..utils.messages import get_message


class ValidationError(HTTPException):
    """Exception raised when required input is missing or invalid."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message
        )


class NotFoundError(HTTPException):
    """Exception raised when a program or identity cannot be resolved."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=message or get_message("crud", "not_found")
        )


class ProgramNotFoundError(NotFoundError):
    """Exception raised when a program is absent or inactive."""

    def __init__(self, program_id: Optional[int] = None):
        if program_id is not None:
            message = get_message("program", "not_found_with_id", program_id=program_id)
        else:
            message = get_message("program", "not_found")
        super().__init__(message)
        self.program_id = program_id


class CapacityError(HTTPException):
    """Exception raised when a program has no free slot left."""

    def __init__(self, program_id: Optional[int] = None):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=get_message("program", "full")
        )
        self.program_id = program_id


class ConflictError(HTTPException):
    """Exception raised when a mentee already holds an enrollment in the program."""

    def __init__(self, program_id: Optional[int] = None, mentee_id: Optional[int] = None):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=get_message("program", "already_joined")
        )
        self.program_id = program_id
        self.mentee_id = mentee_id


class InfrastructureError(HTTPException):
    """Exception raised when the store is unavailable or times out. Safe to retry."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message or get_message("infrastructure", "unavailable"),
            headers={"Retry-After": "1"}
        )
