"""
Custom exceptions for Enquiry Hub.
Provides consistent error handling across the application.
"""
from fastapi import HTTPException, status


class EnquiryHubException(Exception):
    """Base exception for Enquiry Hub"""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(EnquiryHubException):
    """Resource not found"""
    def __init__(self, resource: str = "Resource", resource_id: str = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)


class UnauthorizedError(EnquiryHubException):
    """Authentication failed"""
    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)


class ValidationError(EnquiryHubException):
    """Validation failed"""
    def __init__(self, message: str = "Validation failed", field: str = None):
        if field:
            message = f"Validation failed for field '{field}': {message}"
        super().__init__(message)


class StoreError(EnquiryHubException):
    """Enquiry store call failed"""
    def __init__(self, operation: str = "Store operation", message: str = None):
        msg = f"{operation} failed"
        if message:
            msg = f"{msg}: {message}"
        super().__init__(msg)


# HTTP Exception helpers
def raise_not_found(resource: str = "Resource", resource_id: str = None):
    """Raise 404 HTTPException"""
    err = NotFoundError(resource, resource_id)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=err.message)


def raise_unauthorized(message: str = "Could not validate credentials"):
    """Raise 401 HTTPException"""
    err = UnauthorizedError(message)
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=err.message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def raise_validation_error(message: str = "Validation failed", field: str = None):
    """Raise 422 HTTPException"""
    err = ValidationError(message, field)
    raise HTTPException(status_code=422, detail=err.message)
