"""
Custom exceptions for the Registrar application.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class NullArgumentError(RegistrarException):
    """Raised when an operation receives None where an item is required."""
    
    def __init__(self, argument_name: str):
        super().__init__(
            f"Value cannot be None (parameter '{argument_name}')",
            error_code="NULL_ARGUMENT",
            details={"argument": argument_name}
        )


class InvalidArgumentError(RegistrarException):
    """Raised when a field fails a domain constraint."""
    
    def __init__(self, message: str, field: Optional[str] = None,
                 error_code: str = "INVALID_ARGUMENT", details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if field is not None:
            details["field"] = field
        super().__init__(message, error_code=error_code, details=details)
        self.field = field


ValidationError = InvalidArgumentError


class ReferenceNotFoundError(InvalidArgumentError):
    """Raised when a referenced entity id does not exist."""
    
    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            field=f"{entity_type.lower()}_id",
            error_code="REFERENCE_NOT_FOUND",
            details={"entity_type": entity_type, "entity_id": entity_id}
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass
