"""
Scenario Exception Hierarchy

Every failure the model can produce is one of the classes below. Each carries
a human-readable message, the operation that failed and any naming context
(network, system, field) needed to diagnose it without inspecting internals.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class LabscapeException(Exception):
    """Base exception class for labscape"""

    def __init__(self, message: str, operation: str = "unknown", **kwargs):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.context: Dict[str, Any] = kwargs

        logger.debug(f"* ERROR: labscape: {operation}: {message}")

    def __str__(self) -> str:
        return self.message


class MalformedInputError(LabscapeException):
    """A required field is missing or has the wrong type"""
    pass


class InvalidTopologyError(LabscapeException):
    """Subnet too small, not private, or present on a Public network"""
    pass


class UniquenessViolationError(LabscapeException):
    """Two networks or two systems share a name"""
    pass


class UnresolvedReferenceError(LabscapeException):
    """A system names a network that does not exist"""
    pass


class CapacityExhaustedError(LabscapeException):
    """More leases requested on a network than it has usable addresses"""
    pass


class WiringStateError(LabscapeException):
    """Wiring or rendering attempted in the wrong lifecycle state"""
    pass


def describe_error(error: Exception, operation: Optional[str] = None) -> str:
    """Format an error the way the CLI reports it"""
    if isinstance(error, LabscapeException):
        op = operation or error.operation
        return f"{op}: {error.message}"
    return f"{operation or 'unknown'}: {error}"
