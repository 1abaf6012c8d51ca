"""Core Module - exceptions and logging shared by every layer"""

from .exceptions import (
    LabscapeException,
    MalformedInputError,
    InvalidTopologyError,
    UniquenessViolationError,
    UnresolvedReferenceError,
    CapacityExhaustedError,
    WiringStateError,
)
from .unified_logger import get_logger, LoggerFactory, LogFormat

__all__ = [
    'LabscapeException',
    'MalformedInputError',
    'InvalidTopologyError',
    'UniquenessViolationError',
    'UnresolvedReferenceError',
    'CapacityExhaustedError',
    'WiringStateError',
    'get_logger',
    'LoggerFactory',
    'LogFormat',
]
