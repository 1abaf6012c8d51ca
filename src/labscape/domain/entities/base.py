"""
Base Entity Class
"""
from abc import ABC
from pydantic import BaseModel


class Entity(BaseModel, ABC):
    """Base Entity Class"""

    model_config = {
        # ipaddress objects and entity references are stored as-is
        "arbitrary_types_allowed": True,
        "validate_assignment": False,
    }


class ValueObject(BaseModel, ABC):
    """Value Object Base Class"""

    model_config = {
        # Value objects are immutable
        "frozen": True,
        "arbitrary_types_allowed": True
    }
