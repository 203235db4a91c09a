"""Errors raised while reading robot descriptions."""

from __future__ import annotations

from enum import Enum, auto


class UrdfErrorType(Enum):
    """Kinds of failure when reading a robot description."""

    VALUE_CONVERSION_FAILED = auto()
    RANGE_ERROR = auto()
    PARSE_ERROR = auto()
    MISSING_ROBOT = auto()
    MISSING_NAME = auto()
    REPEATED_NAME = auto()
    MISSING_BODY_INERTIAL = auto()
    MISSING_BODY_MASS = auto()
    MISSING_BODY_INERTIA = auto()
    MISSING_MASS_VALUE_ATTRIBUTE = auto()
    MISSING_INERTIA_ATTRIBUTE = auto()
    BODY_INERTIA_NOT_POSITIVE_DEFINITE = auto()
    BODY_PRINCIPAL_INERTIA = auto()
    MISSING_JOINT_TYPE = auto()
    INVALID_JOINT_TYPE = auto()
    JOINT_INVALID_AXIS = auto()
    JOINT_LIMITS_PARSE_ERROR = auto()
    MISSING_JOINT_PARENT = auto()
    MISSING_JOINT_CHILD = auto()
    MISSING_PARENT_LINK_ATTRIBUTE = auto()
    MISSING_CHILD_LINK_ATTRIBUTE = auto()
    JOINT_PARENT_BODY_NOT_FOUND = auto()
    JOINT_CHILD_BODY_NOT_FOUND = auto()
    BODY_TREE_ERROR = auto()


class UrdfError(Exception):
    """A robot description could not be read; carries a kind and a description."""

    def __init__(self, error_type: UrdfErrorType, description: str) -> None:
        super().__init__(description)
        self.error_type = error_type
        self.description = description

    def __str__(self) -> str:
        return self.description