"""Reading of ``<joint>`` elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum, auto

from .errors import UrdfError, UrdfErrorType
from .geometry import Transform, transform_identity, vector_abs, vector_norm, vector_scale
from .origin import urdf_parse_origin
from .utilities import string_to_real, string_to_vector

_TOL = 1.0e-9


class JointType(Enum):
    """Kinds of joint between two bodies."""

    FIXED = auto()
    REVOLUTE_X = auto()
    REVOLUTE_Y = auto()
    REVOLUTE_Z = auto()
    PRISMATIC_X = auto()
    PRISMATIC_Y = auto()
    PRISMATIC_Z = auto()
    SPHERICAL = auto()
    CARTESIAN = auto()
    PLANAR = auto()


_TYPE_NAMES = {
    "revolute": JointType.REVOLUTE_Z,
    "continuous": JointType.REVOLUTE_Z,
    "prismatic": JointType.PRISMATIC_Z,
    "fixed": JointType.FIXED,
    "planar": JointType.PLANAR,
    "spherical": JointType.SPHERICAL,
    "floating": JointType.CARTESIAN,
    "cartesian": JointType.CARTESIAN,
}

_AXIS_VARIANTS = {
    JointType.REVOLUTE_Z: (JointType.REVOLUTE_X, JointType.REVOLUTE_Y, JointType.REVOLUTE_Z),
    JointType.PRISMATIC_Z: (JointType.PRISMATIC_X, JointType.PRISMATIC_Y, JointType.PRISMATIC_Z),
}

_SINGLE_AXIS = frozenset(variant for variants in _AXIS_VARIANTS.values() for variant in variants)


@dataclass(frozen=True)
class UrdfJointLimits:
    """Joint position and velocity limits as written in the description."""

    set: bool = False
    lower_position: float = 0.0
    upper_position: float = 0.0
    max_velocity: float = 0.0


@dataclass(frozen=True)
class UrdfJoint:
    """A joint read from a robot description."""

    joint_name: str = ""
    joint_type: JointType = JointType.FIXED
    reversed: bool = False
    parent_name: str = ""
    child_name: str = ""
    parent_child_transform: Transform = field(default_factory=transform_identity)
    limits: UrdfJointLimits = field(default_factory=UrdfJointLimits)


def _parse_axis(
    fname: str, joint_name: str, axis_xml: ET.Element, joint_type: JointType
) -> tuple[JointType, bool]:
    variants = _AXIS_VARIANTS.get(joint_type)
    axis_text = axis_xml.get("xyz")
    if variants is None or axis_text is None:
        return joint_type, False

    message = (
        f"Invalid joint '{joint_name}' axis direction xyz='{axis_text}' in URDF file '{fname}'"
    )
    try:
        axis = string_to_vector(axis_text)
    except UrdfError as exc:
        raise UrdfError(UrdfErrorType.JOINT_INVALID_AXIS, message) from exc

    norm = vector_norm(axis)
    if norm <= _TOL:
        return joint_type, False

    unit = vector_abs(vector_scale(1.0 / norm, axis))
    magnitudes = (unit.x, unit.y, unit.z)
    components = (axis.x, axis.y, axis.z)
    for index, variant in enumerate(variants):
        others = (value for other, value in enumerate(magnitudes) if other != index)
        if magnitudes[index] > 1.0 - _TOL and all(value < _TOL for value in others):
            return variant, components[index] < 0.0
    raise UrdfError(UrdfErrorType.JOINT_INVALID_AXIS, message)


def _parse_name_type(fname: str, joint_xml: ET.Element) -> tuple[str, JointType, bool]:
    joint_name = joint_xml.get("name")
    type_name = joint_xml.get("type")
    if joint_name is None:
        raise UrdfError(
            UrdfErrorType.MISSING_NAME,
            f"Joint name attribute is missing in URDF file '{fname}'",
        )
    if type_name is None:
        raise UrdfError(UrdfErrorType.MISSING_JOINT_TYPE, "Joint type attribute is missing")

    joint_type = _TYPE_NAMES.get(type_name)
    if joint_type is None:
        raise UrdfError(
            UrdfErrorType.INVALID_JOINT_TYPE,
            f"Invalid joint type '{type_name}' in URDF file '{fname}'",
        )

    reversed_axis = False
    axis_xml = joint_xml.find("axis")
    if axis_xml is not None:
        joint_type, reversed_axis = _parse_axis(fname, joint_name, axis_xml, joint_type)
    return joint_name, joint_type, reversed_axis


def _link_name(fname: str, joint_name: str, link_xml: ET.Element, role: str, error_type: UrdfErrorType) -> str:
    link = link_xml.get("link")
    if link is None:
        raise UrdfError(
            error_type,
            f"Missing link attribute in joint '{joint_name}' <{role}> element "
            f"in URDF file '{fname}'",
        )
    return link


def _parse_parent_child(
    fname: str, joint_name: str, joint_xml: ET.Element
) -> tuple[str, str, Transform]:
    parent_xml = joint_xml.find("parent")
    child_xml = joint_xml.find("child")
    if parent_xml is None:
        raise UrdfError(
            UrdfErrorType.MISSING_JOINT_PARENT,
            f"Joint '{joint_name}' <parent> element is missing in URDF file '{fname}'",
        )
    if child_xml is None:
        raise UrdfError(
            UrdfErrorType.MISSING_JOINT_CHILD,
            f"Joint '{joint_name}' <child> element is missing in URDF file '{fname}'",
        )
    parent_name = _link_name(
        fname, joint_name, parent_xml, "parent", UrdfErrorType.MISSING_PARENT_LINK_ATTRIBUTE
    )
    child_name = _link_name(
        fname, joint_name, child_xml, "child", UrdfErrorType.MISSING_CHILD_LINK_ATTRIBUTE
    )
    transform = urdf_parse_origin(fname, joint_name, joint_xml)
    return parent_name, child_name, transform


def _parse_limits(
    fname: str, joint_name: str, joint_xml: ET.Element, joint_type: JointType
) -> UrdfJointLimits:
    limit_xml = joint_xml.find("limit")
    if limit_xml is None or joint_type not in _SINGLE_AXIS:
        return UrdfJointLimits()

    def read(attribute: str) -> float | None:
        text = limit_xml.get(attribute)
        if text is None:
            return None
        try:
            return string_to_real(text)
        except UrdfError as exc:
            raise UrdfError(
                UrdfErrorType.JOINT_LIMITS_PARSE_ERROR,
                f"Invalid joint '{joint_name}' limit {attribute}='{text}' "
                f"in URDF file '{fname}'",
            ) from exc

    lower = read("lower")
    upper = read("upper")
    velocity = read("velocity")
    return UrdfJointLimits(
        set=lower is not None or upper is not None,
        lower_position=0.0 if lower is None else lower,
        upper_position=0.0 if upper is None else upper,
        max_velocity=0.0 if velocity is None else velocity,
    )


def urdf_parse_joint(fname: str, joint_xml: ET.Element) -> UrdfJoint:
    """Read a ``<joint>`` element.

    Revolute and prismatic joints take their axis from ``<axis xyz>``, which
    must lie along x, y or z; a negative direction marks the joint reversed.
    Limits are read only for single-axis joints. Raises ``UrdfError`` on any
    missing or invalid part.
    """
    joint_name, joint_type, reversed_axis = _parse_name_type(fname, joint_xml)
    parent_name, child_name, transform = _parse_parent_child(fname, joint_name, joint_xml)
    limits = _parse_limits(fname, joint_name, joint_xml, joint_type)
    return UrdfJoint(
        joint_name=joint_name,
        joint_type=joint_type,
        reversed=reversed_axis,
        parent_name=parent_name,
        child_name=child_name,
        parent_child_transform=transform,
        limits=limits,
    )