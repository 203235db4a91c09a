"""Reading of ``<origin>`` and ``<fsb:origin_offset>`` elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .errors import UrdfError
from .geometry import (
    MotionVector,
    Quaternion,
    Transform,
    Vec3,
    ezyx_to_quat,
    transform_identity,
)
from .utilities import string_to_quaternion, string_to_vector

_OFFSET_TAG = "fsb:origin_offset"


def _first_child(element: ET.Element, tag: str) -> ET.Element | None:
    """First child with exactly this tag; prefixed tags are matched as written."""
    return next((child for child in element if child.tag == tag), None)


def _read_vector(text: str, message: str) -> Vec3:
    try:
        return string_to_vector(text)
    except UrdfError as exc:
        raise UrdfError(exc.error_type, message) from exc


def _read_quaternion(text: str, message: str) -> Quaternion:
    try:
        return string_to_quaternion(text)
    except UrdfError as exc:
        raise UrdfError(exc.error_type, message) from exc


def _rpy_to_quat(rpy: Vec3) -> Quaternion:
    quat = ezyx_to_quat(Vec3(rpy.z, rpy.y, rpy.x))
    if quat.qw < 0.0:
        quat = Quaternion(-quat.qw, -quat.qx, -quat.qy, -quat.qz)
    return quat


def urdf_parse_origin(fname: str, el_name: str, el_xml: ET.Element) -> Transform:
    """Read the ``<origin>`` child of ``el_xml`` as a transform.

    A missing element or attribute leaves the identity in its place. The
    rotation comes from ``rpy`` when present, otherwise from ``quat``.
    Raises ``UrdfError`` when an attribute cannot be read.
    """
    identity = transform_identity()
    origin_xml = el_xml.find("origin")
    if origin_xml is None:
        return identity

    translation = identity.translation
    rotation = identity.rotation

    xyz = origin_xml.get("xyz")
    if xyz is not None:
        translation = _read_vector(
            xyz,
            f"Invalid origin translation xyz='{xyz}' for element '{el_name}' "
            f"in URDF file '{fname}'",
        )

    rpy = origin_xml.get("rpy")
    quat = origin_xml.get("quat")
    if rpy is not None:
        rpy_value = _read_vector(
            rpy,
            f"Invalid origin orientation rpy='{rpy}' for element '{el_name}' "
            f"in URDF file '{fname}'",
        )
        rotation = _rpy_to_quat(rpy_value)
    elif quat is not None:
        rotation = _read_quaternion(
            quat,
            f"Invalid origin orientation quat='{quat}' for element '{el_name}' "
            f"in URDF file '{fname}'",
        )

    return Transform(rotation, translation)


def urdf_parse_origin_offset(fname: str, body_name: str, body_xml: ET.Element) -> MotionVector:
    """Read the ``<fsb:origin_offset>`` child of ``body_xml`` as a motion vector.

    ``xyz`` gives the linear part and ``rotvec`` the angular part; missing
    parts are zero. Raises ``UrdfError`` when an attribute cannot be read.
    """
    offset_xml = _first_child(body_xml, _OFFSET_TAG)
    if offset_xml is None:
        return MotionVector()

    linear = Vec3()
    angular = Vec3()

    xyz = offset_xml.get("xyz")
    if xyz is not None:
        linear = _read_vector(
            xyz,
            f"Invalid offset translation xyz='{xyz}' for body '{body_name}' "
            f"in URDF file '{fname}'",
        )

    rotvec = offset_xml.get("rotvec")
    if rotvec is not None:
        angular = _read_vector(
            rotvec,
            f"Invalid offset rotation rotvec='{rotvec}' for body '{body_name}' "
            f"in URDF file '{fname}'",
        )

    return MotionVector(angular, linear)