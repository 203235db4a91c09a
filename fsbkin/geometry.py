"""Small geometric value types and the vector and rotation helpers used by the URDF reader."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec3:
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion with the scalar part first."""

    qw: float = 1.0
    qx: float = 0.0
    qy: float = 0.0
    qz: float = 0.0


@dataclass(frozen=True)
class Transform:
    """Rigid coordinate transform: a rotation followed by a translation."""

    rotation: Quaternion = field(default_factory=Quaternion)
    translation: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class MotionVector:
    """Spatial motion vector with angular and linear parts."""

    angular: Vec3 = field(default_factory=Vec3)
    linear: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class Inertia:
    """Symmetric rotational inertia tensor given by its six distinct entries."""

    ixx: float = 0.0
    iyy: float = 0.0
    izz: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyz: float = 0.0


@dataclass(frozen=True)
class TrajState:
    """Scalar trajectory state."""

    position: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0
    jerk: float = 0.0


@dataclass(frozen=True)
class TrajState3:
    """Vector trajectory state."""

    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    jerk: Vec3 = field(default_factory=Vec3)


def vector_add(vec_a: Vec3, vec_b: Vec3) -> Vec3:
    """Return ``vec_a + vec_b``."""
    return Vec3(vec_a.x + vec_b.x, vec_a.y + vec_b.y, vec_a.z + vec_b.z)


def vector_subtract(vec_a: Vec3, vec_b: Vec3) -> Vec3:
    """Return ``vec_a - vec_b``."""
    return Vec3(vec_a.x - vec_b.x, vec_a.y - vec_b.y, vec_a.z - vec_b.z)


def vector_cross(vec_a: Vec3, vec_b: Vec3) -> Vec3:
    """Return the cross product ``vec_a x vec_b``."""
    return Vec3(
        vec_a.y * vec_b.z - vec_a.z * vec_b.y,
        vec_a.z * vec_b.x - vec_a.x * vec_b.z,
        vec_a.x * vec_b.y - vec_a.y * vec_b.x,
    )


def vector_dot(vec_a: Vec3, vec_b: Vec3) -> float:
    """Return the dot product of two vectors."""
    return vec_a.x * vec_b.x + vec_a.y * vec_b.y + vec_a.z * vec_b.z


def vector_scale(scalar: float, vec: Vec3) -> Vec3:
    """Return ``scalar * vec``."""
    return Vec3(scalar * vec.x, scalar * vec.y, scalar * vec.z)


def vector_norm(vec: Vec3) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(vector_dot(vec, vec))


def vector_abs(vec: Vec3) -> Vec3:
    """Return the component-wise absolute value of a vector."""
    return Vec3(abs(vec.x), abs(vec.y), abs(vec.z))


def quat_identity() -> Quaternion:
    """Return the identity rotation."""
    return Quaternion(1.0, 0.0, 0.0, 0.0)


def quat_norm(quat: Quaternion) -> float:
    """Return the length of a quaternion."""
    return math.sqrt(quat.qw**2 + quat.qx**2 + quat.qy**2 + quat.qz**2)


def quat_normalize(quat: Quaternion) -> Quaternion:
    """Return the quaternion scaled to unit length; a zero quaternion is returned unchanged."""
    norm = quat_norm(quat)
    if norm == 0.0:
        return quat
    return Quaternion(quat.qw / norm, quat.qx / norm, quat.qy / norm, quat.qz / norm)


def ezyx_to_quat(euler: Vec3) -> Quaternion:
    """Convert intrinsic z-y-x Euler angles to a quaternion.

    ``euler.x`` is the angle about z, ``euler.y`` about the new y and
    ``euler.z`` about the final x axis.
    """
    cos_z, sin_z = math.cos(0.5 * euler.x), math.sin(0.5 * euler.x)
    cos_y, sin_y = math.cos(0.5 * euler.y), math.sin(0.5 * euler.y)
    cos_x, sin_x = math.cos(0.5 * euler.z), math.sin(0.5 * euler.z)
    return Quaternion(
        cos_x * cos_y * cos_z + sin_x * sin_y * sin_z,
        sin_x * cos_y * cos_z - cos_x * sin_y * sin_z,
        cos_x * sin_y * cos_z + sin_x * cos_y * sin_z,
        cos_x * cos_y * sin_z - sin_x * sin_y * cos_z,
    )


def transform_identity() -> Transform:
    """Return the identity transform."""
    return Transform(quat_identity(), Vec3())


def inertia_is_positive_definite(inertia: Inertia) -> bool:
    """Tell whether the inertia tensor is positive definite (all leading minors positive)."""
    minor1 = inertia.ixx
    minor2 = inertia.ixx * inertia.iyy - inertia.ixy**2
    minor3 = (
        inertia.ixx * (inertia.iyy * inertia.izz - inertia.iyz**2)
        - inertia.ixy * (inertia.ixy * inertia.izz - inertia.iyz * inertia.ixz)
        + inertia.ixz * (inertia.ixy * inertia.iyz - inertia.iyy * inertia.ixz)
    )
    return minor1 > 0.0 and minor2 > 0.0 and minor3 > 0.0