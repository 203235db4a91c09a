"""Reading of mass and inertia from ``<inertial>`` elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .errors import UrdfError, UrdfErrorType
from .geometry import Inertia, inertia_is_positive_definite
from .utilities import string_to_real

_REQUIRED = ("ixx", "iyy", "izz")
_OPTIONAL = ("ixy", "ixz", "iyz")


def _read_real(text: str, message: str) -> float:
    try:
        return string_to_real(text)
    except UrdfError as exc:
        raise UrdfError(exc.error_type, message) from exc


def _parse_inertia_elements(fname: str, body_name: str, inertia_xml: ET.Element) -> Inertia:
    for name in _REQUIRED:
        if inertia_xml.get(name) is None:
            raise UrdfError(
                UrdfErrorType.MISSING_INERTIA_ATTRIBUTE,
                f"Missing inertia attribute {name} for body '{body_name}' in URDF file '{fname}'",
            )

    values: dict[str, float] = {}
    for name in _REQUIRED + _OPTIONAL:
        text = inertia_xml.get(name)
        if text is None:
            continue
        values[name] = _read_real(
            text,
            f"Invalid inertia {name}='{text}' for body '{body_name}' in URDF file '{fname}'",
        )

    inertia = Inertia(**values)
    if not inertia_is_positive_definite(inertia):
        raise UrdfError(
            UrdfErrorType.BODY_INERTIA_NOT_POSITIVE_DEFINITE,
            f"Inertia is not positive definite for body '{body_name}' in URDF file '{fname}'",
        )
    return inertia


def urdf_parse_inertia_mass(
    fname: str, body_name: str, inertial_xml: ET.Element
) -> tuple[float, Inertia]:
    """Read ``(mass, inertia)`` from the children of an ``<inertial>`` element.

    Off-diagonal inertia entries default to zero. Raises ``UrdfError`` when an
    element or attribute is missing, a value cannot be read, or the inertia is
    not positive definite.
    """
    mass_xml = inertial_xml.find("mass")
    inertia_xml = inertial_xml.find("inertia")
    if mass_xml is None:
        raise UrdfError(
            UrdfErrorType.MISSING_BODY_MASS,
            f"Missing <mass> element for body '{body_name}' in URDF file '{fname}'",
        )
    if inertia_xml is None:
        raise UrdfError(
            UrdfErrorType.MISSING_BODY_INERTIA,
            f"Missing <inertia> element for body '{body_name}' in URDF file '{fname}'",
        )

    mass_text = mass_xml.get("value")
    if mass_text is None:
        raise UrdfError(
            UrdfErrorType.MISSING_MASS_VALUE_ATTRIBUTE,
            f"Missing mass value attribute for body '{body_name}' in URDF file '{fname}'",
        )
    mass = _read_real(
        mass_text,
        f"Invalid mass value='{mass_text}' for body '{body_name}' in URDF file '{fname}'",
    )

    inertia = _parse_inertia_elements(fname, body_name, inertia_xml)
    return mass, inertia