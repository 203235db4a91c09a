import pytest

from fsbkin.errors import UrdfError, UrdfErrorType
from fsbkin.geometry import MotionVector, Vec3
from fsbkin.origin import urdf_parse_origin, urdf_parse_origin_offset
from fsbkin.xmlutil import parse_xml

FILE_NAME = "file_name"
ELEMENT_NAME = "element_name"
HEADER = "<?xml version='1.0' encoding='UTF-8'?>"


def _root(body: str):
    return parse_xml(HEADER + body)


def _approx(value):
    return pytest.approx(value, rel=1e-12, abs=1e-12)


def test_parse_identity_origin():
    tr = urdf_parse_origin(
        FILE_NAME, ELEMENT_NAME, _root('<root><origin xyz="0.0 0.0 0.0" rpy="0.0 0.0 0.0"/></root>')
    )
    assert tr.translation == Vec3(0.0, 0.0, 0.0)
    assert (tr.rotation.qw, tr.rotation.qx, tr.rotation.qy, tr.rotation.qz) == (1.0, 0.0, 0.0, 0.0)


def test_parse_arbitrary_origin():
    tr = urdf_parse_origin(
        FILE_NAME,
        ELEMENT_NAME,
        _root('<root><origin xyz="1.0 2.0 3.0" rpy="0.10 -0.5 0.121"/></root>'),
    )
    assert tr.translation == Vec3(1.0, 2.0, 3.0)
    assert tr.rotation.qw == _approx(0.9651834299409254)
    assert tr.rotation.qx == _approx(0.06327695587919153)
    assert tr.rotation.qy == _approx(-0.24371474027338194)
    assert tr.rotation.qz == _approx(0.07085265552970922)


def test_parse_origin_with_quaternion():
    tr = urdf_parse_origin(
        FILE_NAME,
        ELEMENT_NAME,
        _root('<root><origin xyz="1.0 2.0 3.0" quat="0.10 -0.5 0.121 0.0"/></root>'),
    )
    assert tr.translation == Vec3(1.0, 2.0, 3.0)
    assert tr.rotation.qw == _approx(0.19081711005660068)
    assert tr.rotation.qx == _approx(-0.9540855502830033)
    assert tr.rotation.qy == _approx(0.2308887031684868)
    assert tr.rotation.qz == _approx(0.0)


def test_invalid_quaternion():
    xml = _root('<root><origin xyz="1.0 2.0 3.0" quat="0.10 -0.5 0.121"/></root>')
    with pytest.raises(UrdfError) as info:
        urdf_parse_origin(FILE_NAME, ELEMENT_NAME, xml)
    assert info.value.error_type == UrdfErrorType.VALUE_CONVERSION_FAILED
    assert info.value.description == (
        "Invalid origin orientation quat='0.10 -0.5 0.121' for element 'element_name' "
        "in URDF file 'file_name'"
    )


def test_origin_xyz_failure():
    xml = _root('<root><origin xyz="inf 2.0 3.0" rpy="0.10 -0.5 0.121"/></root>')
    with pytest.raises(UrdfError) as info:
        urdf_parse_origin(FILE_NAME, ELEMENT_NAME, xml)
    assert info.value.error_type == UrdfErrorType.RANGE_ERROR
    assert info.value.description == (
        "Invalid origin translation xyz='inf 2.0 3.0' for element 'element_name' "
        "in URDF file 'file_name'"
    )


def test_origin_rpy_failure():
    xml = _root('<root><origin xyz="1.0 2.0 3.0" rpy="0.10 -0.5 !0.121"/></root>')
    with pytest.raises(UrdfError) as info:
        urdf_parse_origin(FILE_NAME, ELEMENT_NAME, xml)
    assert info.value.error_type == UrdfErrorType.VALUE_CONVERSION_FAILED
    assert info.value.description == (
        "Invalid origin orientation rpy='0.10 -0.5 !0.121' for element 'element_name' "
        "in URDF file 'file_name'"
    )


def test_origin_missing_element():
    tr = urdf_parse_origin(FILE_NAME, ELEMENT_NAME, _root("<root></root>"))
    assert tr.translation == Vec3(0.0, 0.0, 0.0)
    assert (tr.rotation.qw, tr.rotation.qx, tr.rotation.qy, tr.rotation.qz) == (1.0, 0.0, 0.0, 0.0)


def test_origin_missing_rpy_attribute():
    tr = urdf_parse_origin(FILE_NAME, ELEMENT_NAME, _root('<root><origin xyz="1.0 2.0 3.0" /></root>'))
    assert tr.translation == Vec3(1.0, 2.0, 3.0)
    assert (tr.rotation.qw, tr.rotation.qx, tr.rotation.qy, tr.rotation.qz) == (1.0, 0.0, 0.0, 0.0)


def test_origin_rotation_has_non_negative_scalar():
    tr = urdf_parse_origin(
        FILE_NAME, ELEMENT_NAME, _root('<root><origin rpy="0.0 0.0 4.0"/></root>')
    )
    assert tr.rotation.qw >= 0.0


def test_parse_zero_origin_offset():
    offset = urdf_parse_origin_offset(
        FILE_NAME,
        ELEMENT_NAME,
        _root('<root><fsb:origin_offset xyz="0.0 0.0 0.0" rotvec="0.0 0.0 0.0"/></root>'),
    )
    assert offset == MotionVector()


def test_parse_arbitrary_origin_offset():
    offset = urdf_parse_origin_offset(
        FILE_NAME,
        ELEMENT_NAME,
        _root('<root><fsb:origin_offset xyz="1.0 2.0 3.0" rotvec="0.1 0.2 0.3"/></root>'),
    )
    assert offset.angular == Vec3(0.1, 0.2, 0.3)
    assert offset.linear == Vec3(1.0, 2.0, 3.0)


def test_origin_offset_missing_element_is_zero():
    offset = urdf_parse_origin_offset(FILE_NAME, ELEMENT_NAME, _root("<root><origin/></root>"))
    assert offset == MotionVector()


def test_invalid_origin_offset_translation():
    xml = _root('<root><fsb:origin_offset xyz="0.0 0.0 z" rotvec="0.0 0.0 0.0"/></root>')
    with pytest.raises(UrdfError) as info:
        urdf_parse_origin_offset(FILE_NAME, ELEMENT_NAME, xml)
    assert info.value.error_type == UrdfErrorType.VALUE_CONVERSION_FAILED
    assert info.value.description == (
        "Invalid offset translation xyz='0.0 0.0 z' for body 'element_name' "
        "in URDF file 'file_name'"
    )


def test_invalid_origin_offset_rotation():
    xml = _root('<root><fsb:origin_offset xyz="0.0 0.0 0.0" rotvec="0.0 0.0"/></root>')
    with pytest.raises(UrdfError) as info:
        urdf_parse_origin_offset(FILE_NAME, ELEMENT_NAME, xml)
    assert info.value.error_type == UrdfErrorType.VALUE_CONVERSION_FAILED
    assert info.value.description == (
        "Invalid offset rotation rotvec='0.0 0.0' for body 'element_name' "
        "in URDF file 'file_name'"
    )