# fsbkin

Building blocks for reading robot descriptions (URDF) in Python.

- **Geometry** (`fsbkin.geometry`): frozen dataclasses `Vec3`, `Quaternion`
  (scalar part `qw` first), `Transform`, `MotionVector`, `Inertia` and the
  trajectory states `TrajState` and `TrajState3`. Helpers: `vector_add`,
  `vector_subtract`, `vector_cross`, `vector_dot`, `vector_scale`,
  `vector_norm`, `vector_abs`, `quat_identity`, `quat_norm`,
  `quat_normalize`, `ezyx_to_quat`, `transform_identity` and
  `inertia_is_positive_definite`.
- **XML loading** (`fsbkin.xmlutil`): `parse_xml` and `parse_xml_file` return
  the root element as an `xml.etree.ElementTree.Element`. Prefixed tags such
  as `fsb:origin_offset` are kept exactly as written and need no namespace
  declaration.
- **URDF element parsing**:
  - `fsbkin.origin.urdf_parse_origin` reads an `<origin>` child (`xyz`, and
    `rpy` or `quat`) into a `Transform`; `urdf_parse_origin_offset` reads an
    `<fsb:origin_offset>` child (`xyz`, `rotvec`) into a `MotionVector`.
  - `fsbkin.inertial.urdf_parse_inertia_mass` reads an `<inertial>` element
    and returns `(mass, inertia)`; the inertia must be positive definite.
  - `fsbkin.joint.urdf_parse_joint` reads a `<joint>` element into a
    `UrdfJoint`, with its `JointType`, axis direction, parent and child link
    names, origin transform and `UrdfJointLimits`.
- **Value parsing** (`fsbkin.utilities`): `string_to_real`,
  `split_string_spaces`, `string_to_vector` and `string_to_quaternion`.
- **Periodic timing** (`fsbkin.timing`): `PeriodicTimer`, a fixed-rate loop
  timer on the monotonic clock.

Problems are reported by raising `fsbkin.errors.UrdfError`, which carries a
`UrdfErrorType` in `error_type` and a message in `description`, or
`fsbkin.timing.TimingError`, which carries a `TimingErrorKind` in `kind`.

## Installation

```
pip install .
```

## Parsing an origin

```python
from fsbkin.xmlutil import parse_xml
from fsbkin.origin import urdf_parse_origin

root = parse_xml('<link><origin xyz="1 2 3" rpy="0.1 -0.5 0.121"/></link>')
transform = urdf_parse_origin("robot.urdf", "link", root)
print(transform.translation, transform.rotation)
```

## Parsing a joint and an inertial

```python
from fsbkin.xmlutil import parse_xml
from fsbkin.joint import JointType, urdf_parse_joint
from fsbkin.inertial import urdf_parse_inertia_mass

joint_xml = parse_xml(
    '<joint name="elbow" type="revolute">'
    '<parent link="upper"/><child link="lower"/>'
    '<axis xyz="0 -1 0"/><limit lower="-1.5" upper="1.5" velocity="2.0"/>'
    '</joint>'
)
joint = urdf_parse_joint("robot.urdf", joint_xml)
assert joint.joint_type is JointType.REVOLUTE_Y and joint.reversed

inertial_xml = parse_xml(
    '<inertial><mass value="1.1"/>'
    '<inertia ixx="1.0" iyy="2.0" izz="3.0"/></inertial>'
)
mass, inertia = urdf_parse_inertia_mass("robot.urdf", "lower", inertial_xml)
```

## Errors

```python
from fsbkin.errors import UrdfError, UrdfErrorType
from fsbkin.utilities import string_to_vector

try:
    string_to_vector("0.0 0.0")
except UrdfError as err:
    assert err.error_type is UrdfErrorType.VALUE_CONVERSION_FAILED
```

## A fixed-rate loop

```python
from fsbkin.timing import PeriodicTimer

timer = PeriodicTimer()
timer.initialize(10_000_000)   # 10 ms step, in nanoseconds
timer.start()
for _ in range(5):
    nominal, remainder = timer.step()
```

`initialize` raises `TimingError` when the step is below the clock resolution
or below 10 000 ns. `step` sleeps until the next target time and returns the
target time since `start` and how late the wake-up was, both in seconds.

## What it does not do

The package reads individual URDF elements: origins, inertials and joints.
It does not read a whole `<robot>` document into a tree of bodies and joints,
check that link and joint names are unique, or compute kinematics or
dynamics. It has no command-line tool.

## Tests

```
pip install .[test]
pytest
```