"""Robot geometry types, URDF element parsing and periodic loop timing."""

__version__ = "0.0.1"