"""Device identification data reported by the relay board node."""

from __future__ import annotations

from dataclasses import dataclass

GUID_LENGTH = 16

_DEFAULT_GUID = bytes(14) + bytes((0x01, 0x00))


def _check(value: int, maximum: int, name: str) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be in 0..{maximum:#x}, got {value}")


@dataclass(frozen=True)
class DeviceConfig:
    """Identification and version data of a node."""

    guid: bytes = _DEFAULT_GUID
    node_zone: int = 0xFF
    node_sub_zone: int = 0xFF
    manufacturer_id: int = 0x0000
    manufacturer_device_id: int = 0x00000000
    manufacturer_sub_device_id: int = 0x00000000
    mdf_url: str = "www.example.com/vscp/rb01.xml"
    version_major: int = 0
    version_minor: int = 2
    version_sub_minor: int = 2
    standard_device_family_code: int = 0x00000000
    standard_device_type: int = 0x00000000
    node_zone_persistent: bool = True
    node_sub_zone_persistent: bool = True

    def __post_init__(self) -> None:
        guid = bytes(self.guid)
        if len(guid) != GUID_LENGTH:
            raise ValueError(f"GUID must be {GUID_LENGTH} bytes, got {len(guid)}")
        object.__setattr__(self, "guid", guid)
        _check(self.node_zone, 0xFF, "node zone")
        _check(self.node_sub_zone, 0xFF, "node sub zone")
        _check(self.manufacturer_id, 0xFFFF, "manufacturer id")
        _check(self.manufacturer_device_id, 0xFFFFFFFF, "manufacturer device id")
        _check(self.manufacturer_sub_device_id, 0xFFFFFFFF, "manufacturer sub device id")
        _check(self.version_major, 0xFF, "major version")
        _check(self.version_minor, 0xFF, "minor version")
        _check(self.version_sub_minor, 0xFF, "sub-minor version")
        _check(self.standard_device_family_code, 0xFFFFFFFF, "standard device family code")
        _check(self.standard_device_type, 0xFFFFFFFF, "standard device type")

    def version_string(self) -> str:
        """Return the firmware version as 'major.minor.sub_minor'."""
        return f"{self.version_major}.{self.version_minor}.{self.version_sub_minor}"


def default_device_config() -> DeviceConfig:
    """Return the board's built-in device configuration."""
    return DeviceConfig()