"""BACnet object identifiers, addresses, devices and object maps."""

from __future__ import annotations

import base64
import ipaddress
import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union

from . import property as _property

_BROADCAST_NETWORK = 0xFFFF
_SPACING = " " * 4


class ObjectType(IntEnum):
    """Object types with a known name."""

    ANALOG_INPUT = 0
    ANALOG_OUTPUT = 1
    ANALOG_VALUE = 2
    BINARY_INPUT = 3
    BINARY_OUTPUT = 4
    BINARY_VALUE = 5
    DEVICE = 8
    FILE = 10
    MULTI_STATE_INPUT = 13
    NOTIFICATION_CLASS = 15
    MULTI_STATE_VALUE = 19
    TREND_LOG = 20
    CHARACTER_STRING = 40

    def __str__(self) -> str:
        return object_type_name(self)


_TYPE_NAMES: dict[int, str] = {
    ObjectType.ANALOG_INPUT: "Analog Input",
    ObjectType.ANALOG_OUTPUT: "Analog Output",
    ObjectType.ANALOG_VALUE: "Analog Value",
    ObjectType.BINARY_INPUT: "Binary Input",
    ObjectType.BINARY_OUTPUT: "Binary Output",
    ObjectType.BINARY_VALUE: "Binary Value",
    ObjectType.DEVICE: "Device",
    ObjectType.FILE: "File",
    ObjectType.NOTIFICATION_CLASS: "Notification Class",
    ObjectType.MULTI_STATE_VALUE: "Multi-State Value",
    ObjectType.MULTI_STATE_INPUT: "Multi-State Input",
    ObjectType.TREND_LOG: "Trend Log",
    ObjectType.CHARACTER_STRING: "Character String",
}

# Multi-State Input is deliberately absent from the reverse lookup.
_NAME_TYPES: dict[str, ObjectType] = {
    name: ObjectType(t)
    for t, name in _TYPE_NAMES.items()
    if t != ObjectType.MULTI_STATE_INPUT
}


def _as_type(value: int) -> int:
    try:
        return ObjectType(value)
    except ValueError:
        return int(value)


def get_type(name: str) -> int:
    """Return the object type with the given name, or 0 if the name is unknown."""
    return _NAME_TYPES.get(name, ObjectType.ANALOG_INPUT)


def object_type_name(object_type: int) -> str:
    """Return the readable name of an object type."""
    name = _TYPE_NAMES.get(int(object_type))
    if name is None:
        return f"Unknown ({int(object_type)})"
    return name


@dataclass(frozen=True)
class ObjectID:
    """Type and instance number that identify an object."""

    type: int = 0
    instance: int = 0

    def __str__(self) -> str:
        return f"Instance: {self.instance} Type: {object_type_name(self.type)}"


@dataclass
class Property:
    """A property reference together with its value."""

    type: int
    array_index: int
    data: Any = None


@dataclass
class Object:
    """A BACnet object with its name, description and properties."""

    name: str = ""
    description: str = ""
    id: ObjectID = field(default_factory=ObjectID)
    properties: list[Property] = field(default_factory=list)


@dataclass
class ReadPropertyData:
    """Request or response for reading one property."""

    invoke_id: int = 0
    object: Object = field(default_factory=Object)
    error_class: int = 0
    error_code: int = 0


@dataclass
class ReadMultipleProperty:
    """Request or response for reading many properties of many objects."""

    objects: list[Object] = field(default_factory=list)
    error_class: int = 0
    error_code: int = 0

    def __str__(self) -> str:
        parts: list[str] = []
        for obj in self.objects:
            parts.append(f"{obj.id}\n")
            for prop in obj.properties:
                parts.append(
                    f"{_SPACING}{_property.describe(prop.type)}"
                    f"[{prop.array_index}]: {prop.data}\n"
                )
            parts.append("\n")
        return "".join(parts)


@dataclass
class Address:
    """A BACnet network address."""

    net: int = 0
    length: int = 0
    mac_len: int = 0
    mac: bytes = b""
    adr: bytes = b""

    def is_broadcast(self) -> bool:
        """Tell whether the address is a global broadcast."""
        return self.net == _BROADCAST_NETWORK or self.mac_len == 0

    def set_broadcast(self, broadcast: bool) -> None:
        """Mark the address as broadcast, or restore it to its MAC length."""
        self.mac_len = 0 if broadcast else len(self.mac)

    def is_sub_broadcast(self) -> bool:
        """Tell whether the address is a network specific broadcast."""
        return self.net > 0 and self.length == 0

    def is_unicast(self) -> bool:
        """Tell whether the address is a unicast address."""
        return self.mac_len == 6

    def udp_addr(self) -> tuple[str, int]:
        """Return the (ip, port) pair held in the MAC; raise ValueError if malformed."""
        if len(self.mac) != 6:
            raise ValueError(f"Mac is too short at {len(self.mac)}")
        ip = ipaddress.IPv4Address(bytes(self.mac[:4]))
        port = int.from_bytes(bytes(self.mac[4:6]), "big")
        return str(ip), port


IPLike = Union[str, bytes, ipaddress.IPv4Address, ipaddress.IPv6Address]


def udp_to_address(ip: IPLike, port: int) -> Address:
    """Build a BACnet address from an IPv4 address and UDP port."""
    if isinstance(ip, (str, bytes)):
        ip = ipaddress.ip_address(ip)
    if isinstance(ip, ipaddress.IPv6Address):
        mapped = ip.ipv4_mapped
        if mapped is None:
            raise ValueError(f"{ip} is not an IPv4 address")
        ip = mapped
    mac = ip.packed + (port & 0xFFFF).to_bytes(2, "big")
    return Address(mac=mac, mac_len=len(mac))


def _json_default(value: Any) -> Any:
    if isinstance(value, ObjectID):
        return {"Type": int(value.type), "Instance": value.instance}
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"cannot encode {type(value).__name__}")


def _object_to_json(obj: Object) -> dict[str, Any]:
    out: dict[str, Any] = {
        "Name": obj.name,
        "Description": obj.description,
        "ID": {"Type": int(obj.id.type), "Instance": obj.id.instance},
    }
    if obj.properties:
        out["Properties"] = [
            {"Type": p.type, "ArrayIndex": p.array_index, "Data": p.data}
            for p in obj.properties
        ]
    return out


def _object_from_json(data: dict[str, Any]) -> Object:
    ident = data.get("ID") or {}
    props = [
        Property(type=p.get("Type", 0), array_index=p.get("ArrayIndex", 0), data=p.get("Data"))
        for p in data.get("Properties") or []
    ]
    return Object(
        name=data.get("Name", ""),
        description=data.get("Description", ""),
        id=ObjectID(_as_type(ident.get("Type", 0)), ident.get("Instance", 0)),
        properties=props,
    )


class ObjectMap(dict):
    """Objects grouped by type, then by instance number."""

    def object_count(self) -> int:
        """Return the total number of objects in the map."""
        return sum(len(sub) for sub in self.values())

    def to_json(self) -> str:
        """Encode the map as JSON keyed by type name."""
        grouped: dict[str, dict[int, Object]] = {}
        for typ, sub in self.items():
            grouped.setdefault(object_type_name(typ), {}).update(sub)
        encoded = {
            name: {
                str(inst): _object_to_json(obj)
                for inst, obj in sorted(grouped[name].items(), key=lambda kv: str(kv[0]))
            }
            for name in sorted(grouped)
        }
        return json.dumps(encoded, default=_json_default)

    @classmethod
    def from_json(cls, data: str | bytes) -> ObjectMap:
        """Decode a map produced by to_json."""
        raw = json.loads(data)
        result = cls()
        for name, sub in raw.items():
            bucket = result.setdefault(get_type(name), {})
            for inst, obj in sub.items():
                bucket[int(inst)] = _object_from_json(obj)
        return result


@dataclass
class Device:
    """A device found on the network."""

    id: ObjectID = field(default_factory=ObjectID)
    max_apdu: int = 0
    segmentation: int = 0
    vendor: int = 0
    addr: Address = field(default_factory=Address)
    objects: ObjectMap = field(default_factory=ObjectMap)

    def object_slice(self) -> list[Object]:
        """Return every object of the device as a flat list."""
        return [obj for sub in self.objects.values() for obj in sub.values()]


@dataclass
class IAm:
    """Contents of an I-Am announcement."""

    id: ObjectID = field(default_factory=ObjectID)
    max_apdu: int = 0
    segmentation: int = 0
    vendor: int = 0
    addr: Address = field(default_factory=Address)