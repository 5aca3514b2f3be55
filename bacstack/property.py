"""Known BACnet property identifiers and their readable names."""

from __future__ import annotations

import sys
from typing import TextIO

DESCRIPTION = 28
FILE_SIZE = 42
FILE_TYPE = 43
MODEL_NAME = 70
OBJECT_IDENTIFIER = 75
OBJECT_LIST = 76
OBJECT_NAME = 77
OBJECT_REFERENCE = 78
OBJECT_TYPE = 79
PRESENT_VALUE = 85
UNITS = 117

DESCRIPTION_STR = "Description"
OBJECT_NAME_STR = "ObjectName"

_ADDITIONAL_SPACES = 15

_ENUM_MAPPING: dict[str, int] = {
    DESCRIPTION_STR: DESCRIPTION,
    "FileSize": FILE_SIZE,
    "FileType": FILE_TYPE,
    "ModelName": MODEL_NAME,
    "ObjectIdentifier": OBJECT_IDENTIFIER,
    "ObjectList": OBJECT_LIST,
    OBJECT_NAME_STR: OBJECT_NAME,
    "ObjectReference": OBJECT_REFERENCE,
    "ObjectType": OBJECT_TYPE,
    "PresentValue": PRESENT_VALUE,
    "Units": UNITS,
}

_STR_MAPPING: dict[int, str] = {
    DESCRIPTION: "Description",
    FILE_SIZE: "File Size",
    FILE_TYPE: "File Type",
    MODEL_NAME: "Model Name",
    OBJECT_IDENTIFIER: "Object Identifier",
    OBJECT_LIST: "Object List",
    OBJECT_NAME: "Object Name",
    OBJECT_REFERENCE: "Object Reference",
    OBJECT_TYPE: "Object Type",
    PRESENT_VALUE: "Present Value",
    UNITS: "Units",
}

_DEVICE_PROPERTIES = frozenset({OBJECT_LIST})


def keys() -> dict[str, int]:
    """Return a copy of the mapping from property key to identifier."""
    return dict(_ENUM_MAPPING)


def get(name: str) -> int:
    """Return the identifier of the named property; raise ValueError if unknown."""
    try:
        return _ENUM_MAPPING[name]
    except KeyError:
        raise ValueError(f"{name} is not a valid property.") from None


def describe(prop: int) -> str:
    """Return a human readable description of a property identifier."""
    name = _STR_MAPPING.get(prop)
    if name is None:
        return "Unknown"
    return f"{name} ({prop})"


def is_device_property(prop: int) -> bool:
    """Tell whether the property belongs to the device object."""
    return prop in _DEVICE_PROPERTIES


def _row(col1: str, col2: str, width: int) -> str:
    spacing = " " * (width - len(col1) + _ADDITIONAL_SPACES)
    return f"{col1}{spacing}{col2}\n"


def print_all(stream: TextIO | None = None) -> None:
    """Write a table of every known property key and its identifier."""
    out = sys.stdout if stream is None else stream
    width = max((len(k) for k in _ENUM_MAPPING), default=0)
    out.write(_row("Key", "Int", width))
    out.write("-" * (width + _ADDITIONAL_SPACES + 6) + "\n")
    for key, ident in _ENUM_MAPPING.items():
        out.write(_row(key, str(ident), width))