"""Protocol data units and enumerations of the BACnet/IP stack."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .objects import Address

MAX_APDU_OVER_IP = 1476
MAX_APDU = MAX_APDU_OVER_IP

# The only valid BVLC type for BACnet/IP.
BVLC_TYPE_BACNET_IP = 0x81

PROTOCOL_VERSION = 1
DEFAULT_HOP_COUNT = 255

MAX_INSTANCE = 0x3FFFFF

# Passing WHO_IS_ALL as either bound of a Who-Is range scans every device.
WHO_IS_ALL = -1
ARRAY_ALL = 0xFFFFFFFF

# A time field holding this value matches any value of that field.
UNSPECIFIED_TIME = 0xFF

MAX_SERVICE_UNCONFIRMED = 11
_MAX_CONFIRMED_SERVICE = 30


class ServiceUnconfirmed(IntEnum):
    """Unconfirmed service choices."""

    I_AM = 0
    I_HAVE = 1
    COV_NOTIFICATION = 2
    EVENT_NOTIFICATION = 3
    PRIVATE_TRANSFER = 4
    TEXT_MESSAGE = 5
    TIME_SYNC = 6
    WHO_HAS = 7
    WHO_IS = 8
    UTC_TIME_SYNC = 9
    WRITE_GROUP = 10


class ServiceConfirmed(IntEnum):
    """Confirmed service choices."""

    # Alarm and event services
    ACKNOWLEDGE_ALARM = 0
    COV_NOTIFICATION = 1
    EVENT_NOTIFICATION = 2
    GET_ALARM_SUMMARY = 3
    GET_ENROLLMENT_SUMMARY = 4
    SUBSCRIBE_COV = 5
    # File access services
    ATOMIC_READ_FILE = 6
    ATOMIC_WRITE_FILE = 7
    # Object access services
    ADD_LIST_ELEMENT = 8
    REMOVE_LIST_ELEMENT = 9
    CREATE_OBJECT = 10
    DELETE_OBJECT = 11
    READ_PROPERTY = 12
    READ_PROP_CONDITIONAL = 13
    READ_PROP_MULTIPLE = 14
    WRITE_PROPERTY = 15
    WRITE_PROP_MULTIPLE = 16
    # Remote device management services
    DEVICE_COMMUNICATION_CONTROL = 17
    PRIVATE_TRANSFER = 18
    TEXT_MESSAGE = 19
    REINITIALIZE_DEVICE = 20
    # Virtual terminal services
    VT_OPEN = 21
    VT_CLOSE = 22
    VT_DATA = 23
    # Security services
    AUTHENTICATE = 24
    REQUEST_KEY = 25
    # Services added after 1995
    READ_RANGE = 26
    LIFE_SAFETY_OPERATION = 27
    SUBSCRIBE_COV_PROPERTY = 28
    GET_EVENT_INFORMATION = 29


def describe_confirmed_service(service: int) -> str:
    """Return a readable description of a confirmed service choice."""
    return f"Unknown {int(service)}"


class PDUType(IntEnum):
    """Kinds of application layer PDU, held in the upper nibble."""

    CONFIRMED_SERVICE_REQUEST = 0x00
    UNCONFIRMED_SERVICE_REQUEST = 0x10
    COMPLEX_ACK = 0x30
    SEGMENT_ACK = 0x40
    ERROR = 0x50
    REJECT = 0x60
    ABORT = 0x70


@dataclass
class APDUError:
    """Error class and code carried by an error PDU."""

    error_class: int = 0
    code: int = 0

    def __str__(self) -> str:
        return f"Error Class {self.error_class} Code {self.code}"


@dataclass
class APDU:
    """Application Protocol Data Unit."""

    data_type: int = PDUType.CONFIRMED_SERVICE_REQUEST
    segmented_message: bool = False
    more_follows: bool = False
    segmented_response_accepted: bool = False
    max_segs: int = 0
    max_apdu: int = 0
    invoke_id: int = 0
    sequence: int = 0
    window_number: int = 0
    service: int = ServiceConfirmed.ACKNOWLEDGE_ALARM
    unconfirmed_service: int = ServiceUnconfirmed.I_AM
    error: APDUError = field(default_factory=APDUError)
    raw_data: bytes = b""

    def is_confirmed_service_request(self) -> bool:
        """Tell whether the PDU is a confirmed service request."""
        return (0xF0 & int(self.data_type)) == PDUType.CONFIRMED_SERVICE_REQUEST


class BacFunc(IntEnum):
    """BACnet virtual link control functions."""

    RESULT = 0
    WRITE_BROADCAST_DISTRIBUTION_TABLE = 1
    BROADCAST_DISTRIBUTION_TABLE = 2
    BROADCAST_DISTRIBUTION_TABLE_ACK = 3
    FORWARDED_NPDU = 4
    UNICAST = 10
    BROADCAST = 11


@dataclass
class BVLC:
    """BACnet virtual link control header and its payload.

    The length counts the four header bytes as well as the data.
    """

    type: int = BVLC_TYPE_BACNET_IP
    function: int = BacFunc.RESULT
    length: int = 0
    data: bytes = b""


class NPDUPriority(IntEnum):
    """Network layer message priorities."""

    NORMAL = 0
    URGENT = 1
    CRITICAL_EQUIPMENT = 2
    LIFE_SAFETY = 3


@dataclass
class NPDU:
    """Network layer Protocol Data Unit."""

    version: int = PROTOCOL_VERSION
    destination: Optional[Address] = None
    source: Optional[Address] = None
    vendor_id: int = 0
    is_network_layer_message: bool = False
    network_layer_message_type: int = 0
    expecting_reply: bool = False
    priority: int = NPDUPriority.NORMAL
    hop_count: int = DEFAULT_HOP_COUNT


class DayOfWeek(IntEnum):
    """Day of the week, with NONE for an unspecified day."""

    NONE = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass
class Date:
    """A BACnet date, which may repeat on even or odd months and days."""

    year: int = 0
    month: int = 0
    day: int = 0
    even_month: bool = False
    odd_month: bool = False
    even_day: bool = False
    odd_day: bool = False
    last_day_of_month: bool = False
    day_of_week: DayOfWeek = DayOfWeek.NONE


@dataclass
class Time:
    """A BACnet time of day."""

    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0