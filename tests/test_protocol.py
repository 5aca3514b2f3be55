import pytest

from bacstack.objects import udp_to_address
from bacstack.protocol import (
    APDU,
    BVLC,
    DEFAULT_HOP_COUNT,
    NPDU,
    PROTOCOL_VERSION,
    UNSPECIFIED_TIME,
    APDUError,
    BacFunc,
    Date,
    DayOfWeek,
    NPDUPriority,
    PDUType,
    ServiceConfirmed,
    ServiceUnconfirmed,
    Time,
    describe_confirmed_service,
)


def test_bvlc_type_is_bacnet_ip():
    header = BVLC(function=BacFunc.BROADCAST, length=4, data=b"")
    assert header.type == 0x81
    assert header.function is BacFunc(11)


def test_wire_values_of_enums():
    assert ServiceUnconfirmed(0) is ServiceUnconfirmed.I_AM
    assert ServiceUnconfirmed(8) is ServiceUnconfirmed.WHO_IS
    assert describe_confirmed_service(ServiceConfirmed.READ_PROPERTY) == "Unknown 12"
    assert describe_confirmed_service(ServiceConfirmed.READ_PROP_MULTIPLE) == "Unknown 14"
    assert describe_confirmed_service(ServiceConfirmed.GET_EVENT_INFORMATION) == "Unknown 29"
    assert APDU(data_type=PDUType(0x30)).data_type is PDUType.COMPLEX_ACK
    assert APDU(data_type=PDUType(0x50)).data_type is PDUType.ERROR
    assert BacFunc(4) is BacFunc.FORWARDED_NPDU
    assert BacFunc(10) is BacFunc.UNICAST


@pytest.mark.parametrize(
    "data_type, expected",
    [
        (PDUType.CONFIRMED_SERVICE_REQUEST, True),
        (PDUType.UNCONFIRMED_SERVICE_REQUEST, False),
        (PDUType.COMPLEX_ACK, False),
        (PDUType.SEGMENT_ACK, False),
        (PDUType.ERROR, False),
        (PDUType.REJECT, False),
        (PDUType.ABORT, False),
    ],
)
def test_is_confirmed_service_request(data_type, expected):
    assert APDU(data_type=data_type).is_confirmed_service_request() is expected


def test_is_confirmed_ignores_lower_nibble():
    flagged = PDUType.CONFIRMED_SERVICE_REQUEST | 0x0A
    assert APDU(data_type=flagged).is_confirmed_service_request() is True
    acked = PDUType.COMPLEX_ACK | 0x08
    assert APDU(data_type=acked).is_confirmed_service_request() is False


def test_describe_confirmed_service():
    assert describe_confirmed_service(ServiceConfirmed.READ_PROPERTY) == "Unknown 12"
    assert describe_confirmed_service(3) == "Unknown 3"


def test_apdu_defaults_are_independent():
    first = APDU()
    second = APDU()
    first.error.code = 7
    assert second.error.code == 0
    assert first.raw_data == b""
    assert first.data_type == PDUType.CONFIRMED_SERVICE_REQUEST


def test_apdu_error_text():
    err = APDUError(error_class=2, code=31)
    assert str(err) == "Error Class 2 Code 31"


def test_bvlc_holds_payload():
    payload = b"\x01\x02\x03"
    header = BVLC(function=BacFunc.UNICAST, length=4 + len(payload), data=payload)
    assert header.type == 0x81
    assert header.function == BacFunc.UNICAST
    assert header.length == len(payload) + 4
    assert header.data == payload


def test_npdu_defaults():
    npdu = NPDU()
    assert npdu.version == PROTOCOL_VERSION
    assert npdu.hop_count == DEFAULT_HOP_COUNT
    assert npdu.priority == NPDUPriority.NORMAL
    assert npdu.destination is None
    assert npdu.source is None
    assert npdu.expecting_reply is False


def test_npdu_carries_addresses():
    dest = udp_to_address("10.0.0.5", 47808)
    npdu = NPDU(destination=dest, expecting_reply=True)
    assert npdu.destination.udp_addr() == ("10.0.0.5", 47808)
    assert npdu.expecting_reply is True


def test_priority_from_wire_value():
    assert NPDU(priority=NPDUPriority(3)).priority is NPDUPriority.LIFE_SAFETY
    assert NPDU(priority=NPDUPriority(2)).priority is NPDUPriority.CRITICAL_EQUIPMENT
    assert NPDU(priority=NPDUPriority(1)).priority is NPDUPriority.URGENT
    assert NPDU(priority=NPDUPriority(0)).priority is NPDUPriority.NORMAL


def test_day_of_week_numbering():
    assert DayOfWeek(0) is DayOfWeek.NONE
    monday = Date(year=2017, month=5, day=1, day_of_week=DayOfWeek(1))
    assert monday.day_of_week is DayOfWeek.MONDAY
    sunday = Date(year=2017, month=5, day=7, day_of_week=DayOfWeek(7))
    assert sunday.day_of_week is DayOfWeek.SUNDAY


def test_date_and_time_fields():
    date = Date(year=2017, month=5, day=1, odd_day=True, day_of_week=DayOfWeek.MONDAY)
    assert date.odd_day is True
    assert date.even_day is False
    assert date.day_of_week is DayOfWeek.MONDAY
    moment = Time(hour=2, minute=UNSPECIFIED_TIME)
    assert moment.minute == UNSPECIFIED_TIME
    assert moment == Time(hour=2, minute=UNSPECIFIED_TIME, second=0, millisecond=0)


def test_unknown_enum_value_rejected():
    with pytest.raises(ValueError):
        ServiceUnconfirmed(11)
    with pytest.raises(ValueError):
        BacFunc(5)