# bacstack

Building blocks for BACnet/IP in Python: the protocol data structures,
lookup tables for properties and object types, and the two transaction
managers that a client uses to match replies to requests.

## Install

    pip install bacstack

To run the tests, install the test extra and run pytest:

    pip install "bacstack[test]"
    pytest

## Modules

- `bacstack.property` holds the known property identifiers as constants
  (`PRESENT_VALUE`, `OBJECT_LIST`, ...). `get(name)` turns a key such as
  `"PresentValue"` into its number and raises `ValueError` for an unknown
  key. `describe(prop)` gives a label such as `"Present Value (85)"`, or
  `"Unknown"`. `keys()` returns a copy of the key table,
  `is_device_property(prop)` tells whether a property belongs to the device
  object, and `print_all(stream)` writes the table to a stream (standard
  output when `stream` is `None`).
- `bacstack.objects` has `ObjectType`, `ObjectID`, `Object`, `Property`,
  `ReadPropertyData`, `ReadMultipleProperty`, `Address`, `Device`, `IAm` and
  `ObjectMap`. `udp_to_address(ip, port)` builds an `Address` from an IPv4
  endpoint, and `Address.udp_addr()` gives the `(ip, port)` pair back,
  raising `ValueError` if the MAC is not six bytes. `Address` also has
  `is_broadcast()`, `set_broadcast(flag)`, `is_sub_broadcast()` and
  `is_unicast()`. `ObjectMap` is a dict of type to instance to object;
  `to_json()` and `ObjectMap.from_json(data)` save and load it keyed by type
  name, and `object_count()` counts every object in it.
  `get_type(name)` and `object_type_name(object_type)` convert between type
  numbers and names.
- `bacstack.protocol` has the `BVLC`, `NPDU` and `APDU` dataclasses, their
  enumerations (`BacFunc`, `NPDUPriority`, `PDUType`, `ServiceConfirmed`,
  `ServiceUnconfirmed`), `Date`, `Time`, `DayOfWeek`, and constants such as
  `MAX_APDU`, `ARRAY_ALL` and `WHO_IS_ALL`.
- `bacstack.tsm.TransactionManager(size)` gives out invoke ids for confirmed
  requests with `acquire(timeout)` and takes them back with
  `release(invoke_id)`. `send(invoke_id, data)` hands a reply to the thread
  blocked in `receive(invoke_id, timeout)`. Failures and timeouts raise
  `TransactionError`.
- `bacstack.utsm.Manager` is a publish/subscribe hub for unconfirmed
  messages such as I-Am. `subscribe(start, end)` collects everything
  published with `publish(ident, data)` for an id in `[start, end]`, until
  nothing has arrived for the last-received timeout or the overall timeout
  has passed.

## Example

```python
from bacstack.objects import udp_to_address, ObjectID, ObjectType
from bacstack import property

addr = udp_to_address("192.0.2.10", 47808)
print(addr.udp_addr())                      # ('192.0.2.10', 47808)
print(ObjectID(ObjectType.ANALOG_VALUE, 1))  # Instance: 1 Type: Analog Value
print(property.describe(property.get("PresentValue")))  # Present Value (85)
```

Collecting I-Am replies for a range of device instances:

```python
import threading
from bacstack.utsm import Manager

hub = Manager(subscriber_timeout=2.0, last_received_timeout=0.3)
threading.Timer(0.1, hub.publish, args=(20, "I-Am 20")).start()
print(hub.subscribe(10, 30))                # ['I-Am 20']
```

## What it does not do

The package has no network client. It opens no sockets, does not encode or
decode BVLC, NPDU or APDU headers to or from bytes, and does not itself send
Who-Is, I-Am or ReadProperty requests. It supplies the data types and the
transaction bookkeeping that such a client is built on.