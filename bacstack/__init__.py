"""BACnet/IP data types, property tables and transaction managers."""

__version__ = "0.1.0"
__all__ = ["objects", "property", "protocol", "tsm", "utsm"]