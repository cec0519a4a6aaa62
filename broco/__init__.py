"""Packed packet definitions with CRC-16, a framed message bus, and CAN FD and device drivers."""

__version__ = "1.0.0"