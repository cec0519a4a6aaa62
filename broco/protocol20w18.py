"""Packet set of the 2020 week-18 protocol."""

from __future__ import annotations

import time as _time

from broco.packets import Field, Packet


class PingPacket(Packet):
    """Round-trip probe; ``time`` is a nanosecond timestamp taken at creation."""

    FIELDS = (Field("time", "q", default_factory=_time.time_ns),)


class ConnectPacket(Packet):
    """Connection announcement carrying a 32-byte name."""

    FIELDS = (Field("name", "B", 32),)


class DisconnectPacket(Packet):
    """Disconnection notice; carries no data."""

    FIELDS = ()


class RequestPacket(Packet):
    FIELDS = (Field("uuid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("payload", "I"))


class AcknowledgePacket(Packet):
    FIELDS = (Field("uuid", "H"), Field("result", "B"))


class ResponsePacket(Packet):
    FIELDS = (Field("uuid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("payload", "I"))


class ProgressPacket(Packet):
    FIELDS = (Field("uuid", "I"), Field("progress", "B"))


class DataPacket(Packet):
    FIELDS = (Field("data", "I"),)


class MessagePacket(Packet):
    """Free-form 128-byte message."""

    FIELDS = (Field("message", "B", 128),)


class ErrorPacket(Packet):
    FIELDS = (Field("error_id", "B"),)