"""Packet set of the 2022 week-12 radio protocol."""

from __future__ import annotations

from broco.packets import Field, Packet


class DopplerPacket(Packet, reliable=True):
    """Timestamped carrier frequency offset."""

    FIELDS = (Field("timestamp", "Q"), Field("cfo", "i"))


class ConnectPacket(Packet, reliable=True):
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
    FIELDS = (Field("message", "B", 128),)


class ErrorPacket(Packet):
    FIELDS = (Field("error_id", "B"),)