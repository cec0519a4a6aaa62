"""Packet-oriented message bus with framing, reassembly, dispatch and forwarding."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Optional

from broco.packets import Packet

PREAMBLE = 0x7F
MAX_PACKET_SIZE = 1023

_SLOT_MASK = 0x3F

Handler = Callable[[int, Packet], None]


class BusError(Exception):
    """Base class of message bus errors."""


class DefinitionError(BusError, ValueError):
    """A packet type cannot be defined on the bus."""


class UnknownPacketError(BusError, LookupError):
    """A packet type has not been defined on the bus."""


class TransmissionError(BusError):
    """A packet could not be written to the outgoing frame."""


@dataclass(frozen=True)
class PacketDefinition:
    """Wire identifier and size of a packet type on one bus."""

    id: int
    size: int
    packet_type: type[Packet]


@dataclass
class _Reconstruction:
    """Reassembly state for one sender."""

    synced: bool = False
    definition: Optional[PacketDefinition] = None
    payload: bytearray = field(default_factory=bytearray)

    def reset(self) -> None:
        self.synced = False
        self.definition = None
        self.payload.clear()


class MessageBus(ABC):
    """Sends packets as ``PREAMBLE, id, payload`` frames and reassembles incoming ones.

    Subclasses supply the transport through ``_append`` and ``_transmit``.
    """

    def __init__(self) -> None:
        self._by_slot: dict[int, PacketDefinition] = {}
        self._by_type: dict[type[Packet], PacketDefinition] = {}
        self._handlers: dict[int, list[Handler]] = defaultdict(list)
        self._forwarders: dict[int, MessageBus] = {}
        self._reconstruction: dict[int, _Reconstruction] = defaultdict(_Reconstruction)

    # ----- transport -----

    @abstractmethod
    def _append(self, data: bytes) -> int:
        """Add bytes to the outgoing frame; return how many were taken."""

    @abstractmethod
    def _transmit(self) -> None:
        """Send the outgoing frame."""

    def _discard(self) -> None:
        """Drop a partially written outgoing frame."""

    # ----- registration -----

    def define(self, packet_type: type[Packet], identifier: int) -> PacketDefinition:
        """Bind ``packet_type`` to a wire identifier; the low six bits select its slot."""
        if not (isinstance(packet_type, type) and issubclass(packet_type, Packet)):
            raise TypeError(f"{packet_type!r} is not a packet type")
        if not 0 <= identifier <= 0xFF:
            raise DefinitionError(f"identifier {identifier} does not fit in one byte")
        slot = identifier & _SLOT_MASK
        if slot in self._by_slot:
            raise DefinitionError(f"packet slot {slot} is already in use")
        size = packet_type.size()
        if size > MAX_PACKET_SIZE:
            raise DefinitionError(f"{packet_type.__name__} is {size} bytes, more than {MAX_PACKET_SIZE}")
        if packet_type in self._by_type:
            raise DefinitionError(f"{packet_type.__name__} is already defined")
        definition = PacketDefinition(identifier, size, packet_type)
        self._by_slot[slot] = definition
        self._by_type[packet_type] = definition
        return definition

    def _definition(self, packet_type: type[Packet]) -> PacketDefinition:
        try:
            return self._by_type[packet_type]
        except KeyError:
            name = getattr(packet_type, "__name__", repr(packet_type))
            raise UnknownPacketError(f"{name} is not defined on this bus") from None

    def handle(self, packet_type: type[Packet], handler: Handler) -> None:
        """Call ``handler(sender_id, packet)`` for every received packet of this type."""
        definition = self._definition(packet_type)
        self._handlers[definition.id & _SLOT_MASK].append(handler)

    def forward(self, packet_type: type[Packet], bus: "MessageBus") -> None:
        """Resend every received packet of this type on ``bus``."""
        definition = self._definition(packet_type)
        slot = definition.id & _SLOT_MASK
        if slot in self._forwarders:
            raise BusError(f"{packet_type.__name__} already has a forwarder")
        self._forwarders[slot] = bus

    # ----- sending -----

    def send(self, message: Packet) -> None:
        """Frame and transmit ``message``."""
        definition = self._definition(type(message))
        self._send_raw(definition, message.to_bytes())

    def _send_raw(self, definition: PacketDefinition, payload: bytes) -> None:
        written = 0
        while written < len(payload):
            self._append(bytes((PREAMBLE,)))
            self._append(bytes((definition.id,)))
            taken = self._append(payload[written:])
            if taken == 0:
                self._discard()
                raise TransmissionError(
                    f"{definition.packet_type.__name__} does not fit in the outgoing frame"
                )
            written += taken
        self._transmit()

    # ----- receiving -----

    def receive(self, sender_id: int, data: bytes) -> None:
        """Feed incoming bytes from ``sender_id``; complete packets are dispatched."""
        data = bytes(data)
        state = self._reconstruction[sender_id & _SLOT_MASK]
        pos, end = 0, len(data)

        while pos < end:
            if not state.synced:
                found = data.find(PREAMBLE, pos)
                if found < 0:
                    return
                pos = found + 1
                state.synced = True

            if state.definition is None:
                while True:
                    if pos >= end:
                        return
                    packet_id = data[pos]
                    pos += 1
                    candidate = self._by_slot.get(packet_id & _SLOT_MASK)
                    if candidate is not None and candidate.id == packet_id:
                        break
                state.definition = candidate
                state.payload.clear()

            definition = state.definition
            take = min(end - pos, definition.size - len(state.payload))
            state.payload += data[pos:pos + take]
            pos += take

            if len(state.payload) == definition.size:
                payload = bytes(state.payload)
                state.reset()
                self._dispatch(sender_id, definition, payload)

    def _dispatch(self, sender_id: int, definition: PacketDefinition, payload: bytes) -> None:
        slot = definition.id & _SLOT_MASK
        handlers = self._handlers.get(slot)
        if handlers:
            packet = definition.packet_type.from_bytes(payload)
            for handler in list(handlers):
                handler(sender_id, packet)
        forwarder = self._forwarders.get(slot)
        if forwarder is not None:
            forwarder._send_raw(definition, payload)