"""Message bus for network links, with the packet identifiers used over the network."""

from __future__ import annotations

from broco import protocol23 as p
from broco.io_bus import IOBus, IODriver
from broco.packets import Packet

NETWORK_FRAME_SIZE = 256

NETWORK_DEFINITIONS: tuple[tuple[type[Packet], int], ...] = (
    # avionics
    (p.DummyPacket, 0),
    (p.MassPacket, 1),
    (p.FOURINONEPacket, 2),
    (p.NPKPacket, 3),
    (p.VoltmeterPacket, 4),
    (p.IMUPacket, 5),
    (p.PotentiometerPacket, 6),
    # general
    (p.DataPacket, 58),
    (p.PingPacket, 59),
    (p.ErrorPacket, 60),
    (p.RequestPacket, 61),
    (p.ResponsePacket, 62),
    (p.ProgressPacket, 63),
)


class NetworkBus(IOBus):
    """Bus with 256-byte frames and the network packet set predefined."""

    def __init__(self, driver: IODriver) -> None:
        super().__init__(driver, NETWORK_FRAME_SIZE)
        for packet_type, identifier in NETWORK_DEFINITIONS:
            self.define(packet_type, identifier)