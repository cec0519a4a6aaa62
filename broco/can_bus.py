"""Message bus for CAN FD links, with the packet identifiers used on the CAN network."""

from __future__ import annotations

from broco import protocol23 as p
from broco.io_bus import IOBus, IODriver
from broco.packets import Packet

CAN_FRAME_SIZE = 64

CAN_DEFINITIONS: tuple[tuple[type[Packet], int], ...] = (
    # sensors
    (p.PingPacket, 1),
    (p.FOURINONEPacket, 2),
    (p.NPKPacket, 3),
    (p.VoltmeterPacket, 4),
    (p.MassPacket, 5),
    (p.IMUPacket, 6),
    (p.MagPacket, 7),
    (p.PotentiometerPacket, 8),
    (p.SpectroPacket, 9),
    (p.SpectroResponsePacket, 10),
    (p.LaserPacket, 11),
    (p.LaserResponsePacket, 12),
    (p.ServoPacket, 13),
    (p.ServoResponsePacket, 14),
    (p.LEDPacket, 15),
    (p.LEDResponsePacket, 16),
    # configuration
    (p.MassConfigRequestPacket, 31),
    (p.MassConfigPacket, 32),
    (p.MassConfigResponsePacket, 33),
    (p.PotentiometerConfigRequestPacket, 34),
    (p.PotentiometerConfigPacket, 35),
    (p.PotentiometerConfigResponsePacket, 36),
    (p.AccelConfigRequestPacket, 37),
    (p.AccelConfigPacket, 38),
    (p.AccelConfigResponsePacket, 39),
    (p.GyroConfigRequestPacket, 40),
    (p.GyroConfigPacket, 41),
    (p.GyroConfigResponsePacket, 42),
    (p.MagConfigRequestPacket, 43),
    (p.MagConfigPacket, 44),
    (p.MagConfigResponsePacket, 45),
    (p.ServoConfigRequestPacket, 46),
    (p.ServoConfigPacket, 47),
    (p.ServoConfigResponsePacket, 48),
    # calibration
    (p.MassCalibPacket, 49),
    (p.ImuCalibPacket, 50),
    # general
    (p.DataPacket, 59),
    (p.ErrorPacket, 60),
    (p.RequestPacket, 61),
    (p.ResponsePacket, 62),
    (p.ProgressPacket, 63),
)


class CANBus(IOBus):
    """Bus with 64-byte frames and the CAN packet set predefined."""

    def __init__(self, driver: IODriver) -> None:
        super().__init__(driver, CAN_FRAME_SIZE)
        for packet_type, identifier in CAN_DEFINITIONS:
            self.define(packet_type, identifier)