"""Protocol versions and the packet types each one registers."""

from __future__ import annotations

from enum import Enum

from broco import protocol20w18, protocol21w3, protocol22w12, protocol22w29, protocol23
from broco.packets import Packet


class Protocol(Enum):
    """Known protocol versions."""

    PROTOCOL_20W18 = "20W18"
    PROTOCOL_21W3 = "21W3"
    PROTOCOL_RADIO_22W12 = "RADIO_22W12"
    PROTOCOL_22W29 = "22W29"
    PROTOCOL_23 = "23"


_REGISTERED: dict[Protocol, tuple[type[Packet], ...]] = {
    Protocol.PROTOCOL_20W18: (
        protocol20w18.PingPacket,
        protocol20w18.ConnectPacket,
        protocol20w18.DisconnectPacket,
        protocol20w18.RequestPacket,
        protocol20w18.AcknowledgePacket,
        protocol20w18.ResponsePacket,
        protocol20w18.ProgressPacket,
        protocol20w18.DataPacket,
        protocol20w18.MessagePacket,
        protocol20w18.ErrorPacket,
    ),
    Protocol.PROTOCOL_21W3: (
        protocol21w3.Avionics_BaroTempPacket,
        protocol21w3.Avionics_AccelMagPacket,
        protocol21w3.Avionics_ADCPacket,
        protocol21w3.Science_MassPacket,
        protocol21w3.Power_SystemPacket,
        protocol21w3.Power_VoltagePacket,
        protocol21w3.Power_CurrentPacket,
        protocol21w3.Reset_PowerSupplyPacket,
        protocol21w3.Switch_AvionicsPacket,
        protocol21w3.Switch_RamanPacket,
        protocol21w3.Switch_JetsonPacket,
        protocol21w3.Switch_LidarPacket,
        protocol21w3.Switch_EthernetPacket,
        protocol21w3.FsmPacket,
        protocol21w3.DataPacket,
        protocol21w3.PingPacket,
        protocol21w3.ErrorPacket,
        protocol21w3.RequestPacket,
        protocol21w3.ResponsePacket,
        protocol21w3.ProgressPacket,
    ),
    Protocol.PROTOCOL_RADIO_22W12: (
        protocol22w12.DopplerPacket,
        protocol22w12.ConnectPacket,
        protocol22w12.DisconnectPacket,
        protocol22w12.ErrorPacket,
    ),
    Protocol.PROTOCOL_22W29: (
        protocol22w29.Avionics_BaroTempPacket,
        protocol22w29.Avionics_AccelMagPacket,
        protocol22w29.Avionics_ADCPacket,
        protocol22w29.Science_MassPacket,
        protocol22w29.Power_BusInfo,
        protocol22w29.Power_BatteryInfo,
        protocol22w29.Power_ControllerHealth,
        protocol22w29.Power_ControllerState,
        protocol22w29.FsmPacket,
        protocol22w29.DataPacket,
        protocol22w29.PingPacket,
        protocol22w29.ErrorPacket,
        protocol22w29.RequestPacket,
        protocol22w29.ResponsePacket,
        protocol22w29.ProgressPacket,
        protocol22w29.PayloadPacket,
        protocol22w29.FlushPacket,
    ),
    Protocol.PROTOCOL_23: (
        protocol23.FOURINONEPacket,
        protocol23.NPKPacket,
        protocol23.VoltmeterPacket,
        protocol23.MassPacket,
        protocol23.IMUPacket,
        protocol23.MagPacket,
        protocol23.PotentiometerPacket,
        protocol23.SpectroPacket,
        protocol23.SpectroResponsePacket,
        protocol23.LaserPacket,
        protocol23.LaserResponsePacket,
        protocol23.ServoPacket,
        protocol23.ServoResponsePacket,
        protocol23.LEDPacket,
        protocol23.LEDResponsePacket,
        protocol23.MassConfigRequestPacket,
        protocol23.MassConfigPacket,
        protocol23.MassConfigResponsePacket,
        protocol23.PotentiometerConfigRequestPacket,
        protocol23.PotentiometerConfigPacket,
        protocol23.PotentiometerConfigResponsePacket,
        protocol23.AccelConfigRequestPacket,
        protocol23.AccelConfigPacket,
        protocol23.AccelConfigResponsePacket,
        protocol23.GyroConfigRequestPacket,
        protocol23.GyroConfigPacket,
        protocol23.GyroConfigResponsePacket,
        protocol23.MagConfigRequestPacket,
        protocol23.MagConfigPacket,
        protocol23.MagConfigResponsePacket,
        protocol23.ServoConfigRequestPacket,
        protocol23.ServoConfigPacket,
        protocol23.ServoConfigResponsePacket,
        protocol23.MassCalibPacket,
        protocol23.ImuCalibPacket,
        protocol23.DataPacket,
        protocol23.PingPacket,
        protocol23.ErrorPacket,
        protocol23.RequestPacket,
        protocol23.ResponsePacket,
        protocol23.ProgressPacket,
        protocol23.DummyPacket,
    ),
}


def registered_packets(protocol: Protocol | str) -> tuple[type[Packet], ...]:
    """Return the packet types the given protocol registers, in registration order."""
    return _REGISTERED[Protocol(protocol)]