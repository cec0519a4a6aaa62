"""Packet set of the 2021 week-3 protocol."""

from __future__ import annotations

from broco.packets import Field, Packet

# Action identifiers
TARE = 0x1  # Recalibrate sensor: ads1113, hx711, imu, barometer
RESET_SENSOR = 0x2
STOP_DATA = 0x3
START_ANALYSIS = 0x4


# ---------- Avionics ----------

class Avionics_BaroTempPacket(Packet):
    """Pressure [Pa] and temperature [°C]."""

    FIELDS = (Field("pressure", "f"), Field("temperature", "f"))


class Avionics_AccelMagPacket(Packet):
    """Acceleration [m/s^2], angles [°] and magnetic field [mT]."""

    FIELDS = (Field("acceleration", "f", 3), Field("angular", "f", 3), Field("magneto", "f", 3))


class Avionics_ADCPacket(Packet):
    """ADC port and its voltage [V]."""

    FIELDS = (Field("port", "B"), Field("voltage", "f"))


class Science_MassPacket(Packet):
    """Mass [g]."""

    FIELDS = (Field("mass", "f"),)


# ---------- Power supply ----------

class Power_SystemPacket(Packet):
    FIELDS = (Field("battery_charge", "f"), Field("state", "B"))


class Power_VoltagePacket(Packet):
    FIELDS = (Field("voltages", "f", 4),)


class Power_CurrentPacket(Packet):
    FIELDS = (Field("currents", "f", 4),)


class Reset_PowerSupplyPacket(Packet):
    FIELDS = (Field("reset", "?"),)


class Switch_AvionicsPacket(Packet):
    FIELDS = (Field("on", "?"),)


class Switch_RamanPacket(Packet):
    FIELDS = (Field("on", "?"),)


class Switch_JetsonPacket(Packet):
    FIELDS = (Field("on", "?"),)


class Switch_LidarPacket(Packet):
    FIELDS = (Field("on", "?"),)


class Switch_EthernetPacket(Packet):
    FIELDS = (Field("on", "?"),)


# ---------- FSM ----------

class FsmPacket(Packet):
    FIELDS = (Field("state", "I"),)


# ---------- General ----------

class DataPacket(Packet):
    FIELDS = (Field("data", "I"),)


class PingPacket(Packet):
    FIELDS = (Field("time", "Q"),)


class ErrorPacket(Packet):
    FIELDS = (Field("error_id", "B"),)


class RequestPacket(Packet):
    FIELDS = (Field("uuid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("payload", "I"))


class ResponsePacket(Packet):
    FIELDS = (Field("uuid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("payload", "I"))


class ProgressPacket(Packet):
    FIELDS = (Field("uuid", "I"), Field("progress", "B"))