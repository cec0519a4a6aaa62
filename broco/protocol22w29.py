"""Packet set of the 2022 week-29 protocol."""

from __future__ import annotations

from broco.packets import Field, Packet

# Action identifiers
TARE = 0x1  # Recalibrate sensor: ads1113, hx711, imu, barometer
RESET_SENSOR = 0x2
STOP_DATA = 0x3
START_ANALYSIS = 0x4

# Power supply definitions
PS_UID_SUPERVISOR = 0x42
PS_UID_CTA = 0x43
PS_UID_CTB = 0x44
PS_ACTION_GET = 0x0
PS_ACTION_SET = 0x1
PS_ACTION_EXE = 0x2
PS_TARGET_START = 0x0
PS_TARGET_STOP = 0x1
PS_TARGET_RESET = 0x2
PS_TARGET_TEST = 0x3
PS_TARGET_MISSION_ID = 0x4
PS_TARGET_DOWNLOAD = 0x5
PS_TARGET_ACK = 0x6
PS_TARGET_NACK = 0x7
PS_TARGET_FLASH_ERASE = 0x8
PS_CTA = 0x0
PS_CTB = 0x1
PS_5V = 0x2
PS_15V = 0x3
PS_24V = 0x4
PS_48V = 0x5


# ---------- Avionics ----------

class Avionics_BaroTempPacket(Packet):
    """Pressure [Pa] and temperature [°C]."""

    FIELDS = (Field("pressure", "f"), Field("temperature", "f"))


class Avionics_AccelMagPacket(Packet):
    """Acceleration [m/s^2], angles [°] and magnetic field [mT]."""

    FIELDS = (Field("acceleration", "f", 3), Field("angular", "f", 3), Field("magneto", "f", 3))


class Avionics_ADCPacket(Packet):
    FIELDS = (Field("port", "B"), Field("voltage", "f"))


class Science_MassPacket(Packet):
    FIELDS = (Field("mass", "f"),)


# ---------- Power supply ----------

class Power_BusInfo(Packet, reliable=True):
    """Bus 0: battery, 1: motors, 2: 5V, 3: 15V, 4: 24V, 5: 48V."""

    FIELDS = (
        Field("bus_id", "B"),
        Field("voltage", "f"),
        Field("current", "f"),
        Field("energy", "f"),
        Field("ripple", "f"),
        Field("temperature", "f"),
    )


class Power_BatteryInfo(Packet, reliable=True):
    FIELDS = (Field("charge", "f"), Field("estimated_runtime", "f"))


class Power_ControllerHealth(Packet, reliable=True):
    FIELDS = (Field("heap", "f"), Field("flash", "f"))


class Power_ControllerState(Packet, reliable=True):
    """State bits, LSB first: fault, sync, 0, 0, 5V, 15V, 24V, 48V running."""

    FIELDS = (Field("state", "B"),)


# ---------- FSM ----------

class FsmPacket(Packet):
    FIELDS = (Field("state", "I"),)


# ---------- General ----------

class DataPacket(Packet):
    FIELDS = (Field("data", "I"),)


class PingPacket(Packet, reliable=True):
    FIELDS = (Field("time", "Q"),)


class ErrorPacket(Packet, reliable=True):
    FIELDS = (Field("error_id", "B"),)


class RequestPacket(Packet, reliable=True):
    FIELDS = (Field("uid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("payload", "I"))


class ResponsePacket(Packet, reliable=True):
    FIELDS = (Field("uid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("payload", "I"))


class ProgressPacket(Packet, reliable=True):
    FIELDS = (Field("uid", "H"), Field("action_id", "B"), Field("target_id", "B"), Field("progress", "B"))


class PayloadPacket(Packet, reliable=True):
    FIELDS = (Field("length", "I"), Field("payload", "B", 512))


class FlushPacket(Packet):
    FIELDS = (Field("blank", "B", 15),)