"""Packet set of the 2023 protocol."""

from __future__ import annotations

from broco.packets import Field, Packet


def _flags(*names: str) -> tuple[Field, ...]:
    return tuple(Field(name, "?") for name in names)


def _floats(*names: str) -> tuple[Field, ...]:
    return tuple(Field(name, "f") for name in names)


# ---------- Sensors ----------

class MassPacket(Packet, reliable=True, identifiable=True):
    """Load cell readings [g]."""

    FIELDS = (Field("mass", "f", 4),)


class FOURINONEPacket(Packet, reliable=True, identifiable=True):
    """Soil probe: temperature [°C], moisture [%], conductivity [us/cm], pH."""

    FIELDS = _floats("temperature", "moisture", "conductivity", "pH")


class NPKPacket(Packet, reliable=True, identifiable=True):
    """Soil nutrients [mg/kg]."""

    FIELDS = (Field("nitrogen", "H"), Field("phosphorus", "H"), Field("potassium", "H"))


class PotentiometerPacket(Packet, reliable=True, identifiable=True):
    """Potentiometer angles [deg]."""

    FIELDS = (Field("angles", "f", 4),)


class IMUPacket(Packet, reliable=True, identifiable=True):
    """Acceleration [m/s^2], angular rate [°/s] and orientation quaternion."""

    FIELDS = (Field("acceleration", "f", 3), Field("angular", "f", 3), Field("orientation", "f", 4))


class MagPacket(Packet, reliable=True, identifiable=True):
    """Calibrated and raw magnetometer readings."""

    FIELDS = (Field("mag", "f", 3), Field("mag_raw", "f", 3))


class VoltmeterPacket(Packet, reliable=True, identifiable=True):
    """Voltage [V]."""

    FIELDS = _floats("voltage")


class SpectroPacket(Packet, reliable=True, identifiable=True):
    """Spectrometer measurement request."""

    FIELDS = _flags("measure")


class SpectroResponsePacket(Packet, reliable=True, identifiable=True):
    """Spectrometer measurement result."""

    FIELDS = (Field("data", "H", 18), Field("max_val", "f"), Field("success", "?"))


class LaserPacket(Packet, reliable=True, identifiable=True):
    """Laser enable command."""

    FIELDS = _flags("enable")


class LaserResponsePacket(Packet, reliable=True, identifiable=True):
    """Laser command outcome."""

    FIELDS = _flags("success")


class ServoPacket(Packet, reliable=True, identifiable=True):
    """Servo angle command."""

    FIELDS = (Field("channel", "B"), Field("angle", "f"))


class ServoResponsePacket(Packet, reliable=True, identifiable=True):
    """Servo command outcome."""

    FIELDS = (Field("channel", "B"), Field("angle", "f"), Field("success", "?"))


class LEDPacket(Packet, reliable=True, identifiable=True):
    """LED strip command."""

    FIELDS = (Field("low", "B"), Field("high", "B"), Field("system", "B"), Field("mode", "B"))


class LEDResponsePacket(Packet, reliable=True, identifiable=True):
    """LED command outcome."""

    FIELDS = _flags("success")


# ---------- Configuration ----------

class MassConfigRequestPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags("req_offset", "req_scale", "req_alpha", "req_channels_status")


class MassConfigPacket(Packet, reliable=True, identifiable=True):
    FIELDS = (
        Field("offset", "f", 4),
        Field("scale", "f", 4),
        Field("alpha", "f"),
        Field("enabled_channels", "?", 4),
    ) + _flags("remote_command", "set_offset", "set_scale", "set_alpha", "set_channels_status")


class MassConfigResponsePacket(Packet, reliable=True, identifiable=True):
    FIELDS = (
        Field("offset", "f", 4),
        Field("scale", "f", 4),
        Field("alpha", "f"),
        Field("enabled_channels", "?", 4),
    ) + _flags("set_offset", "set_scale", "set_alpha", "set_channels_status", "success")


class PotentiometerConfigRequestPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags(
        "req_min_voltages", "req_max_voltages", "req_min_angles", "req_max_angles", "req_channels_status"
    )


_POT_RANGES = (
    Field("min_voltages", "H", 4),
    Field("max_voltages", "H", 4),
    Field("min_angles", "H", 4),
    Field("max_angles", "H", 4),
) + _floats("min_voltages_max_val", "max_voltages_max_val", "min_angles_max_val", "max_angles_max_val") + (
    Field("enabled_channels", "?", 4),
)


class PotentiometerConfigPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _POT_RANGES + _flags(
        "remote_command", "set_min_voltages", "set_max_voltages", "set_min_angles", "set_max_angles",
        "set_channels_status",
    )


class PotentiometerConfigResponsePacket(Packet, reliable=True, identifiable=True):
    FIELDS = _POT_RANGES + _flags(
        "set_min_voltages", "set_max_voltages", "set_min_angles", "set_max_angles", "set_channels_status",
        "success",
    )


class AccelConfigRequestPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags("req_bias", "req_transform")


class AccelConfigPacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("bias", "f", 3), Field("transform", "f", 9)) + _flags(
        "remote_command", "set_bias", "set_transform"
    )


class AccelConfigResponsePacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("bias", "f", 3), Field("transform", "f", 9)) + _flags("set_bias", "set_transform", "success")


class GyroConfigRequestPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags("req_bias")


class GyroConfigPacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("bias", "f", 3),) + _flags("remote_command", "set_bias")


class GyroConfigResponsePacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("bias", "f", 3),) + _flags("set_bias", "success")


class MagConfigRequestPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags("req_hard_iron", "req_soft_iron")


class MagConfigPacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("hard_iron", "f", 3), Field("soft_iron", "f", 9)) + _flags(
        "remote_command", "set_hard_iron", "set_soft_iron"
    )


class MagConfigResponsePacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("hard_iron", "f", 3), Field("soft_iron", "f", 9)) + _flags(
        "set_hard_iron", "set_soft_iron", "success"
    )


class ServoConfigRequestPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags("req_min_duty", "req_max_duty", "req_min_angles", "req_max_angles")


_SERVO_RANGES = (
    Field("min_duty", "H", 4),
    Field("max_duty", "H", 4),
    Field("min_angles", "H", 4),
    Field("max_angles", "H", 4),
) + _floats("min_duty_max_val", "max_duty_max_val", "min_angles_max_val", "max_angles_max_val")


class ServoConfigPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _SERVO_RANGES + _flags(
        "remote_command", "set_min_duty", "set_max_duty", "set_min_angles", "set_max_angles"
    )


class ServoConfigResponsePacket(Packet, reliable=True, identifiable=True):
    FIELDS = _SERVO_RANGES + _flags("set_min_duty", "set_max_duty", "set_min_angles", "set_max_angles", "success")


class DummyPacket(Packet, reliable=True, identifiable=True):
    FIELDS = (Field("dummy_data", "B"),)


# ---------- Calibration ----------

class MassCalibPacket(Packet, reliable=True, identifiable=True):
    """Calibration request; channel 0 selects all enabled channels."""

    FIELDS = (
        Field("channel", "B"),
        Field("calib_offset", "?"),
        Field("calib_scale", "?"),
        Field("expected_weight", "f"),
    )


class ImuCalibPacket(Packet, reliable=True, identifiable=True):
    FIELDS = _flags("calib_offset_accel", "calib_offset_gyro")


# ---------- General ----------

class DataPacket(Packet):
    FIELDS = (Field("data", "I"),)


class PingPacket(Packet, reliable=True, identifiable=True):
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