import pytest

from broco import protocol22w29 as p
from broco.packets import Packet, is_reliable, make_reliable

ALL = [
    p.Avionics_BaroTempPacket,
    p.Avionics_AccelMagPacket,
    p.Avionics_ADCPacket,
    p.Science_MassPacket,
    p.Power_BusInfo,
    p.Power_BatteryInfo,
    p.Power_ControllerHealth,
    p.Power_ControllerState,
    p.FsmPacket,
    p.DataPacket,
    p.PingPacket,
    p.ErrorPacket,
    p.RequestPacket,
    p.ResponsePacket,
    p.ProgressPacket,
    p.PayloadPacket,
    p.FlushPacket,
]

RELIABLE = [
    p.Power_BusInfo,
    p.Power_BatteryInfo,
    p.Power_ControllerHealth,
    p.Power_ControllerState,
    p.PingPacket,
    p.ErrorPacket,
    p.RequestPacket,
    p.ResponsePacket,
    p.ProgressPacket,
    p.PayloadPacket,
]


@pytest.mark.parametrize("cls", ALL)
def test_default_round_trip(cls):
    packet = cls()
    data = Packet.to_bytes(packet)
    assert len(data) == cls.size()
    assert cls.from_bytes(data) == packet


@pytest.mark.parametrize("cls", RELIABLE)
def test_crc_round_trip(cls):
    packet = cls()
    make_reliable(packet)
    back = cls.from_bytes(packet.to_bytes())
    assert is_reliable(back)


@pytest.mark.parametrize("cls", [c for c in ALL if c not in RELIABLE])
def test_standard_packets_have_no_crc(cls):
    with pytest.raises(TypeError):
        is_reliable(cls())


def test_power_supply_constants_encode_in_packets():
    request = p.RequestPacket(uid=p.PS_UID_SUPERVISOR, action_id=p.PS_ACTION_SET, target_id=p.PS_TARGET_FLASH_ERASE)
    assert request.to_bytes()[:4] == bytes([0x42, 0x00, 0x01, 0x08])
    assert p.RequestPacket(uid=p.PS_UID_CTA).to_bytes()[0] == 0x43
    assert p.RequestPacket(uid=p.PS_UID_CTB).to_bytes()[0] == 0x44
    assert p.Power_BusInfo(bus_id=p.PS_48V).to_bytes()[0] == 0x5


def test_bus_info_crc_detects_tampering():
    packet = p.Power_BusInfo(bus_id=p.PS_24V, voltage=24.0, current=1.5, energy=10.0, ripple=0.25, temperature=30.0)
    make_reliable(packet)
    assert is_reliable(packet)
    packet.bus_id = p.PS_48V
    assert not is_reliable(packet)


def test_payload_round_trip():
    body = list(range(256)) * 2
    packet = p.PayloadPacket(length=len(body), payload=body)
    make_reliable(packet)
    back = p.PayloadPacket.from_bytes(packet.to_bytes())
    assert back.payload == body
    assert back.length == len(body)
    assert is_reliable(back)


def test_payload_wrong_size_rejected():
    with pytest.raises(ValueError):
        p.PayloadPacket(payload=[0] * 511)


def test_flush_is_all_zero_by_default():
    assert p.FlushPacket().to_bytes() == bytes(p.FlushPacket.size())


def test_progress_round_trip():
    packet = p.ProgressPacket(uid=5, action_id=p.PS_ACTION_EXE, target_id=p.PS_TARGET_DOWNLOAD, progress=50)
    back = p.ProgressPacket.from_bytes(packet.to_bytes())
    assert (back.uid, back.action_id, back.target_id, back.progress) == (
        5, p.PS_ACTION_EXE, p.PS_TARGET_DOWNLOAD, 50
    )