import pytest

from broco import protocol22w12 as p
from broco.packets import Packet, is_reliable, make_reliable

ALL = [
    p.DopplerPacket,
    p.ConnectPacket,
    p.DisconnectPacket,
    p.RequestPacket,
    p.AcknowledgePacket,
    p.ResponsePacket,
    p.ProgressPacket,
    p.DataPacket,
    p.MessagePacket,
    p.ErrorPacket,
]


@pytest.mark.parametrize("cls", ALL)
def test_default_round_trip(cls):
    packet = cls()
    data = Packet.to_bytes(packet)
    assert len(data) == cls.size()
    assert cls.from_bytes(data) == packet


@pytest.mark.parametrize("cls", [p.DopplerPacket, p.ConnectPacket])
def test_reliable_packets_carry_crc(cls):
    assert cls.RELIABLE is True
    assert "crc" in repr(cls())


def test_doppler_crc_detects_changes():
    packet = p.DopplerPacket(timestamp=1000, cfo=-42)
    make_reliable(packet)
    assert is_reliable(packet)
    packet.cfo = 42
    assert not is_reliable(packet)


def test_doppler_negative_offset_round_trip():
    packet = p.DopplerPacket(timestamp=7, cfo=-123456)
    make_reliable(packet)
    back = p.DopplerPacket.from_bytes(packet.to_bytes())
    assert back.cfo == -123456
    assert is_reliable(back)


def test_connect_crc_survives_round_trip():
    packet = p.ConnectPacket(name=list(b"base".ljust(32, b"\x00")))
    crc = make_reliable(packet)
    back = p.ConnectPacket.from_bytes(packet.to_bytes())
    assert back.crc == crc
    assert is_reliable(back)


def test_standard_packet_has_no_crc():
    with pytest.raises(TypeError):
        make_reliable(p.ErrorPacket(error_id=1))


def test_acknowledge_round_trip():
    back = p.AcknowledgePacket.from_bytes(p.AcknowledgePacket(uuid=300, result=1).to_bytes())
    assert (back.uuid, back.result) == (300, 1)