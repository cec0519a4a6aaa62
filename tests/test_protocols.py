import pytest

from broco import protocol22w12, protocol23
from broco.packets import Packet
from broco.protocols import Protocol, registered_packets


@pytest.mark.parametrize("protocol", list(Protocol))
def test_every_registered_type_is_a_packet(protocol):
    packets = registered_packets(protocol)
    assert packets
    assert all(issubclass(cls, Packet) for cls in packets)


@pytest.mark.parametrize("protocol", list(Protocol))
def test_no_duplicate_registrations(protocol):
    packets = registered_packets(protocol)
    assert len(set(packets)) == len(packets)


@pytest.mark.parametrize("protocol", list(Protocol))
def test_registered_packets_fit_bus_limit(protocol):
    assert all(cls.size() <= 1023 for cls in registered_packets(protocol))


def test_radio_protocol_registers_four_packets():
    assert registered_packets(Protocol.PROTOCOL_RADIO_22W12) == (
        protocol22w12.DopplerPacket,
        protocol22w12.ConnectPacket,
        protocol22w12.DisconnectPacket,
        protocol22w12.ErrorPacket,
    )


def test_protocol23_order():
    packets = registered_packets(Protocol.PROTOCOL_23)
    assert packets[0] is protocol23.FOURINONEPacket
    assert packets[-1] is protocol23.DummyPacket
    assert protocol23.MassPacket in packets


def test_lookup_by_value():
    assert registered_packets("23") == registered_packets(Protocol.PROTOCOL_23)
    assert Protocol("22W29") is Protocol.PROTOCOL_22W29


def test_unknown_protocol_rejected():
    with pytest.raises(ValueError):
        registered_packets("99X1")