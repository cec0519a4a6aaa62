import queue
import socket
import sys

import pytest

from broco.can_socket_driver import CAN_MTU, CANFD_MTU, CanSocketDriver


@pytest.fixture
def pair():
    local, peer = socket.socketpair(socket.AF_UNIX, socket.SOCK_SEQPACKET)
    yield local, peer
    local.close()
    peer.close()


def _frame(can_id, payload, total):
    header = can_id.to_bytes(4, sys.byteorder) + bytes([len(payload), 0, 0, 0])
    return (header + payload).ljust(total, b"\0")


def test_transmit_frame_layout(pair):
    local, peer = pair
    received = queue.Queue()
    with CanSocketDriver("vcan0", sock=local) as driver:
        driver.tx_frame_config(0x123)
        driver.transmit(b"\x01\x02\x03")
        frame = peer.recv(256)
        assert len(frame) == CANFD_MTU
        assert int.from_bytes(frame[:4], sys.byteorder) == 0x123
        assert frame[4] == 3
        assert frame[8:11] == b"\x01\x02\x03"
        assert frame[11:].count(0) == len(frame) - 11
        driver.receive(lambda sender, data: received.put((sender, data)))
        driver.start_reception()
        peer.send(frame)
        assert received.get(timeout=2) == (0, b"\x01\x02\x03")


def test_transmit_too_long(pair):
    local, _ = pair
    with CanSocketDriver("vcan0", sock=local) as driver:
        with pytest.raises(ValueError):
            driver.transmit(bytes(65))


def test_reception_of_fd_frame(pair):
    local, peer = pair
    received = queue.Queue()
    with CanSocketDriver("vcan0", sock=local) as driver:
        driver.receive(lambda sender, data: received.put((sender, data)))
        driver.start_reception()
        peer.send(_frame(0x55, b"ping", CANFD_MTU))
        assert received.get(timeout=2) == (0, b"ping")


def test_reception_of_classic_frame(pair):
    local, peer = pair
    received = queue.Queue()
    with CanSocketDriver("vcan0", sock=local) as driver:
        driver.receive(lambda sender, data: received.put(data))
        driver.start_reception()
        peer.send(_frame(0x10, b"ab", CAN_MTU))
        assert received.get(timeout=2) == b"ab"


def test_invalid_frames_are_dropped(pair):
    local, peer = pair
    received = queue.Queue()
    with CanSocketDriver("vcan0", sock=local) as driver:
        driver.receive(lambda sender, data: received.put(data))
        driver.start_reception()
        peer.send(b"short")
        peer.send(_frame(0x20, b"ok", CANFD_MTU))
        assert received.get(timeout=2) == b"ok"
        assert received.empty()


def test_close(pair):
    local, _ = pair
    driver = CanSocketDriver("vcan0", sock=local)
    driver.start_reception()
    assert driver.connected is True
    driver.close()
    assert driver.connected is False


def test_missing_interface():
    with pytest.raises(OSError):
        CanSocketDriver("nosuchcan0")