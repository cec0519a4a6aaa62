import os
import queue

import pytest

from broco.udev_driver import UDevDriver


@pytest.fixture
def fifo(tmp_path):
    path = tmp_path / "device"
    os.mkfifo(path)
    return path


def test_loopback_through_fifo(fifo):
    received = queue.Queue()
    with UDevDriver(fifo) as driver:
        driver.receive(lambda sender, data: received.put((sender, data)))
        driver.transmit(b"hello")
        assert received.get(timeout=2) == (0, b"hello")


def test_large_transmission_arrives_whole(fifo):
    received = queue.Queue()
    payload = bytes(range(256)) * 3
    with UDevDriver(fifo) as driver:
        driver.receive(lambda sender, data: received.put(data))
        driver.transmit(payload)
        collected = b""
        while len(collected) < len(payload):
            chunk = received.get(timeout=2)
            assert len(chunk) <= 256
            collected += chunk
    assert collected == payload


def test_close_disconnects(fifo):
    driver = UDevDriver(fifo)
    assert driver.connected is True
    driver.close()
    assert driver.connected is False
    driver.close()
    assert driver.connected is False


def test_missing_device(tmp_path):
    with pytest.raises(FileNotFoundError):
        UDevDriver(tmp_path / "absent")