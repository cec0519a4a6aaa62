"""Message bus bound to a byte-oriented I/O driver with a fixed frame size."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from broco.message_bus import MessageBus

Receiver = Callable[[int, bytes], None]


class IODriver(ABC):
    """Transport that delivers incoming bytes to a receiver and sends outgoing frames."""

    @abstractmethod
    def receive(self, receiver: Receiver) -> None:
        """Set the callback that gets ``(sender_id, data)`` for incoming bytes."""

    @abstractmethod
    def transmit(self, data: bytes) -> None:
        """Send one frame."""


class IOBus(MessageBus):
    """Message bus whose frames are at most ``frame_size`` bytes long."""

    def __init__(self, driver: IODriver, frame_size: int) -> None:
        if frame_size < 1:
            raise ValueError("frame size must be positive")
        super().__init__()
        self._driver = driver
        self._frame_size = frame_size
        self._frame = bytearray()
        driver.receive(self.receive)

    @property
    def driver(self) -> IODriver:
        """The driver this bus talks through."""
        return self._driver

    @property
    def frame_size(self) -> int:
        return self._frame_size

    def receive(self, sender_id: int, data: bytes) -> None:
        """Feed incoming bytes, at most one frame at a time."""
        data = bytes(data)
        for start in range(0, len(data), self._frame_size):
            super().receive(sender_id, data[start:start + self._frame_size])

    def _append(self, data: bytes) -> int:
        room = self._frame_size - len(self._frame)
        chunk = bytes(data[:room])
        self._frame += chunk
        return len(chunk)

    def _transmit(self) -> None:
        frame = bytes(self._frame)
        self._frame.clear()
        self._driver.transmit(frame)

    def _discard(self) -> None:
        self._frame.clear()