"""Driver for character devices such as serial ports, read on a background thread."""

from __future__ import annotations

import logging
import os
import select
import threading
from typing import Optional

from broco.io_bus import IODriver, Receiver

_log = logging.getLogger(__name__)

READ_SIZE = 256
_POLL_INTERVAL = 0.05


class UDevDriver(IODriver):
    """Reads and writes a device file; incoming bytes are reported as sender 0."""

    def __init__(self, device: str | os.PathLike[str]) -> None:
        self._fd = os.open(device, os.O_RDWR | os.O_NONBLOCK)
        self._receiver: Optional[Receiver] = None
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._receive_loop, name="udev-reception", daemon=True)
        self._thread.start()

    @property
    def connected(self) -> bool:
        return not self._stop.is_set()

    def fileno(self) -> int:
        return self._fd

    def _receive_loop(self) -> None:
        _log.info("Endpoint connected")
        while not self._stop.is_set():
            try:
                ready, _, _ = select.select([self._fd], [], [], _POLL_INTERVAL)
            except (OSError, ValueError):
                break
            if not ready:
                continue
            try:
                data = os.read(self._fd, READ_SIZE)
            except BlockingIOError:
                continue
            except OSError:
                break
            if not data:
                self._stop.wait(_POLL_INTERVAL)
                continue
            receiver = self._receiver
            if receiver is not None:
                receiver(0, data)
        _log.info("Endpoint disconnected")

    def receive(self, receiver: Receiver) -> None:
        """Set the callback for incoming bytes."""
        self._receiver = receiver

    def transmit(self, data: bytes) -> None:
        """Write all of ``data`` to the device; does nothing once closed."""
        if not self.connected:
            return
        view = memoryview(bytes(data))
        while view:
            try:
                written = os.write(self._fd, view)
            except BlockingIOError:
                select.select([], [self._fd], [], _POLL_INTERVAL)
                continue
            view = view[written:]

    def close(self) -> None:
        """Stop the reception thread and release the device."""
        if self._stop.is_set():
            return
        self._stop.set()
        if threading.current_thread() is not self._thread:
            self._thread.join()
        os.close(self._fd)

    def __enter__(self) -> "UDevDriver":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()