"""Driver for Linux SocketCAN interfaces carrying CAN FD frames."""

from __future__ import annotations

import logging
import select
import socket
import struct
import threading
from typing import Optional

from broco.io_bus import IODriver, Receiver

_log = logging.getLogger(__name__)

CAN_MTU = 16
CANFD_MTU = 72
CANFD_MAX_DLEN = 64

_HEADER = struct.Struct("=IBBBB")
_POLL_INTERVAL = 0.05


def _open_can_socket(ifname: str) -> socket.socket:
    family = getattr(socket, "AF_CAN", None)
    if family is None:
        raise OSError("CAN sockets are not supported on this platform")
    sock = socket.socket(family, socket.SOCK_RAW, socket.CAN_RAW)
    try:
        fd_frames = getattr(socket, "CAN_RAW_FD_FRAMES", None)
        if fd_frames is not None:
            sock.setsockopt(socket.SOL_CAN_RAW, fd_frames, 1)
        sock.bind((ifname,))
    except OSError:
        sock.close()
        raise
    return sock


class CanSocketDriver(IODriver):
    """Sends and receives CAN FD frames on one interface; incoming data is reported as sender 0.

    ``sock`` may supply an already bound socket instead of opening ``ifname``.
    """

    def __init__(self, ifname: str, *, sock: Optional[socket.socket] = None) -> None:
        self.ifname = ifname
        self._sock = sock if sock is not None else _open_can_socket(ifname)
        self._can_id = 0
        self._receiver: Optional[Receiver] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        _log.info("CAN connected on %s", ifname)

    @property
    def connected(self) -> bool:
        return not self._stop.is_set()

    @property
    def can_id(self) -> int:
        return self._can_id

    def fileno(self) -> int:
        return self._sock.fileno()

    def start_reception(self) -> None:
        """Start the background thread that reads incoming frames."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._receive_loop, name="can-reception", daemon=True)
        self._thread.start()

    def _receive_loop(self) -> None:
        while not self._stop.is_set():
            try:
                ready, _, _ = select.select([self._sock], [], [], _POLL_INTERVAL)
                if not ready:
                    continue
                frame = self._sock.recv(CANFD_MTU)
            except (OSError, ValueError):
                break
            if len(frame) not in (CAN_MTU, CANFD_MTU):
                if not frame:
                    break
                _log.warning("Invalid CAN(FD) frame")
                continue
            _, length, _, _, _ = _HEADER.unpack_from(frame)
            length = min(length, len(frame) - _HEADER.size)
            receiver = self._receiver
            if receiver is not None:
                receiver(0, frame[_HEADER.size:_HEADER.size + length])

    def receive(self, receiver: Receiver) -> None:
        """Set the callback for incoming frame data."""
        self._receiver = receiver

    def tx_frame_config(self, can_id: int) -> None:
        """Set the CAN identifier of outgoing frames."""
        self._can_id = can_id & 0xFFFFFFFF

    def transmit(self, data: bytes) -> None:
        """Send ``data`` as one CAN FD frame; does nothing once closed."""
        if not self.connected:
            return
        data = bytes(data)
        if len(data) > CANFD_MAX_DLEN:
            raise ValueError(f"a CAN FD frame holds at most {CANFD_MAX_DLEN} bytes, got {len(data)}")
        frame = _HEADER.pack(self._can_id, len(data), 0, 0, 0) + data.ljust(CANFD_MAX_DLEN, b"\0")
        self._sock.send(frame)

    def close(self) -> None:
        """Stop reception and close the socket."""
        if self._stop.is_set():
            return
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._sock.close()

    def __enter__(self) -> "CanSocketDriver":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()