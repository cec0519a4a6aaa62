"""Fixed-layout, little-endian packed packets and their CRC-16 helpers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional

_CODES = "?BbHhIiQqfd"


def gen_crc16(data: bytes) -> int:
    """Return the CRC-16 (CCITT, initial value 0xFFFF) of ``data``."""
    crc = 0xFFFF
    for byte in data:
        x = ((crc >> 8) ^ byte) & 0xFF
        x ^= x >> 4
        crc = ((crc << 8) ^ ((x << 12) & 0xFFFF) ^ ((x << 5) & 0xFFFF) ^ x) & 0xFFFF
    return crc


@dataclass(frozen=True)
class Field:
    """One member of a packet: a struct code, repeated ``count`` times."""

    name: str
    code: str
    count: int = 1
    default_factory: Optional[Callable[[], Any]] = None

    def __post_init__(self) -> None:
        if len(self.code) != 1 or self.code not in _CODES:
            raise ValueError(f"unsupported field code {self.code!r}")
        if self.count < 1:
            raise ValueError("field count must be at least 1")

    @property
    def format(self) -> str:
        return f"{self.count}{self.code}" if self.count > 1 else self.code

    def initial(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        if self.code == "?":
            zero: Any = False
        elif self.code in "fd":
            zero = 0.0
        else:
            zero = 0
        return zero if self.count == 1 else [zero] * self.count


class Packet:
    """Base class of packed packets.

    Subclasses list their members in ``FIELDS``. Passing ``identifiable=True``
    appends a ``uint16`` ``id`` member, and ``reliable=True`` appends a
    ``uint16`` ``crc`` member after it.
    """

    FIELDS: ClassVar[tuple[Field, ...]] = ()
    RELIABLE: ClassVar[bool] = False
    IDENTIFIABLE: ClassVar[bool] = False
    _layout: ClassVar[tuple[Field, ...]] = ()
    _struct: ClassVar[struct.Struct] = struct.Struct("<")

    def __init_subclass__(cls, *, reliable: bool = False, identifiable: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        layout = list(cls.FIELDS)
        if identifiable:
            layout.append(Field("id", "H"))
        if reliable:
            layout.append(Field("crc", "H"))
        names = [f.name for f in layout]
        if len(set(names)) != len(names):
            raise TypeError(f"{cls.__name__} has duplicate field names")
        cls._layout = tuple(layout)
        cls._struct = struct.Struct("<" + "".join(f.format for f in layout))
        cls.RELIABLE = reliable
        cls.IDENTIFIABLE = identifiable

    def __init__(self, **values: Any) -> None:
        known = {f.name: f for f in self._layout}
        unknown = set(values) - set(known)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no field(s) {', '.join(sorted(unknown))}")
        for name, spec in known.items():
            value = values[name] if name in values else spec.initial()
            if spec.count > 1:
                value = list(value)
                if len(value) != spec.count:
                    raise ValueError(f"field {name} needs {spec.count} values, got {len(value)}")
            setattr(self, name, value)

    @classmethod
    def size(cls) -> int:
        """Number of bytes the packet takes on the wire."""
        return cls._struct.size

    def _flat(self) -> list[Any]:
        flat: list[Any] = []
        for spec in self._layout:
            value = getattr(self, spec.name)
            if spec.count > 1:
                value = list(value)
                if len(value) != spec.count:
                    raise ValueError(f"field {spec.name} needs {spec.count} values, got {len(value)}")
                flat.extend(value)
            else:
                flat.append(value)
        return flat

    def to_bytes(self) -> bytes:
        """Pack the packet without padding, little-endian."""
        try:
            return self._struct.pack(*self._flat())
        except struct.error as exc:
            raise ValueError(f"cannot pack {type(self).__name__}: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> "Packet":
        """Unpack a packet from exactly ``size()`` bytes."""
        data = bytes(data)
        if len(data) != cls._struct.size:
            raise ValueError(f"{cls.__name__} needs {cls._struct.size} bytes, got {len(data)}")
        items = iter(cls._struct.unpack(data))
        values: dict[str, Any] = {}
        for spec in cls._layout:
            if spec.count > 1:
                values[spec.name] = [next(items) for _ in range(spec.count)]
            else:
                values[spec.name] = next(items)
        return cls(**values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, f.name) == getattr(other, f.name) for f in self._layout)

    def __repr__(self) -> str:
        members = ", ".join(f"{f.name}={getattr(self, f.name)!r}" for f in self._layout)
        return f"{type(self).__name__}({members})"


def _require_reliable(packet: Packet) -> None:
    if not packet.RELIABLE:
        raise TypeError(f"{type(packet).__name__} carries no CRC")


def make_reliable(packet: Packet) -> int:
    """Compute and store the packet's CRC over every byte but the CRC itself."""
    _require_reliable(packet)
    packet.crc = 0  # type: ignore[attr-defined]
    crc = gen_crc16(packet.to_bytes()[:-2])
    packet.crc = crc  # type: ignore[attr-defined]
    return crc


def is_reliable(packet: Packet) -> bool:
    """Tell whether the packet's stored CRC matches its contents."""
    _require_reliable(packet)
    return packet.crc == gen_crc16(packet.to_bytes()[:-2])  # type: ignore[attr-defined]