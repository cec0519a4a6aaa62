# broco

Fixed-layout packet definitions and a framed message bus for exchanging
them with avionics boards over CAN FD, character devices and network links.
Nothing beyond the standard library is needed.

## Modules

- `broco.packets`: the `Packet` base class. A subclass lists its members in
  `FIELDS` as `Field(name, code, count)` entries (struct codes `?BbHhIiQqfd`).
  The class keywords `identifiable=True` and `reliable=True` append a
  `uint16` `id` and a `uint16` `crc` member. Packets are packed little-endian
  without padding: `size()`, `to_bytes()` and `from_bytes(data)`, which
  wants exactly `size()` bytes and raises `ValueError` otherwise.
  `gen_crc16(data)` is CRC-16/CCITT with initial value `0xFFFF`;
  `make_reliable(packet)` computes and stores the CRC over every byte but
  the CRC itself and returns it, and `is_reliable(packet)` checks it. Both
  raise `TypeError` for packets without a CRC.
- Packet sets for each protocol revision: `broco.protocol23`,
  `broco.protocol20w18`, `broco.protocol21w3`, `broco.protocol22w12` and
  `broco.protocol22w29`. The last two also hold the action and power supply
  constants (`TARE`, `PS_UID_SUPERVISOR`, ...) of their revision.
- `broco.protocols`: the `Protocol` enum and `registered_packets(protocol)`,
  which returns the packet types a revision registers, in order. It accepts
  an enum member or its value, such as `"23"`.
- `broco.message_bus`: `MessageBus`, `PacketDefinition` and the errors
  `BusError`, `DefinitionError`, `UnknownPacketError` and
  `TransmissionError`.
  - `define(packet_type, identifier)` binds a type to a one-byte identifier
    whose low six bits select one of 64 slots and returns its
    `PacketDefinition`. It raises `DefinitionError` if the slot or type is
    taken or the packet is over 1023 bytes.
  - `handle(packet_type, handler)` adds a `handler(sender_id, packet)`; a
    type may have several.
  - `forward(packet_type, bus)` resends every received packet of that type
    on another bus; a second forwarder for the same type raises `BusError`.
  - `send(message)` writes `0x7F`, the identifier and the payload into
    frames, repeating the preamble and identifier at the start of each frame
    for packets longer than one frame.
  - `receive(sender_id, data)` resynchronises on the preamble, skips unknown
    identifiers and reassembles packets separately for each sender.
- `broco.io_bus`: the `IODriver` interface (`receive(receiver)`,
  `transmit(data)`) and `IOBus(driver, frame_size)`, which joins a bus to a
  driver and splits incoming data into chunks of at most one frame.
- `broco.can_bus.CANBus` (64-byte frames) and `broco.network_bus.NetworkBus`
  (256-byte frames): buses with the `protocol23` packets predefined under
  the identifiers listed in `CAN_DEFINITIONS` and `NETWORK_DEFINITIONS`.
- `broco.udev_driver.UDevDriver(device)`: opens a device file, reads it on a
  background thread and reports the bytes as sender 0. Usable as a context
  manager; `close()` stops the thread and closes the file.
- `broco.can_socket_driver.CanSocketDriver(ifname)`: a SocketCAN driver for
  CAN FD frames (Linux only; an already bound socket can be passed as
  `sock=`). `start_reception()` starts the reading thread,
  `tx_frame_config(can_id)` sets the identifier of outgoing frames, and
  `transmit` refuses more than 64 bytes with `ValueError`.
- `broco.dlc`: `len2dlc(length, return_raw=False)` and `dlc2len(dlc)`
  convert between payload lengths and CAN FD data length codes; lengths over
  64 and unknown codes give 0.

## Installing

```
pip install .
```

## Example

```python
from broco.can_bus import CANBus
from broco.io_bus import IODriver
from broco.packets import make_reliable
from broco.protocol23 import VoltmeterPacket


class LoopbackDriver(IODriver):
    def receive(self, receiver):
        self._receiver = receiver

    def transmit(self, data):
        self._receiver(0, data)


bus = CANBus(LoopbackDriver())
bus.handle(VoltmeterPacket, lambda sender, packet: print(sender, packet.voltage))

packet = VoltmeterPacket(voltage=12.5, id=3)
make_reliable(packet)
bus.send(packet)  # prints: 0 12.5
```

## What it does not do

The package is a library with no command-line tool. It has no driver for
microcontroller UART or FDCAN peripherals; for CAN FD it offers the
SocketCAN driver and the data length code conversions in `broco.dlc`.
Received CRCs are not checked by the bus; call `is_reliable` in a handler.

## Running the tests

```
pip install .[test]
pytest
```