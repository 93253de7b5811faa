# scamu

Building blocks for an NES emulator, in pure Python with no third-party
dependencies:

- **Cartridges**: parse iNES ROM images (`scamu.cartridge.Cartridge`),
  inspect their header (`scamu.header.Header`, `scamu.header.TvSystem`,
  including NES 2.0 detection and TV system) and route CPU and PPU accesses
  (`scamu.access.CpuAccess`, `scamu.access.PpuAccess`) through mappers 000
  (NROM) and 002 (UxROM) (`scamu.mappers`).
- **Audio**: the NES audio processing unit (`scamu.apu.core.Apu`) with two
  pulse channels and a triangle channel, a four/five-step frame sequencer,
  and a non-linear mixer that averages its output into float samples at a
  configurable rate. The channel pieces (`Envelope`, `LengthCounter`,
  `Sweep`, `PulseChannel`, `TriangleChannel`) live in `scamu.apu` and can be
  used on their own.
- **Helpers**: bit-field utilities (`scamu.bitops`) and hardware constants
  (`scamu.constants`, including `Button`, `CpuFlag`, the palette `COLORS`
  and `byte_size`).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Loading a cartridge

```python
from scamu.access import CpuAccess, PpuAccess
from scamu.cartridge import Cartridge
from scamu.errors import CartridgeParseError

try:
    cart = Cartridge.from_file("game.nes")
except CartridgeParseError as exc:
    print(f"cannot load ROM: {exc}")
else:
    header = cart.header
    print(header.mapper_id(), header.prg_rom_size_bytes(), header.tv_system())

    reset_low = cart.read(CpuAccess(0xFFFC))   # None when the mapper does not map the address
    tile_byte = cart.read(PpuAccess(0x0000))
    cart.write(CpuAccess(0x8000), 1)           # selects a bank on mapper 002
    mirrored = cart.map_nametable(0x2400)      # nametable mirroring from the header
```

`Cartridge.from_bytes(data)` parses an image already in memory. Parsing
failures raise subclasses of `CartridgeParseError`:
`MissingMagicNumbersError`, `NotEnoughBytesError` and `UnknownMapperIdError`;
`from_file` also raises `CartridgeParseError` when the file cannot be read.

Writes are only passed to the mapper (for bank switching); the cartridge's
program and character memory are not modified by them.

## Producing audio

The APU is ticked once per CPU cycle. Register writes use the CPU addresses
`0x4000`–`0x4017`; samples accumulate in a bounded queue that drops the
oldest sample when full.

```python
from scamu.apu.core import Apu

apu = Apu()
apu.write_register(0x4015, 0b0000_0001)   # enable pulse 1
apu.write_register(0x4000, 0b1011_1111)   # 50% duty, constant volume 15
apu.write_register(0x4002, 0xFD)
apu.write_register(0x4003, 0b0000_1000)

for _ in range(30_000):
    apu.tick()

samples = []
while (sample := apu.pop_sample()) is not None:
    samples.append(sample)
```

`len(apu)` reports how many samples are waiting. `apu.read_register(0x4015,
peek=False)` returns the status byte and clears the frame interrupt flag.
Set `cpu_clock_frequency` and `apu_sample_rate` on the `Apu` if you clock it
differently from the defaults.

## What this package does not do

It has no CPU, no PPU, no memory bus and no complete console to tick: the
pieces here are meant to be driven by such code. It opens no window and
plays no sound; samples are handed to the caller. The APU has no noise or
DMC channel, and its frame interrupt flag is not delivered anywhere as an
interrupt. Only mappers 000 and 002 are supported.