"""Loading iNES images and serving reads and writes from them."""

from __future__ import annotations

import os

from .access import CpuAccess, PpuAccess
from .constants import CHR_ROM_BANK_SIZE, NES_MAGIC_NUMBERS, PRG_ROM_BANK_SIZE
from .errors import CartridgeParseError, MissingMagicNumbersError, NotEnoughBytesError
from .header import Header
from .mappers import Mapper, mapper_from_header

_TRAINER_SIZE = 512
_HEADER_PADDING = 5


class _Reader:
    """Consumes a byte string front to back."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    def take(self, n: int) -> bytes:
        if len(self._data) - self._pos < n:
            raise NotEnoughBytesError(n)
        chunk = bytes(self._data[self._pos : self._pos + n])
        self._pos += n
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]


class Cartridge:
    """A cartridge: header, mapper and program/character memory."""

    def __init__(self, header: Header, mapper: Mapper, prg_mem: bytes, chr_mem: bytes) -> None:
        self.header = header
        self.mapper = mapper
        self.prg_mem = prg_mem
        self.chr_mem = chr_mem

    @classmethod
    def from_bytes(cls, data: bytes) -> Cartridge:
        """Parse an iNES image held in memory."""
        reader = _Reader(bytes(data))
        if reader.take(len(NES_MAGIC_NUMBERS)) != NES_MAGIC_NUMBERS:
            raise MissingMagicNumbersError()

        prg_size, chr_size, flags6, flags7, flags8, flags9, flags10 = (
            reader.byte() for _ in range(7)
        )
        reader.take(_HEADER_PADDING)
        header = Header(prg_size, chr_size, flags6, flags7, flags8, flags9, flags10)

        if header.has_trainer():
            reader.take(_TRAINER_SIZE)

        prg_mem = reader.take(PRG_ROM_BANK_SIZE * prg_size)
        chr_mem = reader.take(CHR_ROM_BANK_SIZE * chr_size)
        mapper = mapper_from_header(header)
        return cls(header, mapper, prg_mem, chr_mem)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Cartridge:
        """Read and parse an iNES image from disk."""
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise CartridgeParseError(
                f"Got an io error while reading a cartrige:\nio error was: {exc}!"
            ) from exc
        return cls.from_bytes(data)

    def write(self, access: CpuAccess | PpuAccess, value: int) -> None:
        """Pass a write to the mapper (for bank switching and the like)."""
        self.mapper.map_write(access, value)

    def read(self, access: CpuAccess | PpuAccess) -> int | None:
        """Return the byte at the mapped address, or None if unmapped."""
        addr = self.mapper.map_read(access)
        if addr is None:
            return None
        if isinstance(access, CpuAccess):
            return self.prg_mem[addr]
        return self.chr_mem[addr]

    def map_nametable(self, address: int) -> int:
        """Apply the cartridge's nametable mirroring to a PPU address."""
        return self.mapper.map_nametable(address)