"""Addresses presented to a cartridge, tagged with the bus they come from."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CpuAccess:
    """An access from the CPU bus."""

    address: int


@dataclass(frozen=True)
class PpuAccess:
    """An access from the PPU bus."""

    address: int