"""NES emulator building blocks: cartridges, mappers, constants and the audio unit."""

__version__ = "0.1.0"