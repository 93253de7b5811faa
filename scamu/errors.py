"""Errors raised while loading a cartridge image."""

from __future__ import annotations


class CartridgeParseError(Exception):
    """A cartridge image could not be read or understood."""


class MissingMagicNumbersError(CartridgeParseError):
    """The data does not start with the iNES magic numbers."""

    def __init__(self) -> None:
        super().__init__(
            "Magic number missing at the start of the file. Maybe recieved wrong file type."
        )


class NotEnoughBytesError(CartridgeParseError):
    """The data ended before a field of the given size could be read."""

    def __init__(self, requested: int) -> None:
        super().__init__(f"Was trying to read {requested} bytes but the data was too short!")
        self.requested = requested


class UnknownMapperIdError(CartridgeParseError):
    """The header names a mapper that is not supported."""

    def __init__(self, mapper_id: int) -> None:
        super().__init__(f"Unknown mapper id: {mapper_id}!")
        self.mapper_id = mapper_id