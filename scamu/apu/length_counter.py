"""Length counter that silences a channel after a set duration."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import LENGTH_COUNTER_TABLE


@dataclass
class LengthCounter:
    """Counts down on half frames; a channel is silent at zero."""

    enabled: bool = False
    halt_length_counter: bool = False
    length_counter: int = 0

    def set_enabled(self, enabled: bool) -> None:
        """Enable the counter; disabling clears it."""
        self.enabled = enabled
        if not enabled:
            self.length_counter = 0

    def set_length_counter_load(self, load: int) -> None:
        """Load the counter from the length table (ignored while disabled)."""
        if not self.enabled:
            return
        self.length_counter = LENGTH_COUNTER_TABLE[load]

    def tick(self) -> None:
        """Clock the counter (once per half frame)."""
        if not self.halt_length_counter and self.length_counter:
            self.length_counter -= 1

    def is_non_zero(self) -> bool:
        return self.length_counter != 0

    def output(self) -> int:
        """1 while the counter runs, 0 once it has expired."""
        return 1 if self.length_counter else 0