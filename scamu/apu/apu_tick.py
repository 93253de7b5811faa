"""Timing signals handed to the APU channels on every CPU cycle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApuTick:
    """Which clocks fire during one CPU cycle."""

    is_apu_cycle: bool = False
    is_quarter_frame: bool = False
    is_half_frame: bool = False