"""Tuning constants for PPM decoding and joystick mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Timing, range and mapping parameters.

    The defaults suit an Absima CR10P / Dumbo RC DDF-350 transmitter.
    All times are in microseconds unless the name says otherwise.
    """

    ppm_input_pin: int = 2
    ppm_inverted: bool = False

    sync_min_us: int = 3000
    sync_max_us: int = 50000
    channel_min_us: int = 500
    channel_max_us: int = 2100
    axis_min_us: int = 1100
    axis_max_us: int = 1900
    axis_center_us: int = 1500

    num_channels: int = 8
    num_axes: int = 4
    num_buttons: int = 5

    axis_deadzone_pct: int = 0

    button_threshold_us: int = 1500
    button_hysteresis_us: int = 21

    channel_lock_frames: int = 5

    signal_loss_ms: int = 500

    serial_debug: bool = False
    serial_baud: int = 115200

    def __post_init__(self) -> None:
        if self.axis_min_us >= self.axis_max_us:
            raise ValueError("axis_min_us must be below axis_max_us")
        if not self.axis_min_us <= self.axis_center_us <= self.axis_max_us:
            raise ValueError("axis_center_us must lie within the axis range")
        if self.sync_min_us > self.sync_max_us:
            raise ValueError("sync_min_us must not exceed sync_max_us")
        if self.channel_min_us > self.channel_max_us:
            raise ValueError("channel_min_us must not exceed channel_max_us")
        if not 0 <= self.axis_deadzone_pct <= 100:
            raise ValueError("axis_deadzone_pct must be between 0 and 100")

    def deadzone_us(self) -> int:
        """Half-width of the central axis deadzone in microseconds."""
        return (self.axis_max_us - self.axis_min_us) * self.axis_deadzone_pct // 200