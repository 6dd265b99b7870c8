"""Mapping of decoded PPM channels onto joystick axes and buttons."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .config import Config


class Axis(IntEnum):
    """Joystick axes driven by the channel map."""

    X = 0
    Y = 1
    RX = 2
    RY = 3


@dataclass(frozen=True)
class JoystickState:
    """A joystick report: axis values in microseconds and button states."""

    axes: dict[Axis, int]
    buttons: tuple[bool, ...]


# Channel map for the Absima CR10P profile, by channel index:
#   ch1 X, ch2 Y, ch3 btn0, ch4 btn1, ch5 Rx, ch6 Ry,
#   ch7 3-position switch -> btn2 (1300 us) and btn3 (1700 us), ch8 btn4.
_AXIS_CHANNELS: tuple[tuple[int, Axis, bool], ...] = (
    (0, Axis.X, False),
    (1, Axis.Y, False),
    (4, Axis.RX, False),
    (5, Axis.RY, False),
)
_SWITCH_LOW_US = 1300
_SWITCH_HIGH_US = 1700


class ChannelMapper:
    """Converts frames of channel values into joystick reports.

    Axes and buttons are only updated when their value changes; buttons
    use hysteresis around their threshold so a held button is easier to
    keep pressed and a released one harder to press.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        center = self.config.axis_center_us
        self._axes = {axis: center for axis in Axis}
        self._buttons = [False] * self.config.num_buttons
        self.reports_sent = 0

    @property
    def state(self) -> JoystickState:
        """The current joystick state."""
        return JoystickState(axes=dict(self._axes), buttons=tuple(self._buttons))

    def emit(self, frame: Sequence[int]) -> JoystickState:
        """Apply one frame and return the joystick report sent for it."""
        cfg = self.config
        count = len(frame)
        threshold = cfg.button_threshold_us
        hysteresis = cfg.button_hysteresis_us

        button_channels = [
            (2, 0, threshold),
            (3, 1, threshold),
            (6, 2, _SWITCH_LOW_US),
            (6, 3, _SWITCH_HIGH_US),
            (7, 4, threshold),
        ]

        for channel, axis, invert in _AXIS_CHANNELS:
            if channel < count:
                self._update_axis(axis, frame[channel], invert)
        for channel, button, thresh in button_channels:
            if channel < count:
                self._update_button(button, frame[channel], thresh, hysteresis)

        return self._send()

    def reset_to_neutral(self) -> JoystickState:
        """Centre every axis, release every button and send the report."""
        center = self.config.axis_center_us
        for axis in Axis:
            self._axes[axis] = center
        self._buttons = [False] * self.config.num_buttons
        return self._send()

    def _update_axis(self, axis: Axis, raw_us: int, invert: bool) -> None:
        cfg = self.config
        value = cfg.axis_min_us + cfg.axis_max_us - raw_us if invert else raw_us
        deadzone = cfg.deadzone_us()
        if deadzone > 0 and abs(value - cfg.axis_center_us) <= deadzone:
            value = cfg.axis_center_us
        if value != self._axes[axis]:
            self._axes[axis] = value

    def _update_button(
        self, button: int, raw_us: int, threshold: int, hysteresis: int
    ) -> None:
        hys = hysteresis if self._buttons[button] else -hysteresis
        pressed = raw_us > threshold - hys
        if pressed != self._buttons[button]:
            self._buttons[button] = pressed

    def _send(self) -> JoystickState:
        self.reports_sent += 1
        return self.state