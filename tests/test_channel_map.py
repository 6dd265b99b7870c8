import pytest

from ppmjoy.channel_map import Axis, ChannelMapper, JoystickState
from ppmjoy.config import Config


def test_initial_state_is_neutral():
    cfg = Config()
    mapper = ChannelMapper(cfg)
    state = mapper.state
    assert all(v == cfg.axis_center_us for v in state.axes.values())
    assert state.buttons == (False,) * cfg.num_buttons
    assert mapper.reports_sent == 0


def test_full_frame_mapping():
    mapper = ChannelMapper()
    frame = [1600, 1400, 1600, 1400, 1200, 1800, 1500, 1600]
    state = mapper.emit(frame)
    assert state.axes == {Axis.X: 1600, Axis.Y: 1400, Axis.RX: 1200, Axis.RY: 1800}
    assert state.buttons == (True, False, True, False, True)
    assert mapper.reports_sent == 1


@pytest.mark.parametrize(
    "switch_us, expected",
    [(1100, (False, False)), (1500, (True, False)), (1900, (True, True))],
)
def test_three_position_switch(switch_us, expected):
    mapper = ChannelMapper()
    state = mapper.emit([1500] * 6 + [switch_us, 1100])
    assert state.buttons[2:4] == expected


def test_short_frame_updates_only_present_channels():
    cfg = Config()
    mapper = ChannelMapper(cfg)
    state = mapper.emit([1200, 1300])
    assert state.axes[Axis.X] == 1200
    assert state.axes[Axis.Y] == 1300
    assert state.axes[Axis.RX] == cfg.axis_center_us
    assert state.axes[Axis.RY] == cfg.axis_center_us
    assert not any(state.buttons)


def test_button_hysteresis():
    cfg = Config()
    mapper = ChannelMapper(cfg)
    press_at = cfg.button_threshold_us + cfg.button_hysteresis_us
    release_at = cfg.button_threshold_us - cfg.button_hysteresis_us

    assert mapper.emit([1500, 1500, press_at]).buttons[0] is False
    assert mapper.emit([1500, 1500, press_at + 1]).buttons[0] is True
    assert mapper.emit([1500, 1500, cfg.button_threshold_us]).buttons[0] is True
    assert mapper.emit([1500, 1500, release_at + 1]).buttons[0] is True
    assert mapper.emit([1500, 1500, release_at]).buttons[0] is False


def test_deadzone_snaps_to_centre():
    cfg = Config(axis_deadzone_pct=10)
    mapper = ChannelMapper(cfg)
    dz = cfg.deadzone_us()
    assert mapper.emit([cfg.axis_center_us + dz]).axes[Axis.X] == cfg.axis_center_us
    assert mapper.emit([cfg.axis_center_us - dz]).axes[Axis.X] == cfg.axis_center_us
    beyond = cfg.axis_center_us + dz + 1
    assert mapper.emit([beyond]).axes[Axis.X] == beyond


def test_no_deadzone_by_default():
    mapper = ChannelMapper()
    assert mapper.emit([1501]).axes[Axis.X] == 1501


def test_returned_state_is_a_snapshot():
    mapper = ChannelMapper()
    first = mapper.emit([1200, 1200, 1900])
    mapper.emit([1800, 1800, 1100])
    assert first.axes[Axis.X] == 1200
    assert first.buttons[0] is True
    assert isinstance(first, JoystickState) and mapper.state.axes[Axis.X] == 1800


def test_reset_to_neutral():
    cfg = Config()
    mapper = ChannelMapper(cfg)
    mapper.emit([1900] * 8)
    state = mapper.reset_to_neutral()
    assert all(v == cfg.axis_center_us for v in state.axes.values())
    assert state.buttons == (False,) * cfg.num_buttons
    assert mapper.reports_sent == 2