# ppmjoy

Turns the pulse train from an RC receiver's PPM output into joystick
state: four axes (X, Y, Rx, Ry) and five buttons. The channel layout
suits an 8-channel transmitter such as the Absima CR10P.

The package has three parts. Each one can be used by itself:

- `ppmjoy.ppm_decoder.PPMDecoder` takes edge timestamps in microseconds
  and returns complete channel frames.
- `ppmjoy.channel_lock.ChannelLock` drops frames until the channel count
  has stayed the same for a set number of frames in a row. After that it
  keeps only frames with that count.
- `ppmjoy.channel_map.ChannelMapper` maps a frame onto a `JoystickState`.
  It applies the axis deadzone and button hysteresis.

`ppmjoy.config.Config` is a frozen dataclass that holds the timing and
threshold settings. The defaults are:

- sync gap: 3000–50000 µs
- valid channel pulse: 500–2100 µs
- axis range: 1100–1900 µs, centre 1500 µs
- axis deadzone: 0 % (off)
- button threshold: 1500 µs, hysteresis 21 µs
- frames needed for the channel lock: 5

`Config` raises `ValueError` for inconsistent settings. Examples: an axis
minimum that is not below the maximum, a centre outside the axis range,
or a deadzone percentage outside 0–100. `Config.deadzone_us()` gives the
half-width of the central deadzone in microseconds.

## Installation

From a checkout of the project:

```
pip install .
```

## Usage

```python
from ppmjoy.config import Config
from ppmjoy.ppm_decoder import PPMDecoder
from ppmjoy.channel_lock import ChannelLock
from ppmjoy.channel_map import ChannelMapper

config = Config()
decoder = PPMDecoder(config)
lock = ChannelLock(config.channel_lock_frames)
mapper = ChannelMapper(config)

for frame in decoder.feed(edge_timestamps_us):
    if lock.accept(len(frame)):
        state = mapper.emit(frame)
        print(state.axes, state.buttons)
```

### Feeding edges

Each timestamp is one edge of the signal, and all edges have the same
polarity. The time between two edges is the value of one channel.
Timestamps are treated as 32-bit microsecond counters, so the decoder
handles a counter that wraps around.

- A gap in the sync range ends the current frame. The frame is returned
  as a tuple if sync was held and it has at least two channels.
- A gap longer than the sync range drops sync.
- A pulse outside the valid channel range also drops sync.
- Channel values are clamped to the axis range.
- At most 10 channels are kept per frame. Any more are ignored.

`PPMDecoder.edge(now_us)` takes one edge at a time. It returns a frame
when that edge completes one, and `None` otherwise. `PPMDecoder.feed()`
is a generator over an iterable of timestamps. `PPMDecoder.synced` tells
whether the decoder currently holds sync. `PPMDecoder.reset()` returns
the decoder to its starting state.

### Channel lock

`ChannelLock.accept(count)` returns `False` until it has seen the same
count `lock_frames` times in a row. When that happens, the count is
locked in and `ChannelLock.locked` becomes true. After that it returns
`True` only for frames with the locked count. `ChannelLock.reset()`
forgets the count. Locking and skipped frames are logged at debug level
on the `ppmjoy.channel_lock` logger.

### Channel mapping

| Channel | Output                                                       |
|---------|--------------------------------------------------------------|
| 1       | X axis                                                       |
| 2       | Y axis                                                       |
| 3       | button 0                                                     |
| 4       | button 1                                                     |
| 5       | Rx axis                                                      |
| 6       | Ry axis                                                      |
| 7       | 3-position switch: button 2 (1300 µs) and button 3 (1700 µs) |
| 8       | button 4                                                     |

A frame with fewer channels updates only the outputs it covers. A button
counts as pressed when its channel is above the threshold. A pressed
button stays pressed until the value falls to `hysteresis` below the
threshold. A released button is pressed again only when the value rises
more than `hysteresis` above it.

`ChannelMapper.emit(frame)` and `ChannelMapper.reset_to_neutral()` both
return the resulting `JoystickState`. `reset_to_neutral()` centres every
axis and releases every button. `ChannelMapper.state` holds the current
state, and `ChannelMapper.reports_sent` counts the states returned so far.

## What it does not do

ppmjoy does not read a signal from a pin and does not present itself to
the system as a joystick device. Your code has to supply the edge
timestamps and do something with the returned `JoystickState`.
`signal_loss_ms` is stored in `Config` but not acted on. Your code must
detect signal loss and call `reset_to_neutral()` itself. The
`ppm_input_pin`, `ppm_inverted`, `serial_debug` and `serial_baud` fields
are also stored only, and no part of the package reads them.

## Running the tests

```
pip install -e ".[test]"
pytest
```