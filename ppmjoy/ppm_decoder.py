"""Decoding of PPM pulse trains from edge timestamps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .config import Config

MAX_CHANNELS = 10

_U32 = 1 << 32


class PPMDecoder:
    """Turns edge timestamps of one polarity into frames of channel values.

    The interval between two consecutive edges is the full width of the
    previous channel. A gap within the sync window ends a frame; a gap
    longer than that, or a pulse outside the channel window, loses sync.
    Timestamps are 32-bit microsecond counters and may wrap around.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        self.reset()

    def reset(self) -> None:
        """Return to the power-on state: no sync, no pending channels."""
        self._last_edge_us = 0
        self._synced = False
        self._channels: list[int] = []

    @property
    def synced(self) -> bool:
        """Whether a sync gap has been seen since sync was last lost."""
        return self._synced

    def edge(self, now_us: int) -> tuple[int, ...] | None:
        """Record one edge; return a completed frame when a sync gap closes one."""
        cfg = self.config
        interval = (now_us - self._last_edge_us) % _U32
        self._last_edge_us = now_us % _U32

        if cfg.sync_min_us <= interval <= cfg.sync_max_us:
            frame = None
            if self._synced and len(self._channels) >= 2:
                frame = tuple(self._channels)
            self._channels = []
            self._synced = True
            return frame

        if interval > cfg.sync_max_us:
            self._lose_sync()
        elif self._synced and cfg.channel_min_us <= interval <= cfg.channel_max_us:
            if len(self._channels) < MAX_CHANNELS:
                self._channels.append(
                    min(max(interval, cfg.axis_min_us), cfg.axis_max_us)
                )
        else:
            self._lose_sync()
        return None

    def feed(self, timestamps: Iterable[int]) -> Iterator[tuple[int, ...]]:
        """Process edges in order, yielding each completed frame."""
        for now_us in timestamps:
            frame = self.edge(now_us)
            if frame is not None:
                yield frame

    def _lose_sync(self) -> None:
        self._synced = False
        self._channels = []