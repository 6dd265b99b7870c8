"""Channel-count stability lock for decoded PPM frames."""

from __future__ import annotations

import logging

from .config import Config

_log = logging.getLogger(__name__)

DEFAULT_LOCK_FRAMES = Config().channel_lock_frames


class ChannelLock:
    """Accepts frames only once their channel count has been stable.

    A count is locked after ``lock_frames`` consecutive frames carry it.
    Until then every frame is discarded; afterwards frames with a
    different count are discarded.
    """

    def __init__(self, lock_frames: int = DEFAULT_LOCK_FRAMES) -> None:
        self.lock_frames = lock_frames
        self.expected_count = 0
        self.candidate_count = 0
        self.stable_frames = 0

    @property
    def locked(self) -> bool:
        """Whether a channel count has been locked in."""
        return self.expected_count != 0

    def accept(self, frame_ch_count: int) -> bool:
        """Return True if a frame with this channel count should be processed."""
        if not self.locked:
            if frame_ch_count == self.candidate_count:
                self.stable_frames += 1
                if self.stable_frames >= self.lock_frames:
                    self.expected_count = frame_ch_count
                    _log.debug("Channel count locked: %d", frame_ch_count)
            else:
                self.candidate_count = frame_ch_count
                self.stable_frames = 1
            return False

        if frame_ch_count != self.expected_count:
            _log.debug(
                "channel count %d != expected %d, frame skipped",
                frame_ch_count,
                self.expected_count,
            )
            return False
        return True

    def reset(self) -> None:
        """Forget any locked or candidate count."""
        self.expected_count = 0
        self.candidate_count = 0
        self.stable_frames = 0