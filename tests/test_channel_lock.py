from ppmjoy.channel_lock import ChannelLock


def _lock_in(lock, count, frames):
    return [lock.accept(count) for _ in range(frames)]


def test_frames_discarded_until_locked():
    lock = ChannelLock(5)
    assert _lock_in(lock, 8, 5) == [False] * 5
    assert lock.locked
    assert lock.expected_count == 8
    assert lock.accept(8) is True


def test_default_lock_length_is_five_frames():
    lock = ChannelLock()
    _lock_in(lock, 8, 4)
    assert not lock.locked
    lock.accept(8)
    assert lock.locked


def test_mismatched_count_rejected_after_lock():
    lock = ChannelLock(5)
    _lock_in(lock, 8, 5)
    assert lock.accept(6) is False
    assert lock.expected_count == 8
    assert lock.accept(8) is True


def test_changing_count_restarts_candidate():
    lock = ChannelLock(5)
    _lock_in(lock, 8, 4)
    assert lock.accept(6) is False
    assert lock.candidate_count == 6
    assert lock.stable_frames == 1
    _lock_in(lock, 6, 3)
    assert not lock.locked
    lock.accept(6)
    assert lock.expected_count == 6


def test_reset_clears_state():
    lock = ChannelLock(5)
    _lock_in(lock, 8, 5)
    lock.reset()
    assert not lock.locked
    assert (lock.expected_count, lock.candidate_count, lock.stable_frames) == (0, 0, 0)
    assert lock.accept(8) is False