"""Decode PPM edge timestamps into frames and map them onto joystick state."""

__version__ = "0.1.0"
__all__ = ["config", "channel_lock", "ppm_decoder", "channel_map"]