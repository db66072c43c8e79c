"""Game engine utilities: timers, console timestamps, named colours and audio (ALC/EFX) parameter tables."""

__version__ = "0.1.0"