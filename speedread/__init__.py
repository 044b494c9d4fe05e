"""SpeedRead: RSVP tokenization, timing and playback with a content store API."""

__version__ = "0.1.0"
