"""Terminal todo tracker with a fixed spaced-review escalation schedule."""

__version__ = "0.1.0"
