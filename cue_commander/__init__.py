"""cue-commander: parse and inspect CD cue sheets."""

__version__ = "0.1.0"
