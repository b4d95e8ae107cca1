"""System statistics sampled with psutil and rendered as status-bar event payloads."""

__version__ = "0.6.4"