"""bwenv — keep notes in the rbw (Bitwarden) vault from Python."""

__version__ = "0.1.0"
