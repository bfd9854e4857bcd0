"""mise-bootstrap — one-shot macOS developer-machine setup."""

__version__ = "0.1.0"
