"""autorun-tui: script editor empty state and integrations help for the terminal."""

__version__ = "0.1.0"
