"""Local control plane for the Claude Code Router configuration file."""

__version__ = "1.0.0"
