"""scantriage - interactive terminal browser for vulnerability scan matches."""

__version__ = "0.1.0"
