"""UI components for the TUI application."""
