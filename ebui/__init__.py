"""Frame-redrawn user interface widgets: geometry, events and input state, row and grid
layouts, text, labels, text input, scroll containers, tool tips, radio groups and windows."""

__version__ = "0.1.0"