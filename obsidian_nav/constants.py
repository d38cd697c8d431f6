"""Module-level constants for the Obsidian navigation plugin."""

from pathlib import Path

# Configuration
DEFAULT_NOTES_DIR = Path("./")
NOTE_EXTENSION = ".md"

# Messages
MSG_TAG = "[obsidian]"

# Commands
OPEN_COMMAND = "ObsidianOpen"

# Logging
LOG_LEVEL = "INFO"
