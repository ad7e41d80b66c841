"""Path management for screenplay-kit.

Manages the ~/.screenplay/ directory used by the CLI.
"""

from pathlib import Path

# Base directory for all screenplay-kit data
SCREENPLAY_DIR = Path.home() / ".screenplay"

# Persistent configuration
CONFIG_FILE = SCREENPLAY_DIR / "config.yaml"
