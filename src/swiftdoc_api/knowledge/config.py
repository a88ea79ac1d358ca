"""Documentation resource paths.

All paths are resolved relative to this package's resources/ directory.
"""

from pathlib import Path

# Base path for bundled documentation resources
_RESOURCES_DIR = Path(__file__).parent / "resources"

# Sample corpus used when no corpus path is configured
DEFAULT_CORPUS_PATH = _RESOURCES_DIR / "swiftdoc.json"
