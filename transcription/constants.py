"""Constants for the project."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration files
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "config"
STORAGE_YAML = CONFIG_FOLDER / "storage.yaml"

# ============================================================================
# Storage defaults
# ============================================================================
DEFAULT_FIXED_CAPACITY = 12
DEFAULT_RNA_STORAGE = "owned"
DEFAULT_TRANSCRIPTION_STORAGE = "lazy"
DEFAULT_OVERFLOW_POLICY = "reject"

# ============================================================================
# Encoding
# ============================================================================
# Every nucleotide is a single ASCII byte in bounded storage.
NUCLEOTIDE_ENCODING = "ascii"
WIPE_BYTE = 0
