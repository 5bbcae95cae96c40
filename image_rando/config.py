"""
Configuration constants and the run configuration for image-rando.
"""
from dataclasses import dataclass
from pathlib import Path

# --- Default Locations ---
DEFAULT_SRC = Path("/home/jef/Pictures/theframe")
DEFAULT_DST = Path("/home/jef/Pictures/display")

# --- Display Device Limits ---
# Per-folder ceilings of the slideshow frame. Defaults only, never planner invariants.
DEFAULT_MAX_FILES = 1200
DEFAULT_MAX_BYTES = 4 * 1024 * 1024 * 1024  # 4 GiB

# --- File Type Definitions ---
JPEG_EXTS = {'.jpg', '.jpeg'}

# --- Random Number Generation ---
U64_MASK = (1 << 64) - 1
# XOR-shift state never leaves zero, so a zero seed is swapped for this.
ZERO_SEED_REPLACEMENT = 0xA5A5_A5A5_5A5A_5A5A
# Golden-ratio multiplier used to spread the pid across the seed word.
PID_SEED_MULTIPLIER = 0x9E37_79B9_7F4A_7C15

# --- Size Parsing ---
SIZE_UNITS = {
    'B': 1,
    'KB': 1024, 'KIB': 1024,
    'MB': 1024 ** 2, 'MIB': 1024 ** 2,
    'GB': 1024 ** 3, 'GIB': 1024 ** 3,
    'TB': 1024 ** 4, 'TIB': 1024 ** 4,
}


@dataclass(frozen=True)
class RunConfig:
    """
    Everything a single run needs. Built by the CLI, consumed by ImageRandoApp.
    """
    src: Path = DEFAULT_SRC
    dst: Path = DEFAULT_DST
    max_files: int = DEFAULT_MAX_FILES
    max_bytes: int = DEFAULT_MAX_BYTES
    seed: int = 0
    dry_run: bool = False
