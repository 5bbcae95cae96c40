import logging

from .config import RunConfig
from .organization.copier import GroupCopier
from .planning.planner import plan_groups
from .reporting import RunSummary, summarize
from .scanning.filesystem import DiskScanner
from .shuffling.shuffle import shuffle_in_place


class ImageRandoApp:
    def __init__(self, config: RunConfig):
        self.config = config
        self.scanner = DiskScanner()

    def run(self) -> RunSummary:
        """
        Executes one redistribution run.
        1. Validate source and destination
        2. Collect JPEG candidates
        3. Shuffle (seeded)
        4. Plan groups
        5. Copy (skipped in dry-run)

        Any failure propagates as an ImageRandoError and ends the run.
        """
        cfg = self.config

        # --- Step 1: Validation ---
        self.scanner.validate_source(cfg.src)
        self.scanner.validate_destination(cfg.dst, create=not cfg.dry_run)

        # --- Step 2: Scanning ---
        logging.info(f"Scanning {cfg.src}...")
        files = self.scanner.collect_candidates(cfg.src)

        # --- Step 3: Shuffling ---
        logging.info(f"Shuffling {len(files)} files (seed={cfg.seed})")
        shuffle_in_place(files, cfg.seed)

        # --- Step 4: Planning ---
        groups = plan_groups(files, cfg.max_files, cfg.max_bytes)
        logging.info(f"Planned {len(groups)} folders (max {cfg.max_files} files / {cfg.max_bytes} bytes each)")

        # --- Step 5: Execution ---
        GroupCopier(cfg.dst).execute(groups, dry_run=cfg.dry_run)

        return summarize(groups, cfg.dst, cfg.seed, dry_run=cfg.dry_run)
