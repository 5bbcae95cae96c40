import shutil
import logging
from pathlib import Path
from tqdm import tqdm

from ..exceptions import CopyCollisionError, CopyError
from ..models import PlanResult


def group_folder(dest_root: Path, index: int) -> Path:
    """Folder for the group at 0-based index: dest_root/1, dest_root/2, ..."""
    return dest_root / str(index + 1)


class GroupCopier:
    def __init__(self, dest_root: Path):
        self.dest_root = dest_root

    def execute(self, groups: PlanResult, dry_run: bool = False):
        """
        Copies every group into its numbered folder under dest_root.

        Stops at the first failure. Files copied before that stay where they are.
        """
        total = sum(len(g) for g in groups)
        logging.info(f"Copying {total} files into {len(groups)} folders (DryRun={dry_run})...")

        with tqdm(total=total, desc="Copying", unit="file", disable=dry_run) as progress:
            for idx, group in enumerate(groups):
                folder = group_folder(self.dest_root, idx)

                if dry_run:
                    logging.info(f"[DRY RUN] {folder}: {len(group)} files, {group.total_bytes} bytes")
                    continue

                try:
                    folder.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise CopyError(f"cannot create folder {folder}: {e}") from e

                for record in group:
                    dest = folder / record.name
                    if dest.exists():
                        raise CopyCollisionError(f"unexpected destination file already exists: {dest}")
                    try:
                        shutil.copy2(str(record.path), str(dest))
                    except OSError as e:
                        raise CopyError(f"failed to copy {record.path} -> {dest}: {e}") from e
                    progress.update(1)

                logging.debug(f"Filled {folder} with {len(group)} files ({group.total_bytes} bytes)")
