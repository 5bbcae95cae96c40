import os
import logging
from pathlib import Path
from typing import List

from .. import config
from ..exceptions import DestinationDirError, FileAccessError, NoCandidatesError, SourceDirError
from ..models import FileRecord


def is_jpeg(path: Path) -> bool:
    return path.suffix.lower() in config.JPEG_EXTS


class DiskScanner:
    def validate_source(self, src: Path):
        try:
            src.stat()
        except OSError as e:
            raise SourceDirError(f"cannot read source folder {src}: {e}") from e
        if not src.is_dir():
            raise SourceDirError(f"source is not a directory: {src}")

    def validate_destination(self, dst: Path, create: bool = True):
        """
        Ensures dst exists (created with parents unless create=False) and is empty.
        An empty destination is the only guard against mixing old and new output.
        """
        if create:
            try:
                dst.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DestinationDirError(f"cannot create destination folder {dst}: {e}") from e
        elif not dst.exists():
            return

        try:
            with os.scandir(dst) as it:
                has_entries = any(True for _ in it)
        except OSError as e:
            raise DestinationDirError(f"cannot read destination folder {dst}: {e}") from e

        if has_entries:
            raise DestinationDirError(
                f"destination folder is not empty: {dst}\n"
                "Refusing to run to avoid mixing old/new output."
            )

    def scan(self, root: Path) -> List[FileRecord]:
        """
        Returns a FileRecord for every JPEG directly inside root.

        Only regular files count (symlinks are not followed, subfolders are not
        entered). Results are sorted by name so a seed reproduces the same
        shuffle whatever order the OS lists entries in.
        """
        try:
            with os.scandir(root) as it:
                entries = list(it)
        except OSError as e:
            raise FileAccessError(f"cannot list source folder {root}: {e}") from e

        entries.sort(key=lambda e: e.name)

        records = []
        for e in entries:
            path = Path(e.path)
            try:
                if not e.is_file(follow_symlinks=False):
                    logging.debug(f"Skipping non-file entry: {path}")
                    continue
            except OSError as err:
                raise FileAccessError(f"cannot read file type for {path}: {err}") from err

            if not is_jpeg(path):
                logging.debug(f"Skipping non-JPEG file: {path}")
                continue

            records.append(self._make_record(e, path))

        logging.info(f"Found {len(records)} JPEG files in {root}")
        return records

    def collect_candidates(self, root: Path) -> List[FileRecord]:
        """scan() that treats an empty result as an error."""
        records = self.scan(root)
        if not records:
            raise NoCandidatesError(f"no .jpg files found in source folder: {root}")
        return records

    def _make_record(self, entry: os.DirEntry, path: Path) -> FileRecord:
        try:
            entry.name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FileAccessError(f"non-utf8 filename not supported: {path!r}") from e

        try:
            size = entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            raise FileAccessError(f"cannot stat file {path}: {e}") from e

        return FileRecord(path=path, name=entry.name, size=size)
