import logging
from typing import Iterable

from ..exceptions import ConfigError, OversizedFileError
from ..models import FileRecord, Group, PlanResult


def plan_groups(files: Iterable[FileRecord], max_files: int, max_bytes: int) -> PlanResult:
    """
    Greedily splits the (already shuffled) files into destination groups.

    Single forward pass with a running "current" group:
    1. A file larger than max_bytes can never be placed -> OversizedFileError.
    2. If the current group is non-empty and taking the file would push it past
       max_files or max_bytes, the current group is sealed and a new one started.
    3. The file is appended.

    Limits are checked before appending and are inclusive, so a file that exactly
    fills the remaining space stays in the current group. Input order is kept.
    """
    if max_files <= 0:
        raise ConfigError(f"max-files must be > 0 (got {max_files})")
    if max_bytes <= 0:
        raise ConfigError(f"max-bytes must be > 0 (got {max_bytes})")

    groups: PlanResult = []
    current = Group()

    for record in files:
        if record.size > max_bytes:
            raise OversizedFileError(record.path, record.size, max_bytes)

        if len(current) > 0:
            would_exceed_files = len(current) + 1 > max_files
            would_exceed_bytes = current.total_bytes + record.size > max_bytes
            if would_exceed_files or would_exceed_bytes:
                groups.append(current)
                current = Group()

        current.append(record)

    if len(current) > 0:
        groups.append(current)

    logging.debug(f"Planned {len(groups)} groups (max_files={max_files}, max_bytes={max_bytes})")
    return groups
