from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class FileRecord:
    """
    A candidate JPEG found in the source folder.
    """
    path: Path
    name: str           # basename, reused verbatim at the destination
    size: int


@dataclass
class Group:
    """
    Contents of one numbered destination folder, in copy order.
    """
    files: List[FileRecord] = field(default_factory=list)
    total_bytes: int = 0

    def append(self, record: FileRecord):
        self.files.append(record)
        self.total_bytes += record.size

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self):
        return iter(self.files)


# Index i is destination folder str(i + 1).
PlanResult = List[Group]
