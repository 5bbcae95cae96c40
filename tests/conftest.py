import os
import pytest
from pathlib import Path
from image_rando.models import FileRecord


@pytest.fixture
def make_records():
    """Returns a factory building FileRecords f1, f2, ... with the given sizes."""
    def factory(sizes):
        return [
            FileRecord(path=Path(f"/src/f{i}.jpg"), name=f"f{i}.jpg", size=size)
            for i, size in enumerate(sizes, start=1)
        ]
    return factory


@pytest.fixture
def photo_dir(tmp_path):
    """A source folder with five JPEGs of distinct sizes and some non-candidates."""
    src = tmp_path / "src"
    src.mkdir()
    for i, size in enumerate([10, 20, 30, 40, 50], start=1):
        (src / f"photo{i}.jpg").write_bytes(bytes([i]) * size)
    (src / "notes.txt").write_text("not a photo")
    (src / "nested").mkdir()
    (src / "nested" / "inner.jpg").write_bytes(b"x" * 5)
    return src


@pytest.fixture
def non_utf8_jpeg(photo_dir):
    """Adds bad\\xff.jpg to photo_dir; skipped where the filesystem refuses such names."""
    try:
        path = photo_dir / os.fsdecode(b"bad\xff.jpg")
        path.write_bytes(b"jpeg")
    except (OSError, UnicodeError):
        pytest.skip("filesystem does not allow non-UTF-8 names")
    return path
