import pytest
from image_rando.config import RunConfig
from image_rando.core import ImageRandoApp
from image_rando.exceptions import DestinationDirError, NoCandidatesError, OversizedFileError
from image_rando.scanning.filesystem import DiskScanner
from image_rando.shuffling.shuffle import shuffle_in_place
from image_rando.planning.planner import plan_groups


def folder_contents(dst):
    return {
        folder.name: sorted(p.name for p in folder.iterdir())
        for folder in sorted(dst.iterdir())
    }


def test_run_copies_all_candidates(photo_dir, tmp_path):
    dst = tmp_path / "display"
    cfg = RunConfig(src=photo_dir, dst=dst, max_files=2, max_bytes=1000, seed=5)

    summary = ImageRandoApp(cfg).run()

    assert summary.total_files == 5
    assert summary.group_count == 3
    assert summary.total_bytes == 150
    assert summary.seed == 5
    copied = sorted(p.name for p in dst.glob("*/*"))
    assert copied == [f"photo{i}.jpg" for i in range(1, 6)]
    assert "inner.jpg" not in copied


def test_run_matches_shuffle_then_plan(photo_dir, tmp_path):
    dst = tmp_path / "display"
    ImageRandoApp(RunConfig(src=photo_dir, dst=dst, max_files=2, max_bytes=1000, seed=77)).run()

    records = DiskScanner().scan(photo_dir)
    shuffle_in_place(records, 77)
    expected = {
        str(i + 1): sorted(r.name for r in g)
        for i, g in enumerate(plan_groups(records, 2, 1000))
    }
    assert folder_contents(dst) == expected


def test_same_seed_reproduces_layout(photo_dir, tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    ImageRandoApp(RunConfig(src=photo_dir, dst=a, max_files=2, max_bytes=1000, seed=31337)).run()
    ImageRandoApp(RunConfig(src=photo_dir, dst=b, max_files=2, max_bytes=1000, seed=31337)).run()
    assert folder_contents(a) == folder_contents(b)


def test_run_without_candidates_never_plans(tmp_path, monkeypatch):
    src = tmp_path / "src"
    src.mkdir()
    (src / "clip.mov").write_bytes(b"x")

    def fail(*args, **kwargs):
        raise AssertionError("planner should not run")
    monkeypatch.setattr("image_rando.core.plan_groups", fail)

    with pytest.raises(NoCandidatesError):
        ImageRandoApp(RunConfig(src=src, dst=tmp_path / "display", seed=1)).run()


def test_run_oversized_file_copies_nothing(photo_dir, tmp_path):
    dst = tmp_path / "display"
    with pytest.raises(OversizedFileError):
        ImageRandoApp(RunConfig(src=photo_dir, dst=dst, max_bytes=45, seed=1)).run()
    assert list(dst.iterdir()) == []


def test_run_refuses_non_empty_destination(photo_dir, tmp_path):
    dst = tmp_path / "display"
    dst.mkdir()
    (dst / "1").mkdir()
    with pytest.raises(DestinationDirError):
        ImageRandoApp(RunConfig(src=photo_dir, dst=dst, seed=1)).run()


def test_dry_run_reports_without_copying(photo_dir, tmp_path):
    dst = tmp_path / "display"
    summary = ImageRandoApp(
        RunConfig(src=photo_dir, dst=dst, max_files=1, max_bytes=1000, seed=3, dry_run=True)
    ).run()

    assert summary.dry_run
    assert summary.group_count == 5
    assert not dst.exists()
