from dataclasses import dataclass
from pathlib import Path

from .models import PlanResult


@dataclass(frozen=True)
class RunSummary:
    total_files: int
    group_count: int
    total_bytes: int
    dest_root: Path
    seed: int
    dry_run: bool = False


def summarize(groups: PlanResult, dest_root: Path, seed: int, dry_run: bool = False) -> RunSummary:
    return RunSummary(
        total_files=sum(len(g) for g in groups),
        group_count=len(groups),
        total_bytes=sum(g.total_bytes for g in groups),
        dest_root=dest_root,
        seed=seed,
        dry_run=dry_run,
    )


def format_summary(summary: RunSummary) -> str:
    verb = "Would copy" if summary.dry_run else "Copied"
    return (
        f"{verb} {summary.total_files} photos into {summary.group_count} folders under {summary.dest_root}\n"
        f"Total bytes {'planned' if summary.dry_run else 'copied'}: {summary.total_bytes}\n"
        f"Seed: {summary.seed}"
    )


def print_summary(summary: RunSummary):
    print(format_summary(summary))
