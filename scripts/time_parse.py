#!/usr/bin/env python3
"""Quick perf benchmark for document parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
import logging
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from bulbapy.diagnostics import BulbaError
from bulbapy.parser import parse, read_source

DEFAULT_ROOT = Path(__file__).resolve().parent.parent / "tests" / "test_data"


def _collect_files(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.bson"))
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_keys = 0
    total_failures = 0
    iterator = (
        tqdm(sources, desc=label, unit="file")
        if show_progress
        else sources
    )
    for source in iterator:
        try:
            document = parse(source)
        except BulbaError:
            total_failures += 1
            continue
        total_keys += len(document)
    duration = time.perf_counter() - start
    return duration, total_keys, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark .bson parsing throughput")
    parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_ROOT,
        help="Directory searched recursively for .bson files (default: tests/test_data)",
    )
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--repeat", type=int, default=100, help="Parse each file this many times per run")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid --root: {root}")

    files = _collect_files(root)
    if not files:
        raise SystemExit(f"No .bson files found under {root}")
    sources = [read_source(path) for path in files] * max(args.repeat, 1)

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                sources,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        keys_count = 0
        failures_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, keys_count, failures_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, keys_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, keys_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, keys_count, failures_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)} x {max(args.repeat, 1)}")
    print(f"Top-level keys: {keys_count}")
    print(f"Failed documents: {failures_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Docs/s (mean): {len(sources) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
