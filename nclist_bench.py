#!/usr/bin/env python3
"""
NClist benchmark - builds a heavily nested synthetic range set and times a
sweep of fixed-width overlap queries.

This is the main entry point for benchmarking.
"""

import sys
import time
import random
import argparse
from pathlib import Path

from nclist import NClist, is_overlapping, set_debug
from nclist.config import Config, BenchConfig
from nclist.debug import debug_print
from nclist.timezone_utils import set_timezone


def _debug_print(msg: str) -> None:
    debug_print("BENCH", msg)


def make_contained_ranges(size: int, contained_fraction: float, range_width: int,
                          span: int, seed: int = 42) -> list[range]:
    """
    Generate ``size`` ranges inside ``[0, span)``.

    With probability ``contained_fraction`` a new range is placed inside a
    randomly chosen earlier range, otherwise it is a ``range_width`` wide
    range at a random position.
    """
    rng = random.Random(seed)
    ranges: list[range] = []
    while len(ranges) < size:
        if ranges and rng.random() < contained_fraction:
            parent = rng.choice(ranges)
            if parent.stop - parent.start >= 2:
                start = rng.randrange(parent.start, parent.stop - 1)
                end = rng.randrange(start + 1, parent.stop + 1)
                ranges.append(range(start, end))
                continue
        start = rng.randrange(0, span - range_width + 1)
        ranges.append(range(start, start + range_width))
    return ranges


def make_queries(span: int, query_width: int, query_step: int) -> list[range]:
    """Fixed-width queries sweeping ``[0, span)``."""
    return [range(s, s + query_width) for s in range(0, span, query_step)]


def brute_force_count(ranges: list[range], query: range) -> int:
    return sum(1 for r in ranges if is_overlapping(r.start, r.stop, query.start, query.stop))


def run_bench(bench: BenchConfig, check: bool = False) -> bool:
    """Run the benchmark and print timings. Returns False if a check failed."""
    ranges = make_contained_ranges(
        bench.size, bench.contained_fraction, bench.range_width, bench.span, bench.seed
    )
    queries = make_queries(bench.span, bench.query_width, bench.query_step)
    _debug_print(f"Generated {len(ranges)} ranges and {len(queries)} queries")

    t0 = time.perf_counter()
    nclist = NClist(ranges)
    build_seconds = time.perf_counter() - t0
    print(f"Built {nclist} in {build_seconds * 1000:.1f} ms")

    for attempt in range(bench.repeat):
        t0 = time.perf_counter()
        total = 0
        for query in queries:
            total += nclist.count_overlaps(query)
        count_seconds = time.perf_counter() - t0

        t0 = time.perf_counter()
        iterated = 0
        for query in queries:
            iterated += sum(1 for _ in nclist.overlaps(query))
        iter_seconds = time.perf_counter() - t0

        print(f"Run {attempt + 1}: {len(queries)} queries, {total} overlaps, "
              f"count_overlaps {count_seconds * 1000:.1f} ms, overlaps {iter_seconds * 1000:.1f} ms")
        if iterated != total:
            print(f"Error: overlaps() returned {iterated} items, count_overlaps() {total}")
            return False

    if check:
        for query in queries:
            expected = brute_force_count(ranges, query)
            found = nclist.count_overlaps(query)
            if found != expected:
                print(f"Error: query {query.start}..{query.stop} found {found}, expected {expected}")
                return False
        print(f"Check passed for {len(queries)} queries")

    return True


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="NClist benchmark - time overlap queries on nested ranges"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare every query result against a linear scan"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.debug:
        set_debug(True)

    try:
        config = Config.load(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error loading configuration: {e}")
        return 1

    if config.debug:
        set_debug(True)
    set_timezone(config.timezone)

    return 0 if run_bench(config.bench, check=args.check) else 1


if __name__ == "__main__":
    sys.exit(main())
