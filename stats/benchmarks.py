#!/usr/bin/env python3
"""
Benchmarks for the binary search tree.

This script measures:
 1. Full tree build times for random and sorted insertion orders
 2. Shape statistics (height, leaves) of the resulting trees
 3. Per-insert and per-contains cost into trees of various sizes
 4. size() cost, which walks the whole tree on every call

Usage (from the repository root):
    python -m stats.benchmarks [--sizes 100 1000 10000] [--trials T] [--sorted-max N]
"""
import argparse
import gc
import random
import time
from statistics import mean, variance

import numpy as np
from tqdm import tqdm

from ordered_trees.binary_search_tree import BinarySearchTree, tree_stats_
from ordered_trees.profiling import PerformanceTracker, track_performance
from tests.stats_binary_search_tree import (
    KEY_SPACE,
    create_tree,
    random_tree_of_size,
    random_values,
)


def bench_build(sizes: list[int], sorted_max: int) -> None:
    """Measure tree builds from random and from sorted input."""
    for n in sizes:
        values = random_values(n)
        t0 = time.perf_counter()
        tree = create_tree(values)
        elapsed = time.perf_counter() - t0
        stats = tree_stats_(tree)
        print(f"[bench] random build({n}): {elapsed:.4f}s  "
              f"height={stats.height} leaves={stats.leaf_count}")

        if n > sorted_max:
            print(f"[bench] sorted build({n}): skipped (> --sorted-max {sorted_max})")
            continue
        t0 = time.perf_counter()
        tree = create_tree(range(n))
        elapsed = time.perf_counter() - t0
        print(f"[bench] sorted build({n}): {elapsed:.4f}s  height={tree.height()}")


def measure_single_ops(n: int, trials: int) -> tuple[float, float, float, float]:
    """
    Measure per-insert and per-contains cost into a tree of exactly `n` values,
    averaged over `trials` independent trees.
    Returns (insert_avg, insert_var, contains_avg, contains_var).
    """
    trees = [random_tree_of_size(n) for _ in range(trials)]
    probes = [int(v) for v in np.random.randint(0, KEY_SPACE, size=trials)]

    gc.collect()
    gc.disable()
    try:
        contains_times = []
        for tree, probe in zip(trees, probes):
            t0 = time.perf_counter()
            tree.contains(probe)
            contains_times.append(time.perf_counter() - t0)

        insert_times = []
        for tree, probe in zip(trees, probes):
            t0 = time.perf_counter()
            tree.insert(probe)
            insert_times.append(time.perf_counter() - t0)
    finally:
        gc.enable()

    return (mean(insert_times), variance(insert_times),
            mean(contains_times), variance(contains_times))


def bench_single_ops(sizes: list[int], trials: int) -> None:
    for n in tqdm(sizes, desc="single ops", unit="size"):
        ins_avg, ins_var, con_avg, con_var = measure_single_ops(n, trials)
        print(
            f"[bench] Insert into size {n:<7} → avg {ins_avg*1e6:8.2f} µs   σ²={ins_var*1e12:8.2f} µs²"
        )
        print(
            f"[bench] Contains on size {n:<7} → avg {con_avg*1e6:8.2f} µs   σ²={con_var*1e12:8.2f} µs²"
        )


def bench_tracked_ops(n: int) -> None:
    """Route tree operations through the performance tracker."""
    tracker = PerformanceTracker.get_instance()
    tracker.reset()
    tree = BinarySearchTree()
    insert = track_performance(tag="BinarySearchTree.insert")(tree.insert)
    contains = track_performance(tag="BinarySearchTree.contains")(tree.contains)
    size = track_performance(tag="BinarySearchTree.size")(tree.size)

    values = random_values(n)
    for value in values:
        insert(value)
    for value in random.sample(values, k=min(n, 1000)):
        contains(value)
    for _ in range(10):
        size()
    print(tracker.report())


def main():
    parser = argparse.ArgumentParser(description="BinarySearchTree benchmarks")
    parser.add_argument("--sizes", nargs='+', type=int, default=[100, 1000, 10_000],
                        help="Tree sizes for build and single-op benchmarks")
    parser.add_argument("--trials", type=int, default=100,
                        help="Number of trials for single-op benchmarks")
    parser.add_argument("--sorted-max", type=int, default=10_000,
                        help="Largest size built from sorted input (O(n^2) build)")
    args = parser.parse_args()

    print("\n=== Tree Build ===")
    bench_build(args.sizes, args.sorted_max)

    print("\n=== Single-Op Benchmarks ===")
    bench_single_ops(args.sizes, args.trials)

    print("\n=== Operation-Level Performance Breakdown ===")
    bench_tracked_ops(max(args.sizes))


if __name__ == "__main__":
    main()
