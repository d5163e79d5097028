#!/usr/bin/env python3
"""Search Tree Demo Driver

Builds trees from random integers and reports their shape statistics.

Usage:
    python demo/tree_demo_driver.py --variant avl --count 100 --print --diagram /tmp/avl.svg
    python demo/tree_demo_driver.py --variant all --count 1000 --delete 200 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from search_trees import (
    AVLTree,
    BinaryTree,
    IdealTree,
    OptimalTree,
    UnbalancedTree,
)
from search_trees.render import draw_tree

VARIANTS = ("ideal", "unbalanced", "avl", "optimal")


def build_variant(name: str, values: list[int]) -> BinaryTree:
    """Build the named tree variant from values."""
    if name == "ideal":
        return IdealTree(sorted(set(values)))
    if name == "unbalanced":
        return UnbalancedTree(values)
    if name == "avl":
        return AVLTree(values)
    if name == "optimal":
        return OptimalTree.from_values(set(values))
    raise ValueError(f"Unknown tree variant: {name}")  # noqa: TRY003


def format_stats(name: str, tree: BinaryTree) -> str:
    """Return one report line for tree."""
    average = f"{tree.average_depth():.2f}" if not tree.is_empty() else "-"
    return (
        f"{name:<12}size={tree.size():<8}height={tree.height():<6}"
        f"avg_depth={average:<8}checksum={tree.checksum()}"
    )


def run_demo(args: argparse.Namespace) -> None:
    """Generate data, build the requested trees and print the results."""
    rng = random.Random(args.seed)
    values = [rng.randrange(args.low, args.high) for _ in range(args.count)]
    variants = VARIANTS if args.variant == "all" else (args.variant,)

    print(f"Values: {args.count} random integers in [{args.low}, {args.high})")

    for name in variants:
        tree = build_variant(name, values)

        if args.delete and name != "ideal":
            for value in rng.sample(values, min(args.delete, len(values))):
                tree.delete(value)

        print(format_stats(name, tree))

        if args.print:
            print(tree.pretty_print())
            print()

        if args.diagram and not tree.is_empty():
            path = args.diagram
            if len(variants) > 1:
                path = path.with_name(f"{path.stem}-{name}{path.suffix}")
            draw_tree(tree, path)
            print(f"Diagram: {path}")


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="Search tree demo driver")

    p.add_argument(
        "--variant",
        choices=VARIANTS + ("all",),
        default="avl",
        help="Tree variant to build, or all for a comparison",
    )
    p.add_argument("--count", type=int, default=100, help="Number of random values")
    p.add_argument("--low", type=int, default=100, help="Smallest value (inclusive)")
    p.add_argument("--high", type=int, default=500, help="Largest value (exclusive)")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument(
        "--delete", type=int, default=0, help="Random values to delete after building"
    )
    p.add_argument("--print", action="store_true", help="Print the sideways text display")
    p.add_argument("--diagram", type=Path, default=None, help="Write a diagram (svg, png, pdf)")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = p.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_demo(args)


if __name__ == "__main__":
    main()
