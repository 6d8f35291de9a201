"""Print the next/previous walk through a JSON content snapshot."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from coursenav import Direction, InMemoryCatalog, Level, ResolveOptions, resolve_navigation


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk a content snapshot with next/previous links.")
    parser.add_argument("snapshot", help='JSON file mapping level names to document lists, e.g. {"exam": [...]}')
    parser.add_argument("--backward", action="store_true", help="Walk from the last page using previous links")
    parser.add_argument("--limit", type=int, default=10_000, help="Maximum number of steps")
    parser.add_argument(
        "--no-anchor-descent",
        action="store_true",
        help="Do not descend into the current exam/subject/unit/chapter before moving on",
    )
    args = parser.parse_args()

    catalog = load_catalog(Path(args.snapshot))
    direction = Direction.BACKWARD if args.backward else Direction.FORWARD
    options = ResolveOptions(query_timeout=None, descend_into_anchor=not args.no_anchor_descent)
    asyncio.run(walk(catalog, direction, options, limit=args.limit))


def load_catalog(path: Path) -> InMemoryCatalog:
    if not path.is_file():
        raise FileNotFoundError(f"Snapshot not found: {path}")
    return InMemoryCatalog.from_documents(json.loads(path.read_text(encoding="utf-8")))


async def walk(catalog: InMemoryCatalog, direction: Direction, options: ResolveOptions, *, limit: int) -> None:
    roots = await catalog.get_roots()
    if not roots:
        print("Snapshot has no active exams.")
        return

    start = roots[0] if direction is Direction.FORWARD else roots[-1]
    level, chain = Level.EXAM, [start.id]
    if direction is Direction.BACKWARD:
        level, chain = await _deepest_last(catalog, start)
    print(f"start  {level.value:<8} {chain[-1]}")

    for step in range(1, limit + 1):
        target = await resolve_navigation(catalog, direction, level, chain, options=options)
        if target is None:
            print(f"end after {step - 1} steps")
            return
        print(f"{step:>5}  {target.type.value:<8} {target.path}  ({target.label})")
        level, chain = target.type, target.chain
    print(f"stopped after {limit} steps")


async def _deepest_last(catalog: InMemoryCatalog, start) -> tuple[Level, list[str]]:
    node, chain = start, [start.id]
    while node.level.child is not None:
        children = await catalog.get_children(node.level.child, node.id)
        if not children:
            break
        node = children[-1]
        chain.append(node.id)
    return node.level, chain


if __name__ == "__main__":
    main()
