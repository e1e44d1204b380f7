"""Inspect template markers, tags and classes to aid renderer work."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from bs4 import BeautifulSoup

from bootstencil.templates import iter_markers, load_template


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect template markers, tags and classes.")
    parser.add_argument("--name", help="Packaged template name (e.g. bootstrap4/navbar.html)")
    parser.add_argument("--file", help="Local HTML file path")
    parser.add_argument("--markers-only", action="store_true", help="Show only markers")
    args = parser.parse_args()

    if not args.name and not args.file:
        parser.error("Provide --name or --file")

    root = load_root(name=args.name, file_path=args.file)
    tags, classes, markers = collect_stats(root)

    print("Markers:")
    for name, count in markers.most_common():
        flag = "" if count == 1 else "  (not unique: strict lookup fails)"
        print(f"{name}: {count}{flag}")
    if args.markers_only:
        return

    print("\nTags:")
    for name, count in tags.most_common():
        print(f"{name}: {count}")

    print("\nClasses:")
    for name, count in classes.most_common():
        print(f"{name}: {count}")


def load_root(*, name: str | None, file_path: str | None):
    if name:
        return load_template(name)

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def collect_stats(root) -> tuple[Counter, Counter, Counter]:
    tags = Counter()
    classes = Counter()
    markers = Counter()

    for tag in [root, *root.find_all(True)]:
        if tag.name == "[document]":
            continue
        tags[tag.name] += 1
        for cls in tag.get("class", []):
            classes[cls] += 1
        for marker in iter_markers(tag):
            markers[marker] += 1
    return tags, classes, markers


if __name__ == "__main__":
    main()
