#!/usr/bin/env python3
"""Demo script for continuation traversals in TreeTraversal.

Walks a document outline and shows how to resume reading order from any
section, how to step backwards, and how to process sections bottom-up
starting from the middle of the document.
"""

import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetraversal import Parented, MappingTree, traverse_tree, get_tree_stats


class Section(Parented):
    """A heading in a document outline."""

    def __init__(self, title: str, *subsections: 'Section'):
        self.title = title
        self._parent: Optional['Section'] = None
        self._subsections: List['Section'] = list(subsections)
        for subsection in subsections:
            subsection._parent = self

    @property
    def children(self) -> List['Section']:
        return self._subsections

    @property
    def parent(self) -> Optional['Section']:
        return self._parent


def build_outline() -> Section:
    return Section(
        "Guide",
        Section("Install", Section("pip"), Section("From source")),
        Section("Usage", Section("Engines"), Section("Continuations"), Section("Adapters")),
        Section("Reference"),
    )


def titles(sections) -> str:
    return ", ".join(section.title for section in sections)


def demo_reading_order(outline: Section):
    """Resume reading order from a bookmarked section."""
    print("\n=== Resume Reading ===")
    bookmark = outline.children[1].children[1]  # Usage > Continuations

    print(f"Full outline:   {titles(outline.traversal.pre_order())}")
    print(f"From bookmark:  {titles(bookmark.traversal.pre_order_continuation())}")
    print(f"Going back:     {titles(bookmark.traversal.reverse_order())}")


def demo_bottom_up(outline: Section):
    """Finish a bottom-up pass that was interrupted mid-document."""
    print("\n=== Bottom-Up Processing ===")
    interrupted_at = outline.children[0]  # Install

    print(f"Full pass:      {titles(outline.traversal.post_order())}")
    print(f"Resumed pass:   {titles(interrupted_at.traversal.post_order_continuation())}")


def demo_mapping():
    """Same traversals over a plain dependency mapping."""
    print("\n=== Mapping Trees ===")
    deps = {
        "app": ["web", "worker"],
        "web": ["templates", "static"],
        "worker": ["queue"],
    }
    tree = MappingTree(deps)

    print(f"Roots:            {tree.roots()}")
    print(f"Build order:      {list(tree.traversal().post_order('app'))}")
    print(f"After 'static':   {list(tree.traversal().post_order_continuation('static'))}")

    stats = get_tree_stats("app", tree.children)
    print(f"Stats:            {stats['total_nodes']} nodes, depth {stats['max_depth']}")

    first_two = traverse_tree("app", tree.children, order="level", max_nodes=2)
    print(f"First two levels: {list(first_two)}")


def main():
    outline = build_outline()
    demo_reading_order(outline)
    demo_bottom_up(outline)
    demo_mapping()


if __name__ == "__main__":
    main()
