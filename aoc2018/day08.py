"""License tree: metadata sum and root node value."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Node:
    metadata: list[int] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    start_index: int = 0

    def metadata_total(self) -> int:
        """Sum of the metadata of this node and all its descendants."""
        return sum(self.metadata) + sum(child.metadata_total() for child in self.children)

    def value(self) -> int:
        """Node value: its metadata sum for a leaf, else the values of referenced children."""
        if not self.children:
            return sum(self.metadata)
        return sum(
            self.children[entry - 1].value()
            for entry in self.metadata
            if 1 <= entry <= len(self.children)
        )


def _read_node(numbers: Sequence[int], start: int) -> tuple[Node, int]:
    if start + 1 >= len(numbers):
        raise ValueError(f"Tree is truncated at index {start}")
    child_count, metadata_count = numbers[start], numbers[start + 1]
    node = Node(start_index=start)
    index = start + 2
    for _ in range(child_count):
        child, index = _read_node(numbers, index)
        node.children.append(child)
    end = index + metadata_count
    if end > len(numbers):
        raise ValueError(f"Tree is truncated at index {index}")
    node.metadata = list(numbers[index:end])
    return node, end


def parse_tree(text: str) -> Node:
    """Parse the space separated numbers into the root node."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as err:
        raise ValueError(f"Not a list of integers: {err}") from err
    root, end = _read_node(numbers, 0)
    if end != len(numbers):
        raise ValueError(f"Last index is {end} and should be {len(numbers)}")
    return root


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        root = parse_tree(Path(args[0]).read_text())
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Total metadata is", root.metadata_total(), "and root value is", root.value())


if __name__ == "__main__":
    main()