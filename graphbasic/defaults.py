"""Default demonstration graph."""

from typing import List, Tuple

order = 10

edges: List[Tuple[int, int]] = [
    (0, 2),
    (1, 3),
    (2, 4),
    (3, 7),
    (5, 4),
    (9, 8),
    (4, 3),
    (5, 9),
    (8, 4),
    (6, 8),
    (0, 6),
    (1, 0),
    (8, 1),
]


def graphbasic_yml() -> str:
    """Contents of the default graphbasic.yml, describing the same graph."""
    lines = [f"order: {order}", "edges:"]
    lines.extend(f"  - [{src}, {dest}]" for src, dest in edges)
    return "\n".join(lines) + "\n"
