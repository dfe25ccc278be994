from __future__ import annotations

from typing import Dict, List, Set, Tuple

from .graph import all_nodes
from .model import CycleRecord, DependencyGraph


def find_cycles(graph: DependencyGraph) -> List[CycleRecord]:
    """Find circular import paths with a depth-first traversal.

    A cycle is recorded for every back edge, i.e. an edge into a node that
    is still on the current path. The same cycle reached from different
    roots or entry points is reported once per back edge, so rotations of
    one loop may appear more than once.
    """
    cycles: List[CycleRecord] = []
    visited: Set[str] = set()

    for root in all_nodes(graph):
        if root in visited:
            continue

        path: List[str] = [root]
        on_stack: Dict[str, int] = {root: 0}  # node -> index in path
        frames: List[Tuple[str, int]] = [(root, 0)]
        visited.add(root)

        while frames:
            node, next_edge = frames[-1]
            deps = graph.get(node, [])
            if next_edge >= len(deps):
                frames.pop()
                path.pop()
                del on_stack[node]
                continue

            frames[-1] = (node, next_edge + 1)
            dep = deps[next_edge]
            if dep in on_stack:
                cycles.append(CycleRecord(path=path[on_stack[dep]:] + [dep]))
                continue
            if dep not in visited:
                visited.add(dep)
                on_stack[dep] = len(path)
                path.append(dep)
                frames.append((dep, 0))

    return cycles
