"""Ordering algorithms over a DependencyGraph.

Both functions only read the graph, so the same graph can be ordered any
number of times with either classifier.
"""
import enum
import logging
from collections import deque
from typing import Dict, List

from topsort.core.dependency_graph import DependencyGraph
from topsort.core.errors import CycleError, format_cycle


class _State(enum.Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


def top_sort(graph: DependencyGraph) -> List[str]:
    """Kahn's algorithm: a node is emitted once all its incoming edges are.

    Ready nodes are taken first-in first-out, seeded in node insertion order,
    so ``A-B,B-C,B-D,E-D,F`` gives ``A E F B C D``.
    """
    in_degree: Dict[str, int] = {node: graph.in_degree(node) for node in graph.nodes}
    queue = deque(node for node, degree in in_degree.items() if degree == 0)
    result: List[str] = []

    while queue:
        node = queue.popleft()
        result.append(node)
        for target in graph.successors(node):
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    if len(result) != len(in_degree):
        unresolved = [node for node, degree in in_degree.items() if degree > 0]
        cycle = find_cycle(graph, unresolved)
        logging.debug(f"Cycle {format_cycle(cycle)}, {len(unresolved)} nodes unresolved")
        raise CycleError(cycle, unresolved)
    return result


def find_cycle(graph: DependencyGraph, unresolved: List[str]) -> List[str]:
    """Return one closed path among the nodes Kahn's algorithm left behind.

    Every unresolved node still has an unresolved predecessor, so walking
    predecessors inside that set must revisit a node. The path is rotated to
    start at its earliest inserted node.
    """
    position = {node: i for i, node in enumerate(unresolved)}
    path = [unresolved[0]]
    seen = {unresolved[0]: 0}
    while True:
        prev = next(p for p in graph.predecessors(path[-1]) if p in position)
        if prev in seen:
            break
        seen[prev] = len(path)
        path.append(prev)

    # path was walked against the edges
    body = path[seen[prev]:][::-1]
    start = min(range(len(body)), key=lambda i: position[body[i]])
    body = body[start:] + body[:start]
    return body + [body[0]]


def depth_first(graph: DependencyGraph) -> List[str]:
    """Postorder depth-first walk with an explicit stack.

    Roots and neighbours are visited in insertion order. A node is appended
    once all its successors are done, so targets come before their sources:
    ``A-B,B-C,B-D,E-D,F`` gives ``C D B A E F``.
    """
    state = dict.fromkeys(graph.nodes, _State.UNVISITED)
    result: List[str] = []

    for root in graph.nodes:
        if state[root] is not _State.UNVISITED:
            continue
        state[root] = _State.IN_PROGRESS
        stack = [(root, iter(graph.successors(root)))]
        while stack:
            node, neighbours = stack[-1]
            for target in neighbours:
                if state[target] is _State.IN_PROGRESS:
                    path = [frame[0] for frame in stack]
                    cycle = path[path.index(target):] + [target]
                    logging.debug(f"Back edge {node!r} -> {target!r}")
                    raise CycleError(cycle)
                if state[target] is _State.UNVISITED:
                    state[target] = _State.IN_PROGRESS
                    stack.append((target, iter(graph.successors(target))))
                    break
            else:
                stack.pop()
                state[node] = _State.DONE
                result.append(node)
    return result
