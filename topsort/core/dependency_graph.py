from typing import Dict, List, Tuple
import logging


class DependencyGraph:
    """Directed graph of string labels built incrementally from parsed pairs.

    An edge ``source -> target`` comes from an input pair ``source-target``.
    Nodes and neighbours keep first-seen order so that both classifiers
    break ties the same way on every run.
    """

    def __init__(self):
        # dicts used as ordered sets: label -> None
        self._outgoing: Dict[str, Dict[str, None]] = {}
        self._incoming: Dict[str, Dict[str, None]] = {}

    @property
    def nodes(self) -> List[str]:
        return list(self._outgoing)

    def add_node(self, name: str) -> bool:
        """Register ``name`` if unseen. Returns True when the node is new."""
        if name in self._outgoing:
            return False
        self._outgoing[name] = {}
        self._incoming[name] = {}
        return True

    def add_edge(self, source: str, target: str) -> bool:
        """Register ``source -> target``. Returns False for a duplicate edge."""
        self.add_node(source)
        self.add_node(target)
        if target in self._outgoing[source]:
            return False
        self._outgoing[source][target] = None
        self._incoming[target][source] = None
        logging.debug(f"Edge {source!r} -> {target!r}")
        return True

    def successors(self, name: str) -> List[str]:
        """Targets of the outgoing edges of ``name``, in insertion order."""
        return list(self._outgoing[name])

    def predecessors(self, name: str) -> List[str]:
        """Sources of the incoming edges of ``name``, in insertion order."""
        return list(self._incoming[name])

    def in_degree(self, name: str) -> int:
        return len(self._incoming[name])

    def edges(self) -> List[Tuple[str, str]]:
        return [(s, t) for s, targets in self._outgoing.items() for t in targets]

    def __len__(self) -> int:
        return len(self._outgoing)

    def __contains__(self, name: str) -> bool:
        return name in self._outgoing
