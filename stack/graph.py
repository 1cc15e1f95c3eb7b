"""
Deployment Graph
Explicit DAG of resource declarations. Each node names the nodes it reads
from, and its factory receives their built values once they exist.
"""
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Set

import pulumi


class NodeKind(Enum):
    NETWORK = "network"
    CLUSTER = "cluster"
    PROVIDER = "provider"
    NAMESPACE = "namespace"
    WORKLOAD = "workload"
    CHART_INSTALL = "chart_install"
    SERVICE = "service"
    OUTPUT = "output"


class GraphError(Exception):
    """Raised for malformed graphs (duplicate or unknown nodes)"""


class CycleError(GraphError):
    """Raised when the declared dependencies form a cycle"""

    def __init__(self, nodes: Iterable[str]):
        self.nodes = sorted(nodes)
        super().__init__(f"dependency cycle between: {', '.join(self.nodes)}")


class Node:
    def __init__(self, name: str, kind: NodeKind, factory: Callable[[Dict[str, Any]], Any],
                 depends_on: Iterable[str] = ()):
        self.name = name
        self.kind = kind
        self.factory = factory
        self.depends_on = tuple(depends_on)

    def __repr__(self):
        return f"Node({self.name!r}, {self.kind.value})"


class DeploymentGraph:
    """Ordered set of nodes built leaves first"""

    def __init__(self):
        self._nodes: Dict[str, Node] = {}

    def add(self, name: str, kind: NodeKind, factory: Callable[[Dict[str, Any]], Any],
            depends_on: Iterable[str] = ()) -> Node:
        if name in self._nodes:
            raise GraphError(f"node '{name}' is already declared")
        node = Node(name, kind, factory, depends_on)
        self._nodes[name] = node
        return node

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise GraphError(f"unknown node '{name}'") from None

    def order(self) -> List[str]:
        """
        Topological order of node names.
        Among nodes that are ready at the same time, declaration order wins,
        so the result is stable for a given declaration.
        """
        for node in self._nodes.values():
            for dep in node.depends_on:
                if dep not in self._nodes:
                    raise GraphError(f"node '{node.name}' depends on unknown node '{dep}'")

        remaining = {name: set(node.depends_on) for name, node in self._nodes.items()}
        ordered = []
        while remaining:
            ready = [name for name, deps in remaining.items() if not deps]
            if not ready:
                raise CycleError(remaining.keys())
            for name in ready:
                ordered.append(name)
                del remaining[name]
            for deps in remaining.values():
                deps.difference_update(ready)
        return ordered

    def dependencies_of(self, name: str) -> Set[str]:
        """All nodes `name` depends on, directly or transitively"""
        seen: Set[str] = set()
        stack = list(self.node(name).depends_on)
        while stack:
            dep = stack.pop()
            if dep in seen:
                continue
            seen.add(dep)
            stack.extend(self.node(dep).depends_on)
        return seen

    def build(self) -> Dict[str, Any]:
        """Invoke every factory in dependency order and return the built values"""
        built: Dict[str, Any] = {}
        for name in self.order():
            node = self._nodes[name]
            pulumi.log.info(f"Declaring {node.kind.value} '{name}'")
            built[name] = node.factory({dep: built[dep] for dep in node.depends_on})
        return built
