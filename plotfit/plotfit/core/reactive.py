"""Explicit dependency graph for session values.

Inputs are assigned by user actions; derived values declare the names they
depend on and are recomputed synchronously, in declaration order, whenever one
of their (transitive) dependencies changes. Nothing else is recomputed.

A compute function receives its dependencies as keyword arguments. It may call
``require(value)`` to signal that an upstream value is absent, in which case the
derived value becomes ``None`` without being treated as an error. Any other
exception is stored on the node and re-raised by ``get`` so that one failing
output does not block the others.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

LOGGER = logging.getLogger(__name__)


class Missing(Exception):
    """Upstream value not available yet."""
    pass


def require(value):
    if value is None:
        raise Missing()
    return value


@dataclass
class Node:
    name: str
    depends_on: Tuple[str, ...] = ()
    compute: Optional[Callable[..., Any]] = None
    value: Any = None
    error: Optional[BaseException] = None
    recomputes: int = 0

    @property
    def is_input(self) -> bool:
        return self.compute is None


class ReactiveGraph:
    def __init__(self):
        # Dependencies must be declared first, so insertion order is a
        # valid evaluation order.
        self._nodes: Dict[str, Node] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    def input(self, name: str, value: Any = None) -> "ReactiveGraph":
        self._declare(Node(name, value=value))
        return self

    def derived(
        self,
        name: str,
        depends_on: Iterable[str],
        compute: Optional[Callable[..., Any]] = None,
    ):
        """Declare a derived value; usable directly or as a decorator."""
        deps = tuple(depends_on)

        def deco(fn: Callable[..., Any]):
            unknown = [d for d in deps if d not in self._nodes]
            if unknown:
                raise KeyError(
                    f"'{name}' depends on undeclared value(s): {unknown}"
                )
            node = Node(name, depends_on=deps, compute=fn)
            self._declare(node)
            self._evaluate(node)
            return fn

        if compute is None:
            return deco
        deco(compute)
        return self

    def set(self, **inputs: Any) -> List[str]:
        """Assign inputs atomically and recompute their dependents.

        Returns the names of the recomputed derived values.
        """
        for name in inputs:
            node = self._node(name)
            if not node.is_input:
                raise KeyError(f"'{name}' is derived and cannot be set")
        changed = []
        for name, value in inputs.items():
            node = self._nodes[name]
            if node.value is not value:
                node.value = value
                changed.append(name)
        stale = self.dependents(changed)
        order = [n for n in self._nodes if n in stale]
        for name in order:
            self._evaluate(self._nodes[name])
        if order:
            LOGGER.debug("Inputs %s -> recomputed %s", changed, order)
        return order

    def get(self, name: str) -> Any:
        node = self._node(name)
        if node.error is not None:
            raise node.error
        return node.value

    def error(self, name: str) -> Optional[BaseException]:
        return self._node(name).error

    def dependents(self, names: Iterable[str]) -> Set[str]:
        """Transitive dependents of *names* (excluding the names themselves)."""
        found: Set[str] = set()
        frontier = set(names)
        while frontier:
            frontier = {
                n.name for n in self._nodes.values()
                if frontier.intersection(n.depends_on) and n.name not in found
            }
            found |= frontier
        return found

    def recompute_count(self, name: str) -> int:
        return self._node(name).recomputes

    # --- internals ---
    def _declare(self, node: Node):
        if node.name in self._nodes:
            raise KeyError(f"'{node.name}' is already declared")
        self._nodes[node.name] = node

    def _node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise KeyError(f"Unknown value '{name}'") from None

    def _evaluate(self, node: Node):
        node.recomputes += 1
        node.value = None
        node.error = None
        kwargs = {}
        for dep in node.depends_on:
            upstream = self._nodes[dep]
            if upstream.error is not None:
                # Failure upstream: nothing meaningful to compute here
                return
            kwargs[dep] = upstream.value
        try:
            node.value = node.compute(**kwargs)
        except Missing:
            node.value = None
        except Exception as exc:  # stored, re-raised on get()
            LOGGER.warning("Computing '%s' failed: %s", node.name, exc)
            node.error = exc


__all__ = ["ReactiveGraph", "Node", "Missing", "require"]
