import networkx as nx
from networkx import generate_network_text


class WaitGraph:
    """
    The "waiting-for" relation between tasks of a single run. An edge `a -> b`
    records that `a` has requested the outcome of `b` at some point. Edges are never
    removed, so a cycle is reported even when part of it has already settled.
    """

    def __init__(self) -> None:
        self.digraph = nx.DiGraph()

    def would_cycle(self, caller: str, target: str) -> bool:
        """Whether recording `caller -> target` would close a cycle."""
        if caller == target:
            return True
        elif caller not in self.digraph or target not in self.digraph:
            return False

        return nx.has_path(self.digraph, target, caller)

    def cycle_path(self, caller: str, target: str) -> tuple[str, ...]:
        """
        The cycle that `caller -> target` would close, starting and ending at
        `caller`.
        """
        if caller == target:
            return (caller, caller)

        return (caller, *nx.shortest_path(self.digraph, target, caller))

    def add(self, caller: str, target: str) -> bool:
        """Record `caller -> target`, returning whether the edge is new."""
        if self.digraph.has_edge(caller, target):
            return False

        self.digraph.add_edge(caller, target)
        return True

    @property
    def edges(self) -> set[tuple[str, str]]:
        return set(self.digraph.edges)

    def __len__(self) -> int:
        return self.digraph.number_of_edges()

    def __str__(self) -> str:
        return "\n".join(generate_network_text(self.digraph, vertical_chains=True))
