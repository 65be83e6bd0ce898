# core/formula_graph.py
"""
FormulaGraph: arena of name and formula vertices plus the dependency edges
between declaration lines.
"""
from typing import Dict, Iterable, List, Sequence
import networkx as nx

from core.vertex import Vertex
from utils.logging_config import get_logger

logger = get_logger(__name__)


class FormulaGraph:
    """
    Owns every Vertex created during a run.

    Name vertices are registered lazily on first mention and shared by every
    later mention of the same identifier. Formula vertices (one per
    declaration line) are kept in declaration order in `formulas` and are not
    reachable by name.
    """
    def __init__(self):
        self.vertices: List[Vertex] = []
        # Identifier -> handle of its name vertex
        self.names: Dict[str, int] = {}
        # Formula vertex handles in declaration order
        self.formulas: List[int] = []

    def __getitem__(self, handle: int) -> Vertex:
        return self.vertices[handle]

    def __len__(self) -> int:
        return len(self.vertices)

    def _new_vertex(self, name: str) -> Vertex:
        vertex = Vertex(len(self.vertices), name)
        self.vertices.append(vertex)
        return vertex

    def register(self, name: str) -> int:
        """
        Return the handle of the name vertex for `name`, creating it on first use.
        """
        handle = self.names.get(name)
        if handle is None:
            handle = self._new_vertex(name).handle
            self.names[name] = handle
        return handle

    def add_related(self, source: int, target: int) -> None:
        self.vertices[source].add_related(target)

    def add_formula(self, label: str, declared: Sequence[int], calls: Iterable[Iterable[int]]) -> int:
        """
        Record one declaration line as a formula vertex.

        Args:
            label: Source text of the line.
            declared: Handles of the names bound on the line, in order.
            calls: One group of called handles per right-hand side expression.

        Returns:
            The handle of the new formula vertex.
        """
        vertex = self._new_vertex(label)
        vertex.declared = list(declared)
        for group in calls:
            vertex.add_called(group)
        self.formulas.append(vertex.handle)
        return vertex.handle

    def owners(self) -> Dict[int, int]:
        """
        Map each declared name handle to the formula that declares it.
        """
        owner: Dict[int, int] = {}
        for formula in self.formulas:
            for name in self.vertices[formula].declared:
                owner[name] = formula
        return owner

    def link_formulas(self) -> None:
        """
        Add an edge A -> B between formula vertices whenever A calls a name
        that B declares. At most one edge is added per ordered pair and the
        edges of A follow the declaration order of the B's.
        """
        owner = self.owners()
        order = {formula: index for index, formula in enumerate(self.formulas)}
        for formula in self.formulas:
            vertex = self.vertices[formula]
            targets = {owner[name] for name in vertex.called if name in owner}
            targets.discard(formula)
            for target in sorted(targets, key=order.__getitem__):
                vertex.add_related(target)
                logger.debug("'%s' depends on '%s'", vertex.name, self.vertices[target].name)

    def labels(self, handles: Iterable[int]) -> List[str]:
        return [self.vertices[h].name for h in handles]

    def to_networkx(self) -> nx.DiGraph:
        """
        Export the formula-level dependency graph. Nodes are formula handles
        carrying a `label` attribute; an edge (A, B) means A depends on B.
        """
        graph = nx.DiGraph()
        for formula in self.formulas:
            graph.add_node(formula, label=self.vertices[formula].name)
        for formula in self.formulas:
            for target in self.vertices[formula].related:
                graph.add_edge(formula, target)
        return graph

    def __repr__(self) -> str:
        return f"<FormulaGraph vertices={len(self.vertices)} formulas={len(self.formulas)}>"
