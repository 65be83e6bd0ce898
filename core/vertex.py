# core/vertex.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List


class Color(Enum):
    WHITE = "white"
    GREY = "grey"
    BLACK = "black"


@dataclass
class Vertex:
    """
    A node of the formula graph.

    Name vertices stand for a single identifier; formula vertices stand for a
    whole declaration line and are named by its source text. All links are
    integer handles into the owning FormulaGraph.

    Attributes:
        handle: Index of this vertex in the graph arena.
        name: Identifier, or the declaration label for formula vertices.
        declared: Handles of the names bound by the declaration line.
        called: Handles of the names referenced on the right-hand side (no duplicates).
        related: Handles of the vertices this one depends on, in insertion order.
        color: Depth-first traversal state.
        exit_rank: Finishing order assigned by the topological sort.
    """
    handle: int
    name: str
    declared: List[int] = field(default_factory=list)
    called: List[int] = field(default_factory=list)
    related: List[int] = field(default_factory=list)
    color: Color = Color.WHITE
    exit_rank: int = 0

    @property
    def is_formula(self) -> bool:
        return bool(self.declared)

    def add_called(self, handles: Iterable[int]) -> None:
        for handle in handles:
            if handle not in self.called:
                self.called.append(handle)

    def add_related(self, handle: int) -> None:
        self.related.append(handle)

    def __str__(self) -> str:
        return self.name
