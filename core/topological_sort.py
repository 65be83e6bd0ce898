# core/topological_sort.py
from typing import List, Optional, Sequence

from core.exceptions import SemanticError
from core.formula_graph import FormulaGraph
from core.vertex import Color
from utils.logging_config import get_logger

logger = get_logger(__name__)


def topological_sort(graph: FormulaGraph, handles: Optional[Sequence[int]] = None) -> None:
    """
    Three-colour depth-first search assigning exit ranks.

    Every WHITE vertex of `handles` (default: all formulas) is visited in list
    order. A vertex turns GREY when entered and BLACK when all of its related
    vertices are finished, at which point it receives the next exit rank
    (starting at 1). Reaching a GREY vertex again is a back-edge.

    An explicit stack of [handle, next_edge_index] frames replaces recursion.

    :raises SemanticError: If a back-edge (cycle) is found.
    """
    if handles is None:
        handles = graph.formulas

    for handle in handles:
        graph[handle].color = Color.WHITE
        graph[handle].exit_rank = 0

    time = 1
    for root in handles:
        if graph[root].color is not Color.WHITE:
            continue

        graph[root].color = Color.GREY
        stack = [[root, 0]]
        while stack:
            frame = stack[-1]
            vertex = graph[frame[0]]
            if frame[1] < len(vertex.related):
                related = graph[vertex.related[frame[1]]]
                frame[1] += 1
                if related.color is Color.GREY:
                    entered = [h for h, _ in stack]
                    cycle = entered[entered.index(related.handle):] + [related.handle]
                    raise SemanticError("Cycle detected", graph.labels(cycle))
                if related.color is Color.WHITE:
                    related.color = Color.GREY
                    stack.append([related.handle, 0])
                continue

            vertex.exit_rank = time
            vertex.color = Color.BLACK
            time += 1
            stack.pop()


def order_formulas(graph: FormulaGraph) -> List[int]:
    """
    Sort the graph's formulas and return their handles by ascending exit rank,
    i.e. every formula after all formulas it depends on.
    """
    topological_sort(graph)
    ordered = sorted(graph.formulas, key=lambda h: graph[h].exit_rank)
    logger.debug("Exit ranks: %s",
                 ", ".join(f"{graph[h].exit_rank}={graph[h].name!r}" for h in ordered))
    return ordered
