# core/validation.py
"""
Post-conditions on a computed formula order, checked against a networkx
view of the dependency graph.
"""
from typing import Sequence
import networkx as nx

from core.exceptions import FormulaOrderError
from core.formula_graph import FormulaGraph
from core.vertex import Color


def check_order(graph: FormulaGraph, ordered: Sequence[int]) -> None:
    """
    Verify that `ordered` lists every formula exactly once, each one after all
    formulas it depends on, and that the traversal left every formula BLACK.

    Raises:
        FormulaOrderError with a descriptive message if a check fails.
    """
    dag: nx.DiGraph = graph.to_networkx()

    if len(ordered) != dag.number_of_nodes() or set(ordered) != set(dag.nodes):
        raise FormulaOrderError(
            f"Order lists {len(ordered)} formulas, graph has {dag.number_of_nodes()}."
        )

    unfinished = [graph[h].name for h in ordered if graph[h].color is not Color.BLACK]
    if unfinished:
        raise FormulaOrderError("Traversal left unfinished formulas: " + "; ".join(unfinished))

    position = {handle: index for index, handle in enumerate(ordered)}
    for dependent, dependency in dag.edges:
        if position[dependency] > position[dependent]:
            raise FormulaOrderError(
                f"Formula '{graph[dependent].name}' is ordered before its "
                f"dependency '{graph[dependency].name}'."
            )
