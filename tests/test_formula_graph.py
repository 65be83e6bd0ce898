import networkx as nx
from core.formula_graph import FormulaGraph
from core.vertex import Color, Vertex


def test_register_is_lazy_and_shared():
    graph = FormulaGraph()
    a = graph.register("a")
    b = graph.register("b")
    assert graph.register("a") == a
    assert (a, b) == (0, 1)
    assert graph[a].name == "a"
    assert len(graph) == 2


def test_formula_vertices_are_not_registered_by_name():
    graph = FormulaGraph()
    x = graph.register("x")
    formula = graph.add_formula("x = 1", [x], [[]])
    assert graph.formulas == [formula]
    assert "x = 1" not in graph.names
    assert graph[formula].is_formula
    assert not graph[x].is_formula


def test_add_formula_merges_call_groups_without_duplicates():
    graph = FormulaGraph()
    a, b, c = (graph.register(n) for n in "abc")
    formula = graph.add_formula("a, b = c, c", [a, b], [[c], [c]])
    assert graph[formula].called == [c]


def test_link_formulas():
    graph = FormulaGraph()
    a, b, c = (graph.register(n) for n in "abc")
    fa = graph.add_formula("a = b + c", [a], [[b, c]])
    fc = graph.add_formula("c = 1", [c], [[]])
    fb = graph.add_formula("b = c", [b], [[c]])
    graph.link_formulas()
    # callee order follows declaration order, not call order
    assert graph[fa].related == [fc, fb]
    assert graph[fb].related == [fc]
    assert graph[fc].related == []


def test_to_networkx():
    graph = FormulaGraph()
    a, b = graph.register("a"), graph.register("b")
    fa = graph.add_formula("a = b", [a], [[b]])
    fb = graph.add_formula("b = 2", [b], [[]])
    graph.link_formulas()
    dag = graph.to_networkx()
    assert set(dag.nodes) == {fa, fb}
    assert list(dag.edges) == [(fa, fb)]
    assert dag.nodes[fa]["label"] == "a = b"
    assert nx.is_directed_acyclic_graph(dag)


def test_vertex_defaults():
    vertex = Vertex(0, "v")
    assert vertex.color is Color.WHITE
    assert vertex.exit_rank == 0
    vertex.add_called([1, 2, 1])
    assert vertex.called == [1, 2]
    assert str(vertex) == "v"
