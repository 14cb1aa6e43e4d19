import unittest

from dotgraph import (
    AttrList,
    AttrStmt,
    AttrType,
    Edge,
    Equation,
    Identity,
    KeywordSubGraph,
    NodeStmt,
    Port,
    Stmt,
    StmtList,
    SubGraph,
    SubGraphStmt,
)


class StmtListTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(str(StmtList()), "")

    def test_equations(self):
        stmts = StmtList().add_equation("a", "b").add_equation("c", "d")
        self.assertEqual(str(stmts), "a=b;c=d;")

    def test_node(self):
        self.assertEqual(str(StmtList().add_node("n")), "n;")
        stmts = StmtList().add_node("n", Port.id("p"), AttrList().add("shape", "box"))
        self.assertEqual(str(stmts), "n:p[shape=box;];")

    def test_default_attribute_statements(self):
        stmts = (
            StmtList()
            .add_attr(AttrType.GRAPH, AttrList().add("rankdir", "LR"))
            .add_attr(AttrType.NODE, AttrList().add("shape", "box"))
            .add_attr(AttrType.EDGE, AttrList().add("color", "red"))
        )
        self.assertEqual(str(stmts), "graph [rankdir=LR;];node [shape=box;];edge [color=red;];")

    def test_default_attribute_statement_without_pairs(self):
        self.assertEqual(str(AttrStmt(AttrType.EDGE, AttrList())), "edge ")

    def test_edge(self):
        edge = Edge.head_node("a").arrow_to_node("b").add_attribute("color", "red")
        self.assertEqual(str(StmtList().add_edge(edge)), "a->b[color=red;];")

    def test_subgraphs(self):
        inner = StmtList().add_node("a")
        self.assertEqual(str(SubGraph.subgraph(None, inner)), "subgraph {a;}")
        self.assertEqual(str(SubGraph.subgraph("s", inner)), "subgraph s {a;}")
        self.assertEqual(str(SubGraph.cluster(inner)), "{a;}")
        stmts = StmtList().add_subgraph(SubGraph.subgraph("cluster_0", inner)).add_node("b")
        self.assertEqual(str(stmts), "subgraph cluster_0 {a;};b;")

    def test_insertion_order(self):
        stmts = StmtList().add_node("z").add_equation("a", "b").add_node("a")
        self.assertEqual(str(stmts), "z;a=b;a;")
        self.assertEqual(len(stmts), 3)

    def test_extend(self):
        stmts = StmtList().extend(
            [
                NodeStmt(Identity.id("a")),
                Equation(Identity.id("k"), Identity.quoted("v w")),
                SubGraphStmt(SubGraph.cluster(StmtList())),
            ]
        )
        self.assertEqual(str(stmts), 'a;k="v w";{};')

    def test_add_rejects_non_statements(self):
        with self.assertRaises(TypeError):
            StmtList().add("a")

    def test_base_classes_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            Stmt()
        with self.assertRaises(TypeError):
            SubGraph()

    def test_variants_coerce_raw_values(self):
        self.assertEqual(str(NodeStmt("a b")), '"a b"')
        self.assertEqual(str(Equation("k", "v w")), 'k="v w"')
        self.assertEqual(str(Equation("size", 2)), "size=2")
        self.assertEqual(str(KeywordSubGraph("my cluster", StmtList())), 'subgraph "my cluster" {}')

    def test_builders_do_not_alias(self):
        base = StmtList().add_node("a")
        grown = base.add_node("b")
        self.assertEqual(str(base), "a;")
        self.assertEqual(str(grown), "a;b;")
