import unittest

from dotgraph import AttrList, Compass, Edge, EdgeOp, Identity, NodeId, Port, StmtList, SubGraph
from dotgraph import attributes


class EdgeChainTest(unittest.TestCase):
    def test_head_only(self):
        self.assertEqual(str(Edge.head_node("a")), "a")

    def test_arrow_chain(self):
        edge = Edge.head_node("a").arrow_to_node("b").arrow_to_node("c")
        self.assertEqual(str(edge), "a->b->c")
        self.assertEqual([step.op for step in edge.body], [EdgeOp.ARROW, EdgeOp.ARROW])

    def test_line_chain(self):
        self.assertEqual(str(Edge.head_node("a").line_to_node("b").line_to_node("c")), "a--b--c")

    def test_ports(self):
        edge = Edge.head_node("a", Port.id_compass("x", Compass.NORTH)).arrow_to_node("b")
        self.assertEqual(str(edge), "a:x:n->b")
        edge = Edge.head_node("a").line_to_node("b", Port.compass(Compass.CENTER))
        self.assertEqual(str(edge), "a--b:c")

    def test_subgraph_endpoints(self):
        cluster = SubGraph.cluster(StmtList().add_node("a").add_node("b"))
        edge = Edge.head_subgraph(cluster).arrow_to_node("c")
        self.assertEqual(str(edge), "{a;b;}->c")

        named = SubGraph.subgraph("s", StmtList().add_node("x"))
        self.assertEqual(str(Edge.head_node("c").arrow_to_subgraph(named)), "c->subgraph s {x;}")
        self.assertEqual(str(Edge.head_node("c").line_to_subgraph(cluster)), "c--{a;b;}")

    def test_operators(self):
        self.assertEqual(str(Edge.head_node("a") >> "b" >> "c"), "a->b->c")
        self.assertEqual(str(Edge.head_node("a") >> NodeId("b", Port.id("p"))), "a->b:p")
        self.assertEqual(str(Edge.head_node("a") - "b"), "a--b")
        cluster = SubGraph.cluster(StmtList().add_node("x"))
        self.assertEqual(str(Edge.head_node("a") >> cluster), "a->{x;}")

    def test_quoted_endpoints(self):
        self.assertEqual(str(Edge.head_node("node 1").arrow_to_node("node 2")), '"node 1"->"node 2"')

    def test_node_id_coerces_raw_strings(self):
        self.assertEqual(str(Edge.head_node("a") >> NodeId("b c")), 'a->"b c"')
        self.assertEqual(NodeId("b"), NodeId(Identity.id("b")))


class EdgeAttributeTest(unittest.TestCase):
    def setUp(self):
        self.edge = Edge.head_node("a").arrow_to_node("b")

    def test_add_attribute_creates_list(self):
        self.assertEqual(str(self.edge.add_attribute("k1", "v1")), "a->b[k1=v1;]")

    def test_add_attribute_joins_last_group(self):
        edge = self.edge.add_attribute("k1", "v1").add_attribute("k2", "v2")
        self.assertEqual(str(edge), "a->b[k1=v1;k2=v2;]")

    def test_first_attrlist_is_taken_as_is(self):
        edge = self.edge.add_attrlist(AttrList().add("k", "v"))
        self.assertEqual(str(edge), "a->b[k=v;]")
        self.assertEqual(str(edge.add_attribute("k2", "v2")), "a->b[k=v;k2=v2;]")

    def test_merged_attrlist_opens_trailing_group(self):
        edge = self.edge.add_attribute("k1", "v1").add_attrlist(AttrList().add("k2", "v2"))
        self.assertEqual(str(edge), "a->b[k1=v1;][k2=v2;][]")
        self.assertEqual(str(edge.add_attribute("k3", "v3")), "a->b[k1=v1;][k2=v2;][k3=v3;]")

    def test_empty_attrlist(self):
        edge = self.edge.add_attrlist(AttrList())
        self.assertEqual(str(edge), "a->b")
        self.assertEqual(str(edge.add_attribute("k", "v")), "a->b[k=v;]")

    def test_add_attrpair(self):
        edge = self.edge.add_attrpair(attributes.label("x"))
        self.assertEqual(str(edge), 'a->b[label="x";]')

    def test_builders_do_not_alias(self):
        base = self.edge.add_attribute("k", "v")
        longer = base.arrow_to_node("c")
        tagged = base.add_attribute("k2", "v2")
        self.assertEqual(str(base), "a->b[k=v;]")
        self.assertEqual(str(longer), "a->b->c[k=v;]")
        self.assertEqual(str(tagged), "a->b[k=v;k2=v2;]")
