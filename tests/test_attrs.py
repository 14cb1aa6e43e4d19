import unittest

from dotgraph import AttrList, Compass, FieldPort, Identity, Port, Quoted, String


class PortTest(unittest.TestCase):
    def test_field_port(self):
        self.assertEqual(str(Port.id("x")), ":x")
        self.assertEqual(str(Port.id(Identity.quoted("a b"))), ':"a b"')

    def test_field_port_with_compass(self):
        self.assertEqual(str(Port.id_compass("x", Compass.NORTH)), ":x:n")
        self.assertEqual(str(Port.id("x", Compass.SOUTH_EAST)), ":x:se")

    def test_compass_port(self):
        self.assertEqual(str(Port.compass(Compass.SOUTH_WEST)), ":sw")

    def test_field_port_coerces_raw_strings(self):
        self.assertEqual(str(FieldPort("a b")), ':"a b"')
        self.assertEqual(str(FieldPort("x", Compass.EAST)), ":x:e")

    def test_base_class_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            Port()

    def test_compass_codes(self):
        codes = [str(c) for c in Compass]
        self.assertEqual(codes, ["n", "ne", "e", "se", "s", "sw", "w", "nw", "c"])


class AttrListTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(str(AttrList()), "")
        self.assertEqual(len(AttrList()), 0)

    def test_first_add_opens_a_bracket(self):
        self.assertEqual(str(AttrList().add("k", "v")), "[k=v;]")

    def test_add_appends_to_last_bracket(self):
        attrs = AttrList().add("k1", "v1").add("k2", "v2")
        self.assertEqual(str(attrs), "[k1=v1;k2=v2;]")

    def test_new_bracket(self):
        attrs = AttrList().add("k1", "v1").new_bracket().add("k2", "v2")
        self.assertEqual(str(attrs), "[k1=v1;][k2=v2;]")

    def test_empty_brackets(self):
        self.assertEqual(str(AttrList().new_bracket()), "[]")
        self.assertEqual(str(AttrList().new_bracket().new_bracket()), "[][]")

    def test_extend(self):
        self.assertEqual(str(AttrList().extend([("a", 1), ("b", 2)])), "[a=1;b=2;]")
        attrs = AttrList().add("a", 1).new_bracket().extend([("b", 2), ("c", 3)])
        self.assertEqual(str(attrs), "[a=1;][b=2;c=3;]")

    def test_extend_list_keeps_grouping(self):
        attrs = AttrList().add("a", 1).extend_list([[("b", 2)], [("c", 3)]])
        self.assertEqual(str(attrs), "[a=1;][b=2;][c=3;]")
        self.assertEqual(str(attrs.add("d", 4)), "[a=1;][b=2;][c=3;d=4;]")

    def test_extend_list_with_attr_list(self):
        other = AttrList().add("b", 2).new_bracket().add("c", 3)
        self.assertEqual(str(AttrList().add("a", 1).extend_list(other)), "[a=1;][b=2;][c=3;]")

    def test_merge_opens_trailing_bracket(self):
        merged = AttrList().add("k1", "v1").merge(AttrList().add("k2", "v2"))
        self.assertEqual(str(merged), "[k1=v1;][k2=v2;][]")
        self.assertEqual(str(merged.add("k3", "v3")), "[k1=v1;][k2=v2;][k3=v3;]")

    def test_add_pair_and_values(self):
        attrs = AttrList().add_pair((String("label"), Quoted("hello world"))).add("width", 1.5)
        self.assertEqual(str(attrs), '[label="hello world";width=1.5;]')

    def test_builders_do_not_alias(self):
        base = AttrList().add("a", 1)
        left = base.add("b", 2)
        right = base.new_bracket().add("c", 3)
        self.assertEqual(str(base), "[a=1;]")
        self.assertEqual(str(left), "[a=1;b=2;]")
        self.assertEqual(str(right), "[a=1;][c=3;]")

    def test_iteration_yields_groups(self):
        attrs = AttrList().add("a", 1).new_bracket().add("b", 2)
        groups = list(attrs)
        self.assertEqual(len(groups), 2)
        self.assertEqual(groups[1], ((String("b"), Identity.integer(2)),))

    def test_rendering_is_deterministic(self):
        attrs = AttrList().add("a", 1).new_bracket().add("b", Identity.quoted("x"))
        self.assertEqual(str(attrs), str(attrs))
