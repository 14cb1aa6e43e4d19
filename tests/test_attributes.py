import unittest

from dotgraph import RGBA, AttrList, Edge, HSV, Integer, IntWidth, Quoted, String
from dotgraph import attributes
from dotgraph.attributes import ArrowShape, Color, Shape, arrowhead, arrowtail, hsv, rgb, rgba


class AttributeTest(unittest.TestCase):
    def test_keys(self):
        key, _ = attributes.label("x")
        self.assertEqual(key, String("label"))
        key, _ = attributes.class_("x")
        self.assertEqual(key, String("class"))
        self.assertEqual(attributes.class_.__name__, "class_")

    def test_value_kinds(self):
        self.assertEqual(attributes.label("hello")[1], Quoted("hello"))
        self.assertEqual(str(attributes.width(1.5)[1]), "1.5")
        self.assertEqual(str(attributes.fontsize(12)[1]), "12")
        self.assertEqual(str(attributes.center(True)[1]), "true")
        self.assertEqual(attributes.label_scheme(2)[1], Integer(2, IntWidth.I32))

    def test_integer_width_is_checked(self):
        with self.assertRaises(ValueError):
            attributes.label_scheme(2**31)

    def test_colors(self):
        self.assertEqual(str(attributes.color(Color.RED)[1]), "red")
        self.assertEqual(str(attributes.fillcolor(rgb(255, 0, 16))[1]), "#ff0010ff")
        self.assertEqual(str(attributes.bgcolor(rgba(0, 0, 0, 128))[1]), "#00000080")
        self.assertEqual(str(attributes.fontcolor(hsv(0.5, 1, 1))[1]), "0.5,+1,+1")
        self.assertIsInstance(rgb(1, 2, 3), RGBA)
        self.assertIsInstance(hsv(0, 0, 0), HSV)

    def test_color_rejects_raw_strings(self):
        with self.assertRaises(TypeError):
            attributes.color("red")

    def test_shape(self):
        self.assertEqual(str(attributes.shape(Shape.BOX)[1]), "box")
        self.assertEqual(str(attributes.shape(Shape.MDIAMOND)[1]), "Mdiamond")
        with self.assertRaises(TypeError):
            attributes.shape("box")

    def test_arrows(self):
        key, value = arrowhead(ArrowShape.LNORMAL, ArrowShape.DOT)
        self.assertEqual(key, String("arrowhead"))
        self.assertEqual(str(value), "lnormaldot")
        self.assertEqual(str(arrowtail(ArrowShape.NORMAL)[1]), "normal")
        with self.assertRaises(TypeError):
            arrowhead("normal")

    def test_catalog_sizes(self):
        self.assertEqual(len(Color), 668)
        self.assertEqual(len(Shape), 59)
        self.assertEqual(len(ArrowShape), 55)

    def test_with_attr_list_and_edge(self):
        attrs = AttrList().add_pair(attributes.shape(Shape.CIRCLE)).add_pair(attributes.color(Color.BLUE))
        self.assertEqual(str(attrs), "[shape=circle;color=blue;]")
        edge = (
            Edge.head_node("a")
            .arrow_to_node("b")
            .add_attrpair(arrowhead(ArrowShape.VEE))
            .add_attrpair(attributes.style("dashed"))
        )
        self.assertEqual(str(edge), 'a->b[arrowhead=vee;style="dashed";]')
