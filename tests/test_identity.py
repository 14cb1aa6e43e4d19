import math
import unittest

from dotgraph import (
    HSV,
    RGBA,
    ArrowName,
    Bool,
    Double,
    Float,
    Identity,
    Integer,
    IntWidth,
    InvalidIdentifier,
    Quoted,
    String,
    is_valid_bare_identifier,
    to_identity,
)


class IdentifierTest(unittest.TestCase):
    def test_valid_identifiers(self):
        for text in ("foo_1", "_", "A", "node", "café", "ÿ_9"):
            self.assertTrue(is_valid_bare_identifier(text), text)
            self.assertEqual(str(Identity.id(text)), text)

    def test_invalid_identifiers(self):
        for text in ("1foo", "foo bar", "", "a-b", "a.b", "ā", '"x"'):
            self.assertFalse(is_valid_bare_identifier(text), text)
            with self.assertRaises(InvalidIdentifier) as ctx:
                Identity.id(text)
            self.assertEqual(ctx.exception.text, text)

    def test_invalid_identifier_is_value_error(self):
        with self.assertRaises(ValueError):
            Identity.id("foo bar")

    def test_quoted_always_succeeds(self):
        self.assertEqual(str(Identity.quoted("foo bar")), '"foo bar"')
        self.assertEqual(str(Identity.quoted("1foo")), '"1foo"')
        self.assertEqual(str(Identity.quoted("")), '""')

    def test_quoted_escaping(self):
        self.assertEqual(str(Quoted('say "hi"')), '"say \\"hi\\""')
        self.assertEqual(str(Quoted("a\\b")), '"a\\\\b"')
        self.assertEqual(str(Quoted("a\nb\tc\rd")), '"a\\nb\\tc\\rd"')
        self.assertEqual(str(Quoted("café")), '"café"')

    def test_quoted_escapes_nul(self):
        self.assertEqual(str(Quoted("a\0b")), '"a\\0b"')

    def test_other_control_characters_are_verbatim(self):
        self.assertEqual(str(Quoted("a\x01b\x7fc")), '"a\x01b\x7fc"')

    def test_base_class_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            Identity()


class ScalarTest(unittest.TestCase):
    def test_bool(self):
        self.assertEqual(str(Identity.boolean(True)), "true")
        self.assertEqual(str(Bool(False)), "false")

    def test_integer_widths(self):
        self.assertEqual(str(Identity.integer(-12)), "-12")
        self.assertEqual(str(Integer(255, IntWidth.U8)), "255")
        self.assertEqual(str(Integer(-128, IntWidth.I8)), "-128")
        self.assertEqual(str(Integer(2**128 - 1, IntWidth.U128)), str(2**128 - 1))
        self.assertEqual(IntWidth.ISIZE.bounds, IntWidth.I64.bounds)
        self.assertNotEqual(Integer(1, IntWidth.I8), Integer(1, IntWidth.U8))

    def test_integer_out_of_range(self):
        for value, width in ((256, IntWidth.U8), (-1, IntWidth.U8), (128, IntWidth.I8), (-(2**63) - 1, IntWidth.I64)):
            with self.assertRaises(ValueError):
                Integer(value, width)

    def test_integer_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            Integer(True)
        with self.assertRaises(TypeError):
            Integer(1.5)

    def test_double(self):
        self.assertEqual(str(Identity.double(0.5)), "0.5")
        self.assertEqual(str(Double(1.0)), "1")
        self.assertEqual(str(Double(-2.25)), "-2.25")
        self.assertEqual(str(Double(0.1)), "0.1")
        self.assertEqual(str(Double(12)), "12")

    def test_double_never_uses_exponent(self):
        self.assertEqual(str(Double(1e20)), "100000000000000000000")
        self.assertEqual(str(Double(1e-7)), "0.0000001")
        self.assertEqual(str(Double(1.5e-10)), "0.00000000015")

    def test_double_special_values(self):
        self.assertEqual(str(Double(math.nan)), "NaN")
        self.assertEqual(str(Double(math.inf)), "inf")
        self.assertEqual(str(Double(-math.inf)), "-inf")

    def test_single_precision(self):
        self.assertEqual(str(Identity.single(0.1)), "0.1")
        self.assertEqual(str(Float(1 / 3)), "0.33333334")
        self.assertEqual(str(Float(2.0)), "2")
        self.assertEqual(str(Float(16777217.0)), "16777216")
        self.assertEqual(str(Float(1e39)), "inf")


class CompositeTest(unittest.TestCase):
    def test_rgba_is_zero_padded_lower_hex(self):
        self.assertEqual(str(RGBA(255, 0, 16, 255)), "#ff0010ff")
        self.assertEqual(str(RGBA(1, 2, 3, 4)), "#01020304")
        self.assertEqual(str(RGBA(0xAB, 0xCD, 0xEF)), "#abcdefff")

    def test_rgba_rejects_bad_channel(self):
        with self.assertRaises(ValueError):
            RGBA(256, 0, 0, 0)
        with self.assertRaises(ValueError):
            RGBA(0, -1, 0, 0)

    def test_hsv(self):
        self.assertEqual(str(HSV(0.5, 1, 1)), "0.5,+1,+1")
        self.assertEqual(str(HSV(0.1, 0.25, 0.75)), "0.1,+0.25,+0.75")

    def test_arrow_name(self):
        self.assertEqual(str(ArrowName("normal")), "normal")
        self.assertEqual(str(ArrowName("lnormal", None, "dot")), "lnormaldot")
        self.assertEqual(str(ArrowName("o", "l", "box", "vee")), "olboxvee")
        self.assertEqual(str(ArrowName()), "")


class CoercionTest(unittest.TestCase):
    def test_strings(self):
        self.assertEqual(to_identity("foo"), String("foo"))
        self.assertEqual(to_identity("foo bar"), Quoted("foo bar"))
        self.assertEqual(to_identity("1foo"), Quoted("1foo"))

    def test_numbers(self):
        self.assertEqual(to_identity(True), Bool(True))
        self.assertEqual(to_identity(5), Integer(5, IntWidth.I64))
        self.assertEqual(to_identity(2**70), Integer(2**70, IntWidth.I128))
        self.assertEqual(to_identity(2**127 + 1), Integer(2**127 + 1, IntWidth.U128))
        self.assertEqual(to_identity(1.5), Double(1.5))

    def test_passthrough_and_errors(self):
        quoted = Quoted("x")
        self.assertIs(to_identity(quoted), quoted)
        with self.assertRaises(ValueError):
            to_identity(2**200)
        with self.assertRaises(TypeError):
            to_identity([1])

    def test_variants_are_distinct(self):
        self.assertEqual(Identity.id("a"), String("a"))
        self.assertNotEqual(String("a"), Quoted("a"))
        self.assertEqual(hash(String("a")), hash(String("a")))
