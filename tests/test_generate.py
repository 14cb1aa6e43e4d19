import importlib.util
import os
import unittest

import config as cfg

has_jinja2 = importlib.util.find_spec("jinja2") is not None


@unittest.skipUnless(has_jinja2, "jinja2 is required to regenerate the catalog")
class GenerateTest(unittest.TestCase):
    def _committed(self, mod):
        from scripts import catalog_dir

        with open(os.path.join(catalog_dir(), f"{mod}.py"), encoding="utf-8") as f:
            return f.read()

    def test_enums_are_up_to_date(self):
        from scripts.generate import gen_enum

        for mod in cfg.ENUMS:
            self.assertEqual(gen_enum(mod), self._committed(mod), mod)

    def test_attributes_are_up_to_date(self):
        from scripts.generate import gen_attributes

        self.assertEqual(gen_attributes(), self._committed("__init__"))

    def test_reserved_names(self):
        from scripts.generate import py_name

        self.assertEqual(py_name("class"), "class_")
        self.assertEqual(py_name("label"), "label")

    def test_member_name(self):
        from scripts.generate import member_name

        self.assertEqual(member_name("Mdiamond"), "MDIAMOND")
        self.assertEqual(member_name("lnormal"), "LNORMAL")
