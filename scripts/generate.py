"""
generate.py renders the attribute catalog modules from the tables in config.py.

Run it from the repository root: python -m scripts.generate
"""
import os
import sys
from typing import List

from jinja2 import Environment, FileSystemLoader, Template

import config as cfg
from . import catalog_dir, template_dir

_usage = "Usage: generate.py"

_docs = {
    "shape": "Node shapes.",
    "arrow": "Arrow head and tail shapes. Up to four can be combined into one arrow.",
    "color": "Named colors, plus constructors for RGB(A) and HSV colors.",
}


def load_tmpl(tmpl: str) -> Template:
    env = Environment(
        loader=FileSystemLoader(template_dir()),
        trim_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["member_name"] = member_name
    return env.get_template(tmpl)


def member_name(value: str) -> str:
    return value.upper()


def py_name(attr: str) -> str:
    return cfg.RESERVED_NAMES.get(attr, attr)


def gen_enum(mod: str) -> str:
    """Generate an enum module for a catalog table."""
    tmpl = load_tmpl(cfg.TMPL_ENUM)
    name, table = cfg.ENUMS[mod]
    values: List[str] = list(getattr(cfg, table))
    return tmpl.render(name=name, values=values, doc=_docs[mod])


def gen_attributes() -> str:
    """Generate the attribute pair constructors."""
    tmpl = load_tmpl(cfg.TMPL_ATTRIBUTES)
    attributes = [{"name": name, "pyname": py_name(name), "kind": kind} for name, kind in cfg.ATTRIBUTES]
    return tmpl.render(attributes=attributes)


def make_module(mod: str, content: str) -> None:
    """Create a module file"""
    mod_path = os.path.join(catalog_dir(), f"{mod}.py")
    with open(mod_path, "w+") as f:
        f.write(content)


def generate() -> None:
    """Generates the catalog modules."""
    os.makedirs(catalog_dir(), exist_ok=True)
    for mod in cfg.ENUMS:
        make_module(mod, gen_enum(mod))
    make_module("__init__", gen_attributes())


if __name__ == "__main__":
    if len(sys.argv) > 1:
        print(_usage)
        sys.exit(1)
    generate()
