# This module is automatically generated by scripts/generate.py. DO NOT EDIT.
"""
Typed constructors for Graphviz attributes.

Each constructor returns a (key, value) pair ready for AttrList.add_pair()
or Edge.add_attrpair().
"""

from typing import Callable, Dict, Optional, Union

from dotgraph.attrs import AttrPair
from dotgraph.identity import HSV, RGBA, ArrowName, Bool, Double, Identity, Integer, IntWidth, Quoted, String

from .arrow import ArrowShape
from .color import Color, hsv, rgb, rgba
from .shape import Shape

ColorValue = Union[Color, RGBA, HSV]


def _color(value: ColorValue) -> Identity:
    if isinstance(value, Color):
        return value.to_identity()
    if isinstance(value, (RGBA, HSV)):
        return value
    raise TypeError(f"{value!r} is not a valid color")


def _shape(value: Shape) -> Identity:
    if not isinstance(value, Shape):
        raise TypeError(f"{value!r} is not a valid shape")
    return value.to_identity()


def _arrow_name(*shapes: Optional[ArrowShape]) -> ArrowName:
    for shape in shapes:
        if shape is not None and not isinstance(shape, ArrowShape):
            raise TypeError(f"{shape!r} is not a valid arrow shape")
    return ArrowName(*(None if shape is None else shape.value for shape in shapes))


_KINDS: Dict[str, Callable[..., Identity]] = {
    "quoted": Quoted,
    "double": Double,
    "bool": Bool,
    "i32": lambda value: Integer(value, IntWidth.I32),
    "u8": lambda value: Integer(value, IntWidth.U8),
    "color": _color,
    "shape": _shape,
}


def _attribute(name: str, pyname: str, kind: str) -> Callable[..., AttrPair]:
    convert = _KINDS[kind]
    key = String(name)

    def pair(value) -> AttrPair:
        return key, convert(value)

    pair.__name__ = pair.__qualname__ = pyname
    pair.__doc__ = f"Return the ``{name}`` attribute pair."
    return pair


Damping = _attribute("Damping", "Damping", "double")
K = _attribute("K", "K", "double")
URL = _attribute("URL", "URL", "quoted")
_background = _attribute("_background", "_background", "quoted")
area = _attribute("area", "area", "double")
arrowsize = _attribute("arrowsize", "arrowsize", "double")
center = _attribute("center", "center", "bool")
charset = _attribute("charset", "charset", "quoted")
class_ = _attribute("class", "class_", "quoted")
colorscheme = _attribute("colorscheme", "colorscheme", "quoted")
comment = _attribute("comment", "comment", "quoted")
compound = _attribute("compound", "compound", "bool")
concentrate = _attribute("concentrate", "concentrate", "bool")
constraint = _attribute("constraint", "constraint", "bool")
decorate = _attribute("decorate", "decorate", "bool")
defaultdist = _attribute("defaultdist", "defaultdist", "double")
dim = _attribute("dim", "dim", "u8")
dimen = _attribute("dimen", "dimen", "u8")
diredgeconstraints = _attribute("diredgeconstraints", "diredgeconstraints", "bool")
distortion = _attribute("distortion", "distortion", "double")
dpi = _attribute("dpi", "dpi", "double")
edgeURL = _attribute("edgeURL", "edgeURL", "quoted")
edgehref = _attribute("edgehref", "edgehref", "quoted")
edgetarget = _attribute("edgetarget", "edgetarget", "quoted")
edgetooltip = _attribute("edgetooltip", "edgetooltip", "quoted")
epsilon = _attribute("epsilon", "epsilon", "double")
fontname = _attribute("fontname", "fontname", "quoted")
fontnames = _attribute("fontnames", "fontnames", "quoted")
fontpath = _attribute("fontpath", "fontpath", "quoted")
fontsize = _attribute("fontsize", "fontsize", "double")
forcelabels = _attribute("forcelabels", "forcelabels", "bool")
gradientangle = _attribute("gradientangle", "gradientangle", "i32")
group = _attribute("group", "group", "quoted")
headURL = _attribute("headURL", "headURL", "quoted")
headclip = _attribute("headclip", "headclip", "bool")
headhref = _attribute("headhref", "headhref", "quoted")
headlabel = _attribute("headlabel", "headlabel", "quoted")
headtarget = _attribute("headtarget", "headtarget", "quoted")
headtooltip = _attribute("headtooltip", "headtooltip", "quoted")
height = _attribute("height", "height", "double")
href = _attribute("href", "href", "quoted")
id = _attribute("id", "id", "quoted")
image = _attribute("image", "image", "quoted")
imagepath = _attribute("imagepath", "imagepath", "quoted")
imagepos = _attribute("imagepos", "imagepos", "quoted")
imagescale = _attribute("imagescale", "imagescale", "bool")
inputscale = _attribute("inputscale", "inputscale", "double")
label = _attribute("label", "label", "quoted")
labelURL = _attribute("labelURL", "labelURL", "quoted")
label_scheme = _attribute("label_scheme", "label_scheme", "i32")
labelangle = _attribute("labelangle", "labelangle", "double")
labeldistance = _attribute("labeldistance", "labeldistance", "double")
labelfloat = _attribute("labelfloat", "labelfloat", "bool")
labelfontname = _attribute("labelfontname", "labelfontname", "quoted")
labelfontsize = _attribute("labelfontsize", "labelfontsize", "double")
labelhref = _attribute("labelhref", "labelhref", "quoted")
labeljust = _attribute("labeljust", "labeljust", "quoted")
labelloc = _attribute("labelloc", "labelloc", "quoted")
labeltarget = _attribute("labeltarget", "labeltarget", "quoted")
labeltooltip = _attribute("labeltooltip", "labeltooltip", "quoted")
landscape = _attribute("landscape", "landscape", "bool")
layerlistsep = _attribute("layerlistsep", "layerlistsep", "quoted")
layersep = _attribute("layersep", "layersep", "quoted")
layout = _attribute("layout", "layout", "quoted")
len = _attribute("len", "len", "double")
levels = _attribute("levels", "levels", "i32")
levelsgap = _attribute("levelsgap", "levelsgap", "double")
lhead = _attribute("lhead", "lhead", "quoted")
lheight = _attribute("lheight", "lheight", "double")
ltail = _attribute("ltail", "ltail", "quoted")
lwidth = _attribute("lwidth", "lwidth", "double")
margin = _attribute("margin", "margin", "double")
maxiter = _attribute("maxiter", "maxiter", "i32")
mclimit = _attribute("mclimit", "mclimit", "double")
mindist = _attribute("mindist", "mindist", "double")
minlen = _attribute("minlen", "minlen", "i32")
mode = _attribute("mode", "mode", "quoted")
model = _attribute("model", "model", "quoted")
mosek = _attribute("mosek", "mosek", "bool")
newrank = _attribute("newrank", "newrank", "bool")
nodesep = _attribute("nodesep", "nodesep", "double")
nojustify = _attribute("nojustify", "nojustify", "bool")
normalize = _attribute("normalize", "normalize", "double")
notranslate = _attribute("notranslate", "notranslate", "bool")
nslimit = _attribute("nslimit", "nslimit", "double")
nslimit1 = _attribute("nslimit1", "nslimit1", "double")
ordering = _attribute("ordering", "ordering", "quoted")
orientation = _attribute("orientation", "orientation", "double")
overlap_scaling = _attribute("overlap_scaling", "overlap_scaling", "double")
overlap_shrink = _attribute("overlap_shrink", "overlap_shrink", "bool")
pad = _attribute("pad", "pad", "double")
page = _attribute("page", "page", "double")
penwidth = _attribute("penwidth", "penwidth", "double")
peripheries = _attribute("peripheries", "peripheries", "i32")
pin = _attribute("pin", "pin", "bool")
quantum = _attribute("quantum", "quantum", "double")
ranksep = _attribute("ranksep", "ranksep", "double")
ratio = _attribute("ratio", "ratio", "double")
regular = _attribute("regular", "regular", "bool")
remincross = _attribute("remincross", "remincross", "bool")
repulsiveforce = _attribute("repulsiveforce", "repulsiveforce", "double")
resolution = _attribute("resolution", "resolution", "double")
root = _attribute("root", "root", "quoted")
rotate = _attribute("rotate", "rotate", "i32")
rotation = _attribute("rotation", "rotation", "double")
samehead = _attribute("samehead", "samehead", "quoted")
sametail = _attribute("sametail", "sametail", "quoted")
samplepoints = _attribute("samplepoints", "samplepoints", "i32")
scale = _attribute("scale", "scale", "double")
searchsize = _attribute("searchsize", "searchsize", "i32")
shapefile = _attribute("shapefile", "shapefile", "quoted")
showboxes = _attribute("showboxes", "showboxes", "i32")
sides = _attribute("sides", "sides", "i32")
size = _attribute("size", "size", "double")
skew = _attribute("skew", "skew", "double")
sortv = _attribute("sortv", "sortv", "i32")
stylesheet = _attribute("stylesheet", "stylesheet", "quoted")
tailURL = _attribute("tailURL", "tailURL", "quoted")
tailclip = _attribute("tailclip", "tailclip", "bool")
tailhref = _attribute("tailhref", "tailhref", "quoted")
taillabel = _attribute("taillabel", "taillabel", "quoted")
tailtarget = _attribute("tailtarget", "tailtarget", "quoted")
tailtooltip = _attribute("tailtooltip", "tailtooltip", "quoted")
target = _attribute("target", "target", "quoted")
tooltip = _attribute("tooltip", "tooltip", "quoted")
truecolor = _attribute("truecolor", "truecolor", "bool")
voro_margin = _attribute("voro_margin", "voro_margin", "double")
weight = _attribute("weight", "weight", "double")
width = _attribute("width", "width", "double")
xdotversion = _attribute("xdotversion", "xdotversion", "quoted")
xlabel = _attribute("xlabel", "xlabel", "quoted")
z = _attribute("z", "z", "double")
bgcolor = _attribute("bgcolor", "bgcolor", "color")
color = _attribute("color", "color", "color")
fillcolor = _attribute("fillcolor", "fillcolor", "color")
labelfontcolor = _attribute("labelfontcolor", "labelfontcolor", "color")
pencolor = _attribute("pencolor", "pencolor", "color")
shape = _attribute("shape", "shape", "shape")
fontcolor = _attribute("fontcolor", "fontcolor", "color")
style = _attribute("style", "style", "quoted")


def arrowhead(
    first: ArrowShape,
    second: Optional[ArrowShape] = None,
    third: Optional[ArrowShape] = None,
    fourth: Optional[ArrowShape] = None,
) -> AttrPair:
    """Return the ``arrowhead`` pair. Up to four shapes are combined into one arrow."""
    return String("arrowhead"), _arrow_name(first, second, third, fourth)


def arrowtail(
    first: ArrowShape,
    second: Optional[ArrowShape] = None,
    third: Optional[ArrowShape] = None,
    fourth: Optional[ArrowShape] = None,
) -> AttrPair:
    """Return the ``arrowtail`` pair. Up to four shapes are combined into one arrow."""
    return String("arrowtail"), _arrow_name(first, second, third, fourth)
