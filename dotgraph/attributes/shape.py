# This module is automatically generated by scripts/generate.py. DO NOT EDIT.
"""
Node shapes.
"""

import enum

from dotgraph.identity import String


class Shape(enum.Enum):
    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAINTEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLECIRCLE = "doublecircle"
    DOUBLEOCTAGON = "doubleoctagon"
    TRIPLEOCTAGON = "tripleoctagon"
    INVTRIANGLE = "invtriangle"
    INVTRAPEZIUM = "invtrapezium"
    INVHOUSE = "invhouse"
    MDIAMOND = "Mdiamond"
    MSQUARE = "Msquare"
    MCIRCLE = "Mcircle"
    RECT = "rect"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX3D = "box3d"
    COMPONENT = "component"
    PROMOTER = "promoter"
    CDS = "cds"
    TERMINATOR = "terminator"
    UTR = "utr"
    PRIMERSITE = "primersite"
    RESTRICTIONSITE = "restrictionsite"
    FIVEPOVERHANG = "fivepoverhang"
    THREEPOVERHANG = "threepoverhang"
    NOVERHANG = "noverhang"
    ASSEMBLY = "assembly"
    SIGNATURE = "signature"
    INSULATOR = "insulator"
    RIBOSITE = "ribosite"
    RNASTAB = "rnastab"
    PROTEASESITE = "proteasesite"
    PROTEINSTAB = "proteinstab"
    RPROMOTER = "rpromoter"
    RARROW = "rarrow"
    LARROW = "larrow"
    LPROMOTER = "lpromoter"

    def __str__(self) -> str:
        return self.value

    def to_identity(self) -> String:
        return String(self.value)
