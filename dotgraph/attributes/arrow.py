# This module is automatically generated by scripts/generate.py. DO NOT EDIT.
"""
Arrow head and tail shapes. Up to four can be combined into one arrow.
"""

import enum

from dotgraph.identity import String


class ArrowShape(enum.Enum):
    OLBOX = "olbox"
    OLCROW = "olcrow"
    OLCURVE = "olcurve"
    OLICURVE = "olicurve"
    OLDIAMOND = "oldiamond"
    OLDOT = "oldot"
    OLINV = "olinv"
    OLNONE = "olnone"
    OLNORMAL = "olnormal"
    OLTEE = "oltee"
    OLVEE = "olvee"
    ORBOX = "orbox"
    ORCROW = "orcrow"
    ORCURVE = "orcurve"
    ORICURVE = "oricurve"
    ORDIAMOND = "ordiamond"
    ORDOT = "ordot"
    ORINV = "orinv"
    ORNONE = "ornone"
    ORNORMAL = "ornormal"
    ORTEE = "ortee"
    ORVEE = "orvee"
    LBOX = "lbox"
    LCROW = "lcrow"
    LCURVE = "lcurve"
    LICURVE = "licurve"
    LDIAMOND = "ldiamond"
    LDOT = "ldot"
    LINV = "linv"
    LNONE = "lnone"
    LNORMAL = "lnormal"
    LTEE = "ltee"
    LVEE = "lvee"
    RBOX = "rbox"
    RCROW = "rcrow"
    RCURVE = "rcurve"
    RICURVE = "ricurve"
    RDIAMOND = "rdiamond"
    RDOT = "rdot"
    RINV = "rinv"
    RNONE = "rnone"
    RNORMAL = "rnormal"
    RTEE = "rtee"
    RVEE = "rvee"
    BOX = "box"
    CROW = "crow"
    CURVE = "curve"
    ICURVE = "icurve"
    DIAMOND = "diamond"
    DOT = "dot"
    INV = "inv"
    NONE = "none"
    NORMAL = "normal"
    TEE = "tee"
    VEE = "vee"

    def __str__(self) -> str:
        return self.value

    def to_identity(self) -> String:
        return String(self.value)
