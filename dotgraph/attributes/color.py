# This module is automatically generated by scripts/generate.py. DO NOT EDIT.
"""
Named colors, plus constructors for RGB(A) and HSV colors.
"""

import enum

from dotgraph.identity import HSV, RGBA, String


class Color(enum.Enum):
    ALICEBLUE = "aliceblue"
    ANTIQUEWHITE = "antiquewhite"
    ANTIQUEWHITE1 = "antiquewhite1"
    ANTIQUEWHITE2 = "antiquewhite2"
    ANTIQUEWHITE3 = "antiquewhite3"
    ANTIQUEWHITE4 = "antiquewhite4"
    AQUA = "aqua"
    AQUAMARINE = "aquamarine"
    AQUAMARINE1 = "aquamarine1"
    AQUAMARINE2 = "aquamarine2"
    AQUAMARINE3 = "aquamarine3"
    AQUAMARINE4 = "aquamarine4"
    AZURE = "azure"
    AZURE1 = "azure1"
    AZURE2 = "azure2"
    AZURE3 = "azure3"
    AZURE4 = "azure4"
    BEIGE = "beige"
    BISQUE = "bisque"
    BISQUE1 = "bisque1"
    BISQUE2 = "bisque2"
    BISQUE3 = "bisque3"
    BISQUE4 = "bisque4"
    BLACK = "black"
    BLANCHEDALMOND = "blanchedalmond"
    BLUE = "blue"
    BLUE1 = "blue1"
    BLUE2 = "blue2"
    BLUE3 = "blue3"
    BLUE4 = "blue4"
    BLUEVIOLET = "blueviolet"
    BROWN = "brown"
    BROWN1 = "brown1"
    BROWN2 = "brown2"
    BROWN3 = "brown3"
    BROWN4 = "brown4"
    BURLYWOOD = "burlywood"
    BURLYWOOD1 = "burlywood1"
    BURLYWOOD2 = "burlywood2"
    BURLYWOOD3 = "burlywood3"
    BURLYWOOD4 = "burlywood4"
    CADETBLUE = "cadetblue"
    CADETBLUE1 = "cadetblue1"
    CADETBLUE2 = "cadetblue2"
    CADETBLUE3 = "cadetblue3"
    CADETBLUE4 = "cadetblue4"
    CHARTREUSE = "chartreuse"
    CHARTREUSE1 = "chartreuse1"
    CHARTREUSE2 = "chartreuse2"
    CHARTREUSE3 = "chartreuse3"
    CHARTREUSE4 = "chartreuse4"
    CHOCOLATE = "chocolate"
    CHOCOLATE1 = "chocolate1"
    CHOCOLATE2 = "chocolate2"
    CHOCOLATE3 = "chocolate3"
    CHOCOLATE4 = "chocolate4"
    CORAL = "coral"
    CORAL1 = "coral1"
    CORAL2 = "coral2"
    CORAL3 = "coral3"
    CORAL4 = "coral4"
    CORNFLOWERBLUE = "cornflowerblue"
    CORNSILK = "cornsilk"
    CORNSILK1 = "cornsilk1"
    CORNSILK2 = "cornsilk2"
    CORNSILK3 = "cornsilk3"
    CORNSILK4 = "cornsilk4"
    CRIMSON = "crimson"
    CYAN = "cyan"
    CYAN1 = "cyan1"
    CYAN2 = "cyan2"
    CYAN3 = "cyan3"
    CYAN4 = "cyan4"
    DARKBLUE = "darkblue"
    DARKCYAN = "darkcyan"
    DARKGOLDENROD = "darkgoldenrod"
    DARKGOLDENROD1 = "darkgoldenrod1"
    DARKGOLDENROD2 = "darkgoldenrod2"
    DARKGOLDENROD3 = "darkgoldenrod3"
    DARKGOLDENROD4 = "darkgoldenrod4"
    DARKGRAY = "darkgray"
    DARKGREEN = "darkgreen"
    DARKGREY = "darkgrey"
    DARKKHAKI = "darkkhaki"
    DARKMAGENTA = "darkmagenta"
    DARKOLIVEGREEN = "darkolivegreen"
    DARKOLIVEGREEN1 = "darkolivegreen1"
    DARKOLIVEGREEN2 = "darkolivegreen2"
    DARKOLIVEGREEN3 = "darkolivegreen3"
    DARKOLIVEGREEN4 = "darkolivegreen4"
    DARKORANGE = "darkorange"
    DARKORANGE1 = "darkorange1"
    DARKORANGE2 = "darkorange2"
    DARKORANGE3 = "darkorange3"
    DARKORANGE4 = "darkorange4"
    DARKORCHID = "darkorchid"
    DARKORCHID1 = "darkorchid1"
    DARKORCHID2 = "darkorchid2"
    DARKORCHID3 = "darkorchid3"
    DARKORCHID4 = "darkorchid4"
    DARKRED = "darkred"
    DARKSALMON = "darksalmon"
    DARKSEAGREEN = "darkseagreen"
    DARKSEAGREEN1 = "darkseagreen1"
    DARKSEAGREEN2 = "darkseagreen2"
    DARKSEAGREEN3 = "darkseagreen3"
    DARKSEAGREEN4 = "darkseagreen4"
    DARKSLATEBLUE = "darkslateblue"
    DARKSLATEGRAY = "darkslategray"
    DARKSLATEGRAY1 = "darkslategray1"
    DARKSLATEGRAY2 = "darkslategray2"
    DARKSLATEGRAY3 = "darkslategray3"
    DARKSLATEGRAY4 = "darkslategray4"
    DARKSLATEGREY = "darkslategrey"
    DARKTURQUOISE = "darkturquoise"
    DARKVIOLET = "darkviolet"
    DEEPPINK = "deeppink"
    DEEPPINK1 = "deeppink1"
    DEEPPINK2 = "deeppink2"
    DEEPPINK3 = "deeppink3"
    DEEPPINK4 = "deeppink4"
    DEEPSKYBLUE = "deepskyblue"
    DEEPSKYBLUE1 = "deepskyblue1"
    DEEPSKYBLUE2 = "deepskyblue2"
    DEEPSKYBLUE3 = "deepskyblue3"
    DEEPSKYBLUE4 = "deepskyblue4"
    DIMGRAY = "dimgray"
    DIMGREY = "dimgrey"
    DODGERBLUE = "dodgerblue"
    DODGERBLUE1 = "dodgerblue1"
    DODGERBLUE2 = "dodgerblue2"
    DODGERBLUE3 = "dodgerblue3"
    DODGERBLUE4 = "dodgerblue4"
    FIREBRICK = "firebrick"
    FIREBRICK1 = "firebrick1"
    FIREBRICK2 = "firebrick2"
    FIREBRICK3 = "firebrick3"
    FIREBRICK4 = "firebrick4"
    FLORALWHITE = "floralwhite"
    FORESTGREEN = "forestgreen"
    FUCHSIA = "fuchsia"
    GAINSBORO = "gainsboro"
    GHOSTWHITE = "ghostwhite"
    GOLD = "gold"
    GOLD1 = "gold1"
    GOLD2 = "gold2"
    GOLD3 = "gold3"
    GOLD4 = "gold4"
    GOLDENROD = "goldenrod"
    GOLDENROD1 = "goldenrod1"
    GOLDENROD2 = "goldenrod2"
    GOLDENROD3 = "goldenrod3"
    GOLDENROD4 = "goldenrod4"
    GRAY = "gray"
    GRAY0 = "gray0"
    GRAY1 = "gray1"
    GRAY10 = "gray10"
    GRAY100 = "gray100"
    GRAY11 = "gray11"
    GRAY12 = "gray12"
    GRAY13 = "gray13"
    GRAY14 = "gray14"
    GRAY15 = "gray15"
    GRAY16 = "gray16"
    GRAY17 = "gray17"
    GRAY18 = "gray18"
    GRAY19 = "gray19"
    GRAY2 = "gray2"
    GRAY20 = "gray20"
    GRAY21 = "gray21"
    GRAY22 = "gray22"
    GRAY23 = "gray23"
    GRAY24 = "gray24"
    GRAY25 = "gray25"
    GRAY26 = "gray26"
    GRAY27 = "gray27"
    GRAY28 = "gray28"
    GRAY29 = "gray29"
    GRAY3 = "gray3"
    GRAY30 = "gray30"
    GRAY31 = "gray31"
    GRAY32 = "gray32"
    GRAY33 = "gray33"
    GRAY34 = "gray34"
    GRAY35 = "gray35"
    GRAY36 = "gray36"
    GRAY37 = "gray37"
    GRAY38 = "gray38"
    GRAY39 = "gray39"
    GRAY4 = "gray4"
    GRAY40 = "gray40"
    GRAY41 = "gray41"
    GRAY42 = "gray42"
    GRAY43 = "gray43"
    GRAY44 = "gray44"
    GRAY45 = "gray45"
    GRAY46 = "gray46"
    GRAY47 = "gray47"
    GRAY48 = "gray48"
    GRAY49 = "gray49"
    GRAY5 = "gray5"
    GRAY50 = "gray50"
    GRAY51 = "gray51"
    GRAY52 = "gray52"
    GRAY53 = "gray53"
    GRAY54 = "gray54"
    GRAY55 = "gray55"
    GRAY56 = "gray56"
    GRAY57 = "gray57"
    GRAY58 = "gray58"
    GRAY59 = "gray59"
    GRAY6 = "gray6"
    GRAY60 = "gray60"
    GRAY61 = "gray61"
    GRAY62 = "gray62"
    GRAY63 = "gray63"
    GRAY64 = "gray64"
    GRAY65 = "gray65"
    GRAY66 = "gray66"
    GRAY67 = "gray67"
    GRAY68 = "gray68"
    GRAY69 = "gray69"
    GRAY7 = "gray7"
    GRAY70 = "gray70"
    GRAY71 = "gray71"
    GRAY72 = "gray72"
    GRAY73 = "gray73"
    GRAY74 = "gray74"
    GRAY75 = "gray75"
    GRAY76 = "gray76"
    GRAY77 = "gray77"
    GRAY78 = "gray78"
    GRAY79 = "gray79"
    GRAY8 = "gray8"
    GRAY80 = "gray80"
    GRAY81 = "gray81"
    GRAY82 = "gray82"
    GRAY83 = "gray83"
    GRAY84 = "gray84"
    GRAY85 = "gray85"
    GRAY86 = "gray86"
    GRAY87 = "gray87"
    GRAY88 = "gray88"
    GRAY89 = "gray89"
    GRAY9 = "gray9"
    GRAY90 = "gray90"
    GRAY91 = "gray91"
    GRAY92 = "gray92"
    GRAY93 = "gray93"
    GRAY94 = "gray94"
    GRAY95 = "gray95"
    GRAY96 = "gray96"
    GRAY97 = "gray97"
    GRAY98 = "gray98"
    GRAY99 = "gray99"
    GREEN = "green"
    GREEN1 = "green1"
    GREEN2 = "green2"
    GREEN3 = "green3"
    GREEN4 = "green4"
    GREENYELLOW = "greenyellow"
    GREY = "grey"
    GREY0 = "grey0"
    GREY1 = "grey1"
    GREY10 = "grey10"
    GREY100 = "grey100"
    GREY11 = "grey11"
    GREY12 = "grey12"
    GREY13 = "grey13"
    GREY14 = "grey14"
    GREY15 = "grey15"
    GREY16 = "grey16"
    GREY17 = "grey17"
    GREY18 = "grey18"
    GREY19 = "grey19"
    GREY2 = "grey2"
    GREY20 = "grey20"
    GREY21 = "grey21"
    GREY22 = "grey22"
    GREY23 = "grey23"
    GREY24 = "grey24"
    GREY25 = "grey25"
    GREY26 = "grey26"
    GREY27 = "grey27"
    GREY28 = "grey28"
    GREY29 = "grey29"
    GREY3 = "grey3"
    GREY30 = "grey30"
    GREY31 = "grey31"
    GREY32 = "grey32"
    GREY33 = "grey33"
    GREY34 = "grey34"
    GREY35 = "grey35"
    GREY36 = "grey36"
    GREY37 = "grey37"
    GREY38 = "grey38"
    GREY39 = "grey39"
    GREY4 = "grey4"
    GREY40 = "grey40"
    GREY41 = "grey41"
    GREY42 = "grey42"
    GREY43 = "grey43"
    GREY44 = "grey44"
    GREY45 = "grey45"
    GREY46 = "grey46"
    GREY47 = "grey47"
    GREY48 = "grey48"
    GREY49 = "grey49"
    GREY5 = "grey5"
    GREY50 = "grey50"
    GREY51 = "grey51"
    GREY52 = "grey52"
    GREY53 = "grey53"
    GREY54 = "grey54"
    GREY55 = "grey55"
    GREY56 = "grey56"
    GREY57 = "grey57"
    GREY58 = "grey58"
    GREY59 = "grey59"
    GREY6 = "grey6"
    GREY60 = "grey60"
    GREY61 = "grey61"
    GREY62 = "grey62"
    GREY63 = "grey63"
    GREY64 = "grey64"
    GREY65 = "grey65"
    GREY66 = "grey66"
    GREY67 = "grey67"
    GREY68 = "grey68"
    GREY69 = "grey69"
    GREY7 = "grey7"
    GREY70 = "grey70"
    GREY71 = "grey71"
    GREY72 = "grey72"
    GREY73 = "grey73"
    GREY74 = "grey74"
    GREY75 = "grey75"
    GREY76 = "grey76"
    GREY77 = "grey77"
    GREY78 = "grey78"
    GREY79 = "grey79"
    GREY8 = "grey8"
    GREY80 = "grey80"
    GREY81 = "grey81"
    GREY82 = "grey82"
    GREY83 = "grey83"
    GREY84 = "grey84"
    GREY85 = "grey85"
    GREY86 = "grey86"
    GREY87 = "grey87"
    GREY88 = "grey88"
    GREY89 = "grey89"
    GREY9 = "grey9"
    GREY90 = "grey90"
    GREY91 = "grey91"
    GREY92 = "grey92"
    GREY93 = "grey93"
    GREY94 = "grey94"
    GREY95 = "grey95"
    GREY96 = "grey96"
    GREY97 = "grey97"
    GREY98 = "grey98"
    GREY99 = "grey99"
    HONEYDEW = "honeydew"
    HONEYDEW1 = "honeydew1"
    HONEYDEW2 = "honeydew2"
    HONEYDEW3 = "honeydew3"
    HONEYDEW4 = "honeydew4"
    HOTPINK = "hotpink"
    HOTPINK1 = "hotpink1"
    HOTPINK2 = "hotpink2"
    HOTPINK3 = "hotpink3"
    HOTPINK4 = "hotpink4"
    INDIANRED = "indianred"
    INDIANRED1 = "indianred1"
    INDIANRED2 = "indianred2"
    INDIANRED3 = "indianred3"
    INDIANRED4 = "indianred4"
    INDIGO = "indigo"
    INVIS = "invis"
    IVORY = "ivory"
    IVORY1 = "ivory1"
    IVORY2 = "ivory2"
    IVORY3 = "ivory3"
    IVORY4 = "ivory4"
    KHAKI = "khaki"
    KHAKI1 = "khaki1"
    KHAKI2 = "khaki2"
    KHAKI3 = "khaki3"
    KHAKI4 = "khaki4"
    LAVENDER = "lavender"
    LAVENDERBLUSH = "lavenderblush"
    LAVENDERBLUSH1 = "lavenderblush1"
    LAVENDERBLUSH2 = "lavenderblush2"
    LAVENDERBLUSH3 = "lavenderblush3"
    LAVENDERBLUSH4 = "lavenderblush4"
    LAWNGREEN = "lawngreen"
    LEMONCHIFFON = "lemonchiffon"
    LEMONCHIFFON1 = "lemonchiffon1"
    LEMONCHIFFON2 = "lemonchiffon2"
    LEMONCHIFFON3 = "lemonchiffon3"
    LEMONCHIFFON4 = "lemonchiffon4"
    LIGHTBLUE = "lightblue"
    LIGHTBLUE1 = "lightblue1"
    LIGHTBLUE2 = "lightblue2"
    LIGHTBLUE3 = "lightblue3"
    LIGHTBLUE4 = "lightblue4"
    LIGHTCORAL = "lightcoral"
    LIGHTCYAN = "lightcyan"
    LIGHTCYAN1 = "lightcyan1"
    LIGHTCYAN2 = "lightcyan2"
    LIGHTCYAN3 = "lightcyan3"
    LIGHTCYAN4 = "lightcyan4"
    LIGHTGOLDENROD = "lightgoldenrod"
    LIGHTGOLDENROD1 = "lightgoldenrod1"
    LIGHTGOLDENROD2 = "lightgoldenrod2"
    LIGHTGOLDENROD3 = "lightgoldenrod3"
    LIGHTGOLDENROD4 = "lightgoldenrod4"
    LIGHTGOLDENRODYELLOW = "lightgoldenrodyellow"
    LIGHTGRAY = "lightgray"
    LIGHTGREEN = "lightgreen"
    LIGHTGREY = "lightgrey"
    LIGHTPINK = "lightpink"
    LIGHTPINK1 = "lightpink1"
    LIGHTPINK2 = "lightpink2"
    LIGHTPINK3 = "lightpink3"
    LIGHTPINK4 = "lightpink4"
    LIGHTSALMON = "lightsalmon"
    LIGHTSALMON1 = "lightsalmon1"
    LIGHTSALMON2 = "lightsalmon2"
    LIGHTSALMON3 = "lightsalmon3"
    LIGHTSALMON4 = "lightsalmon4"
    LIGHTSEAGREEN = "lightseagreen"
    LIGHTSKYBLUE = "lightskyblue"
    LIGHTSKYBLUE1 = "lightskyblue1"
    LIGHTSKYBLUE2 = "lightskyblue2"
    LIGHTSKYBLUE3 = "lightskyblue3"
    LIGHTSKYBLUE4 = "lightskyblue4"
    LIGHTSLATEBLUE = "lightslateblue"
    LIGHTSLATEGRAY = "lightslategray"
    LIGHTSLATEGREY = "lightslategrey"
    LIGHTSTEELBLUE = "lightsteelblue"
    LIGHTSTEELBLUE1 = "lightsteelblue1"
    LIGHTSTEELBLUE2 = "lightsteelblue2"
    LIGHTSTEELBLUE3 = "lightsteelblue3"
    LIGHTSTEELBLUE4 = "lightsteelblue4"
    LIGHTYELLOW = "lightyellow"
    LIGHTYELLOW1 = "lightyellow1"
    LIGHTYELLOW2 = "lightyellow2"
    LIGHTYELLOW3 = "lightyellow3"
    LIGHTYELLOW4 = "lightyellow4"
    LIME = "lime"
    LIMEGREEN = "limegreen"
    LINEN = "linen"
    MAGENTA = "magenta"
    MAGENTA1 = "magenta1"
    MAGENTA2 = "magenta2"
    MAGENTA3 = "magenta3"
    MAGENTA4 = "magenta4"
    MAROON = "maroon"
    MAROON1 = "maroon1"
    MAROON2 = "maroon2"
    MAROON3 = "maroon3"
    MAROON4 = "maroon4"
    MEDIUMAQUAMARINE = "mediumaquamarine"
    MEDIUMBLUE = "mediumblue"
    MEDIUMORCHID = "mediumorchid"
    MEDIUMORCHID1 = "mediumorchid1"
    MEDIUMORCHID2 = "mediumorchid2"
    MEDIUMORCHID3 = "mediumorchid3"
    MEDIUMORCHID4 = "mediumorchid4"
    MEDIUMPURPLE = "mediumpurple"
    MEDIUMPURPLE1 = "mediumpurple1"
    MEDIUMPURPLE2 = "mediumpurple2"
    MEDIUMPURPLE3 = "mediumpurple3"
    MEDIUMPURPLE4 = "mediumpurple4"
    MEDIUMSEAGREEN = "mediumseagreen"
    MEDIUMSLATEBLUE = "mediumslateblue"
    MEDIUMSPRINGGREEN = "mediumspringgreen"
    MEDIUMTURQUOISE = "mediumturquoise"
    MEDIUMVIOLETRED = "mediumvioletred"
    MIDNIGHTBLUE = "midnightblue"
    MINTCREAM = "mintcream"
    MISTYROSE = "mistyrose"
    MISTYROSE1 = "mistyrose1"
    MISTYROSE2 = "mistyrose2"
    MISTYROSE3 = "mistyrose3"
    MISTYROSE4 = "mistyrose4"
    MOCCASIN = "moccasin"
    NAVAJOWHITE = "navajowhite"
    NAVAJOWHITE1 = "navajowhite1"
    NAVAJOWHITE2 = "navajowhite2"
    NAVAJOWHITE3 = "navajowhite3"
    NAVAJOWHITE4 = "navajowhite4"
    NAVY = "navy"
    NAVYBLUE = "navyblue"
    NONE = "none"
    OLDLACE = "oldlace"
    OLIVE = "olive"
    OLIVEDRAB = "olivedrab"
    OLIVEDRAB1 = "olivedrab1"
    OLIVEDRAB2 = "olivedrab2"
    OLIVEDRAB3 = "olivedrab3"
    OLIVEDRAB4 = "olivedrab4"
    ORANGE = "orange"
    ORANGE1 = "orange1"
    ORANGE2 = "orange2"
    ORANGE3 = "orange3"
    ORANGE4 = "orange4"
    ORANGERED = "orangered"
    ORANGERED1 = "orangered1"
    ORANGERED2 = "orangered2"
    ORANGERED3 = "orangered3"
    ORANGERED4 = "orangered4"
    ORCHID = "orchid"
    ORCHID1 = "orchid1"
    ORCHID2 = "orchid2"
    ORCHID3 = "orchid3"
    ORCHID4 = "orchid4"
    PALEGOLDENROD = "palegoldenrod"
    PALEGREEN = "palegreen"
    PALEGREEN1 = "palegreen1"
    PALEGREEN2 = "palegreen2"
    PALEGREEN3 = "palegreen3"
    PALEGREEN4 = "palegreen4"
    PALETURQUOISE = "paleturquoise"
    PALETURQUOISE1 = "paleturquoise1"
    PALETURQUOISE2 = "paleturquoise2"
    PALETURQUOISE3 = "paleturquoise3"
    PALETURQUOISE4 = "paleturquoise4"
    PALEVIOLETRED = "palevioletred"
    PALEVIOLETRED1 = "palevioletred1"
    PALEVIOLETRED2 = "palevioletred2"
    PALEVIOLETRED3 = "palevioletred3"
    PALEVIOLETRED4 = "palevioletred4"
    PAPAYAWHIP = "papayawhip"
    PEACHPUFF = "peachpuff"
    PEACHPUFF1 = "peachpuff1"
    PEACHPUFF2 = "peachpuff2"
    PEACHPUFF3 = "peachpuff3"
    PEACHPUFF4 = "peachpuff4"
    PERU = "peru"
    PINK = "pink"
    PINK1 = "pink1"
    PINK2 = "pink2"
    PINK3 = "pink3"
    PINK4 = "pink4"
    PLUM = "plum"
    PLUM1 = "plum1"
    PLUM2 = "plum2"
    PLUM3 = "plum3"
    PLUM4 = "plum4"
    POWDERBLUE = "powderblue"
    PURPLE = "purple"
    PURPLE1 = "purple1"
    PURPLE2 = "purple2"
    PURPLE3 = "purple3"
    PURPLE4 = "purple4"
    RED = "red"
    RED1 = "red1"
    RED2 = "red2"
    RED3 = "red3"
    RED4 = "red4"
    ROSYBROWN = "rosybrown"
    ROSYBROWN1 = "rosybrown1"
    ROSYBROWN2 = "rosybrown2"
    ROSYBROWN3 = "rosybrown3"
    ROSYBROWN4 = "rosybrown4"
    ROYALBLUE = "royalblue"
    ROYALBLUE1 = "royalblue1"
    ROYALBLUE2 = "royalblue2"
    ROYALBLUE3 = "royalblue3"
    ROYALBLUE4 = "royalblue4"
    SADDLEBROWN = "saddlebrown"
    SALMON = "salmon"
    SALMON1 = "salmon1"
    SALMON2 = "salmon2"
    SALMON3 = "salmon3"
    SALMON4 = "salmon4"
    SANDYBROWN = "sandybrown"
    SEAGREEN = "seagreen"
    SEAGREEN1 = "seagreen1"
    SEAGREEN2 = "seagreen2"
    SEAGREEN3 = "seagreen3"
    SEAGREEN4 = "seagreen4"
    SEASHELL = "seashell"
    SEASHELL1 = "seashell1"
    SEASHELL2 = "seashell2"
    SEASHELL3 = "seashell3"
    SEASHELL4 = "seashell4"
    SIENNA = "sienna"
    SIENNA1 = "sienna1"
    SIENNA2 = "sienna2"
    SIENNA3 = "sienna3"
    SIENNA4 = "sienna4"
    SILVER = "silver"
    SKYBLUE = "skyblue"
    SKYBLUE1 = "skyblue1"
    SKYBLUE2 = "skyblue2"
    SKYBLUE3 = "skyblue3"
    SKYBLUE4 = "skyblue4"
    SLATEBLUE = "slateblue"
    SLATEBLUE1 = "slateblue1"
    SLATEBLUE2 = "slateblue2"
    SLATEBLUE3 = "slateblue3"
    SLATEBLUE4 = "slateblue4"
    SLATEGRAY = "slategray"
    SLATEGRAY1 = "slategray1"
    SLATEGRAY2 = "slategray2"
    SLATEGRAY3 = "slategray3"
    SLATEGRAY4 = "slategray4"
    SLATEGREY = "slategrey"
    SNOW = "snow"
    SNOW1 = "snow1"
    SNOW2 = "snow2"
    SNOW3 = "snow3"
    SNOW4 = "snow4"
    SPRINGGREEN = "springgreen"
    SPRINGGREEN1 = "springgreen1"
    SPRINGGREEN2 = "springgreen2"
    SPRINGGREEN3 = "springgreen3"
    SPRINGGREEN4 = "springgreen4"
    STEELBLUE = "steelblue"
    STEELBLUE1 = "steelblue1"
    STEELBLUE2 = "steelblue2"
    STEELBLUE3 = "steelblue3"
    STEELBLUE4 = "steelblue4"
    TAN = "tan"
    TAN1 = "tan1"
    TAN2 = "tan2"
    TAN3 = "tan3"
    TAN4 = "tan4"
    TEAL = "teal"
    THISTLE = "thistle"
    THISTLE1 = "thistle1"
    THISTLE2 = "thistle2"
    THISTLE3 = "thistle3"
    THISTLE4 = "thistle4"
    TOMATO = "tomato"
    TOMATO1 = "tomato1"
    TOMATO2 = "tomato2"
    TOMATO3 = "tomato3"
    TOMATO4 = "tomato4"
    TRANSPARENT = "transparent"
    TURQUOISE = "turquoise"
    TURQUOISE1 = "turquoise1"
    TURQUOISE2 = "turquoise2"
    TURQUOISE3 = "turquoise3"
    TURQUOISE4 = "turquoise4"
    VIOLET = "violet"
    VIOLETRED = "violetred"
    VIOLETRED1 = "violetred1"
    VIOLETRED2 = "violetred2"
    VIOLETRED3 = "violetred3"
    VIOLETRED4 = "violetred4"
    WHEAT = "wheat"
    WHEAT1 = "wheat1"
    WHEAT2 = "wheat2"
    WHEAT3 = "wheat3"
    WHEAT4 = "wheat4"
    WHITE = "white"
    WHITESMOKE = "whitesmoke"
    YELLOW = "yellow"
    YELLOW1 = "yellow1"
    YELLOW2 = "yellow2"
    YELLOW3 = "yellow3"
    YELLOW4 = "yellow4"
    YELLOWGREEN = "yellowgreen"

    def __str__(self) -> str:
        return self.value

    def to_identity(self) -> String:
        return String(self.value)


def rgb(r: int, g: int, b: int) -> RGBA:
    """Opaque color from 8-bit channels."""
    return RGBA(r, g, b, 255)


def rgba(r: int, g: int, b: int, a: int) -> RGBA:
    return RGBA(r, g, b, a)


def hsv(h: float, s: float, v: float) -> HSV:
    return HSV(h, s, v)
