"""W3C/HTML named colours (CSS Color Module Level 3), keyed by lowercase name.

Grey spellings are listed next to their gray counterparts.
"""
from __future__ import annotations

from imagen.models.color import RGBA

NAMED_COLORS: dict[str, RGBA] = {
    "indianred": RGBA(0xCD, 0x5C, 0x5C),
    "lightcoral": RGBA(0xF0, 0x80, 0x80),
    "salmon": RGBA(0xFA, 0x80, 0x72),
    "darksalmon": RGBA(0xE9, 0x96, 0x7A),
    "lightsalmon": RGBA(0xFF, 0xA0, 0x7A),
    "crimson": RGBA(0xDC, 0x14, 0x3C),
    "red": RGBA(0xFF, 0x00, 0x00),
    "firebrick": RGBA(0xB2, 0x22, 0x22),
    "darkred": RGBA(0x8B, 0x00, 0x00),
    "pink": RGBA(0xFF, 0xC0, 0xCB),
    "lightpink": RGBA(0xFF, 0xB6, 0xC1),
    "hotpink": RGBA(0xFF, 0x69, 0xB4),
    "deeppink": RGBA(0xFF, 0x14, 0x93),
    "mediumvioletred": RGBA(0xC7, 0x15, 0x85),
    "palevioletred": RGBA(0xDB, 0x70, 0x93),
    "coral": RGBA(0xFF, 0x7F, 0x50),
    "tomato": RGBA(0xFF, 0x63, 0x47),
    "orangered": RGBA(0xFF, 0x45, 0x00),
    "darkorange": RGBA(0xFF, 0x8C, 0x00),
    "orange": RGBA(0xFF, 0xA5, 0x00),
    "gold": RGBA(0xFF, 0xD7, 0x00),
    "yellow": RGBA(0xFF, 0xFF, 0x00),
    "lightyellow": RGBA(0xFF, 0xFF, 0xE0),
    "lemonchiffon": RGBA(0xFF, 0xFA, 0xCD),
    "lightgoldenrodyellow": RGBA(0xFA, 0xFA, 0xD2),
    "papayawhip": RGBA(0xFF, 0xEF, 0xD5),
    "moccasin": RGBA(0xFF, 0xE4, 0xB5),
    "peachpuff": RGBA(0xFF, 0xDA, 0xB9),
    "palegoldenrod": RGBA(0xEE, 0xE8, 0xAA),
    "khaki": RGBA(0xF0, 0xE6, 0x8C),
    "darkkhaki": RGBA(0xBD, 0xB7, 0x6B),
    "lavender": RGBA(0xE6, 0xE6, 0xFA),
    "thistle": RGBA(0xD8, 0xBF, 0xD8),
    "plum": RGBA(0xDD, 0xA0, 0xDD),
    "violet": RGBA(0xEE, 0x82, 0xEE),
    "orchid": RGBA(0xDA, 0x70, 0xD6),
    "fuchsia": RGBA(0xFF, 0x00, 0xFF),
    "magenta": RGBA(0xFF, 0x00, 0xFF),
    "mediumorchid": RGBA(0xBA, 0x55, 0xD3),
    "mediumpurple": RGBA(0x93, 0x70, 0xDB),
    "rebeccapurple": RGBA(0x66, 0x33, 0x99),
    "blueviolet": RGBA(0x8A, 0x2B, 0xE2),
    "darkviolet": RGBA(0x94, 0x00, 0xD3),
    "darkorchid": RGBA(0x99, 0x32, 0xCC),
    "darkmagenta": RGBA(0x8B, 0x00, 0x8B),
    "purple": RGBA(0x80, 0x00, 0x80),
    "indigo": RGBA(0x4B, 0x00, 0x82),
    "slateblue": RGBA(0x6A, 0x5A, 0xCD),
    "darkslateblue": RGBA(0x48, 0x3D, 0x8B),
    "mediumslateblue": RGBA(0x7B, 0x68, 0xEE),
    "greenyellow": RGBA(0xAD, 0xFF, 0x2F),
    "chartreuse": RGBA(0x7F, 0xFF, 0x00),
    "lawngreen": RGBA(0x7C, 0xFC, 0x00),
    "lime": RGBA(0x00, 0xFF, 0x00),
    "limegreen": RGBA(0x32, 0xCD, 0x32),
    "palegreen": RGBA(0x98, 0xFB, 0x98),
    "lightgreen": RGBA(0x90, 0xEE, 0x90),
    "mediumspringgreen": RGBA(0x00, 0xFA, 0x9A),
    "springgreen": RGBA(0x00, 0xFF, 0x7F),
    "mediumseagreen": RGBA(0x3C, 0xB3, 0x71),
    "seagreen": RGBA(0x2E, 0x8B, 0x57),
    "forestgreen": RGBA(0x22, 0x8B, 0x22),
    "green": RGBA(0x00, 0x80, 0x00),
    "darkgreen": RGBA(0x00, 0x64, 0x00),
    "yellowgreen": RGBA(0x9A, 0xCD, 0x32),
    "olivedrab": RGBA(0x6B, 0x8E, 0x23),
    "olive": RGBA(0x80, 0x80, 0x00),
    "darkolivegreen": RGBA(0x55, 0x6B, 0x2F),
    "mediumaquamarine": RGBA(0x66, 0xCD, 0xAA),
    "darkseagreen": RGBA(0x8F, 0xBC, 0x8B),
    "lightseagreen": RGBA(0x20, 0xB2, 0xAA),
    "darkcyan": RGBA(0x00, 0x8B, 0x8B),
    "teal": RGBA(0x00, 0x80, 0x80),
    "aqua": RGBA(0x00, 0xFF, 0xFF),
    "cyan": RGBA(0x00, 0xFF, 0xFF),
    "lightcyan": RGBA(0xE0, 0xFF, 0xFF),
    "paleturquoise": RGBA(0xAF, 0xEE, 0xEE),
    "aquamarine": RGBA(0x7F, 0xFF, 0xD4),
    "turquoise": RGBA(0x40, 0xE0, 0xD0),
    "mediumturquoise": RGBA(0x48, 0xD1, 0xCC),
    "darkturquoise": RGBA(0x00, 0xCE, 0xD1),
    "cadetblue": RGBA(0x5F, 0x9E, 0xA0),
    "steelblue": RGBA(0x46, 0x82, 0xB4),
    "lightsteelblue": RGBA(0xB0, 0xC4, 0xDE),
    "powderblue": RGBA(0xB0, 0xE0, 0xE6),
    "lightblue": RGBA(0xAD, 0xD8, 0xE6),
    "skyblue": RGBA(0x87, 0xCE, 0xEB),
    "lightskyblue": RGBA(0x87, 0xCE, 0xFA),
    "deepskyblue": RGBA(0x00, 0xBF, 0xFF),
    "dodgerblue": RGBA(0x1E, 0x90, 0xFF),
    "cornflowerblue": RGBA(0x64, 0x95, 0xED),
    "royalblue": RGBA(0x41, 0x69, 0xE1),
    "blue": RGBA(0x00, 0x00, 0xFF),
    "mediumblue": RGBA(0x00, 0x00, 0xCD),
    "darkblue": RGBA(0x00, 0x00, 0x8B),
    "navy": RGBA(0x00, 0x00, 0x80),
    "midnightblue": RGBA(0x19, 0x19, 0x70),
    "cornsilk": RGBA(0xFF, 0xF8, 0xDC),
    "blanchedalmond": RGBA(0xFF, 0xEB, 0xCD),
    "bisque": RGBA(0xFF, 0xE4, 0xC4),
    "navajowhite": RGBA(0xFF, 0xDE, 0xAD),
    "wheat": RGBA(0xF5, 0xDE, 0xB3),
    "burlywood": RGBA(0xDE, 0xB8, 0x87),
    "tan": RGBA(0xD2, 0xB4, 0x8C),
    "rosybrown": RGBA(0xBC, 0x8F, 0x8F),
    "sandybrown": RGBA(0xF4, 0xA4, 0x60),
    "goldenrod": RGBA(0xDA, 0xA5, 0x20),
    "darkgoldenrod": RGBA(0xB8, 0x86, 0x0B),
    "peru": RGBA(0xCD, 0x85, 0x3F),
    "chocolate": RGBA(0xD2, 0x69, 0x1E),
    "saddlebrown": RGBA(0x8B, 0x45, 0x13),
    "sienna": RGBA(0xA0, 0x52, 0x2D),
    "brown": RGBA(0xA5, 0x2A, 0x2A),
    "maroon": RGBA(0x80, 0x00, 0x00),
    "white": RGBA(0xFF, 0xFF, 0xFF),
    "snow": RGBA(0xFF, 0xFA, 0xFA),
    "honeydew": RGBA(0xF0, 0xFF, 0xF0),
    "mintcream": RGBA(0xF5, 0xFF, 0xFA),
    "azure": RGBA(0xF0, 0xFF, 0xFF),
    "aliceblue": RGBA(0xF0, 0xF8, 0xFF),
    "ghostwhite": RGBA(0xF8, 0xF8, 0xFF),
    "whitesmoke": RGBA(0xF5, 0xF5, 0xF5),
    "seashell": RGBA(0xFF, 0xF5, 0xEE),
    "beige": RGBA(0xF5, 0xF5, 0xDC),
    "oldlace": RGBA(0xFD, 0xF5, 0xE6),
    "floralwhite": RGBA(0xFF, 0xFA, 0xF0),
    "ivory": RGBA(0xFF, 0xFF, 0xF0),
    "antiquewhite": RGBA(0xFA, 0xEB, 0xD7),
    "linen": RGBA(0xFA, 0xF0, 0xE6),
    "lavenderblush": RGBA(0xFF, 0xF0, 0xF5),
    "mistyrose": RGBA(0xFF, 0xE4, 0xE1),
    "gainsboro": RGBA(0xDC, 0xDC, 0xDC),
    "lightgray": RGBA(0xD3, 0xD3, 0xD3),
    "lightgrey": RGBA(0xD3, 0xD3, 0xD3),
    "silver": RGBA(0xC0, 0xC0, 0xC0),
    "darkgray": RGBA(0xA9, 0xA9, 0xA9),
    "darkgrey": RGBA(0xA9, 0xA9, 0xA9),
    "gray": RGBA(0x80, 0x80, 0x80),
    "grey": RGBA(0x80, 0x80, 0x80),
    "dimgray": RGBA(0x69, 0x69, 0x69),
    "dimgrey": RGBA(0x69, 0x69, 0x69),
    "lightslategray": RGBA(0x77, 0x88, 0x99),
    "lightslategrey": RGBA(0x77, 0x88, 0x99),
    "slategray": RGBA(0x70, 0x80, 0x90),
    "slategrey": RGBA(0x70, 0x80, 0x90),
    "darkslategray": RGBA(0x2F, 0x4F, 0x4F),
    "darkslategrey": RGBA(0x2F, 0x4F, 0x4F),
    "black": RGBA(0x00, 0x00, 0x00),
}
