"""
Built-in token and unit catalog.

Primitive data types are defined as themselves and carry the default literal
used to back-fill slots. Composed tokens are shorthands expanded before
variants are built.
"""

from __future__ import annotations

from .ir.tokens import TokenDefinition, UnitDefinition, UnitType


def _unit(key: str, type: UnitType, category: str, supported: str = "widely") -> UnitDefinition:
    return UnitDefinition(key=key, type=type, category=category, supported=supported)


def _relative(*keys: str, supported: str = "not widely") -> list[UnitDefinition]:
    return [_unit(k, UnitType.LENGTH, "relative", supported) for k in keys]


BUILTIN_UNITS: list[UnitDefinition] = [
    *_relative("em", "rem", "vh", "vw", "vmax", "vmin", supported="widely"),
    *_relative("ex", "ic", "lh", "cap", "ch", "rcap", "rch", "rex", "ric", "rlh", "vb", "vi"),
    *_relative("svh", "svw", "svmax", "svmin", "svb", "svi"),
    *_relative("lvh", "lvw", "lvmax", "lvmin", "lvb", "lvi"),
    *_relative("dvh", "dvw", "dvmax", "dvmin", "dvb", "dvi"),
    *_relative("cqw", "cqh", "cqi", "cqb", "cqmin", "cqmax"),
    _unit("px", UnitType.LENGTH, "absolute"),
    *[_unit(k, UnitType.LENGTH, "absolute", "not widely") for k in ("cm", "mm", "Q", "in", "pt", "pc")],
    _unit("%", UnitType.PERCENTAGE, "relative"),
    _unit("fr", UnitType.FLEX, "relative"),
    _unit("deg", UnitType.ANGLE, "angle"),
    *[_unit(k, UnitType.ANGLE, "angle", "not widely") for k in ("grad", "rad", "turn")],
    _unit("s", UnitType.TIME, "time"),
    _unit("ms", UnitType.TIME, "time", "not widely"),
    _unit("x", UnitType.RESOLUTION, "resolution", "not widely"),
    *[_unit(k, UnitType.RESOLUTION, "resolution", "not widely") for k in ("dpi", "dpcm", "dppx")],
]


def _primitive(name: str, type: str, default: str) -> TokenDefinition:
    key = f"<{name}>"
    return TokenDefinition(key=key, syntax=key, type=type, default=default)


def _composed(name: str, syntax: str) -> TokenDefinition:
    return TokenDefinition(key=f"<{name}>", syntax=syntax, type="composed")


PRIMITIVE_TOKENS: list[TokenDefinition] = [
    _primitive("number", "number", "0.0"),
    _primitive("integer", "integer", "0"),
    _primitive("percentage", "length", "0%"),
    _primitive("length", "length", "0px"),
    _primitive("angle", "length", "0deg"),
    _primitive("flex", "length", "1fr"),
    _primitive("time", "length", "0s"),
    _primitive("resolution", "length", "1x"),
    _primitive("link", "link", '"https://example.com/image.png"'),
    _primitive("color", "color", "#ffffff"),
]

COMPOSED_TOKENS: list[TokenDefinition] = [
    _composed("length-percentage", "<length> | <percentage>"),
    _composed("track-list", "[<track-size> | <track-repeat>]+"),
    _composed(
        "track-size",
        "<track-breadth> | minmax(<inflexible-breadth>,<track-breadth>)"
        " | fit-content(<length-percentage [0,∞]>)",
    ),
    _composed(
        "track-breadth",
        "<length-percentage [0,∞]> | <flex [0,∞]> | min-content | max-content | auto",
    ),
    _composed("inflexible-breadth", "<length-percentage [0,∞]> | min-content | max-content | auto"),
    _composed("track-repeat", "repeat(<integer [1,∞]> , [<track-size>]+)"),
    _composed("overflow-block", "visible | hidden | clip | scroll | auto"),
    # Denominator optional, as in CSS Values 4
    _composed("ratio", "<number [0,∞]> [ / <number [0,∞]> ]?"),
    _composed("image", "url(<link>)"),
    _composed(
        "transform-function",
        "translate3d(<length-percentage>,<length-percentage>,<length>)"
        " | rotate3d(<number>,<number>,<number>,<angle>)"
        " | scale3d(<number>,<number>,<number>) | skew(<angle>,<angle>)"
        " | perspective(<length [0,∞]>)",
    ),
    _composed("generic-family", "<generic-complete> | <generic-incomplete>"),
    _composed("generic-complete", "serif | sans-serif | system-ui | cursive | fantasy | math | monospace"),
    _composed("generic-incomplete", "ui-serif | ui-sans-serif | ui-monospace | ui-rounded"),
    _composed("absolute-size", "xx-small | x-small | small | medium | large | x-large | xx-large | xxx-large"),
    _composed("relative-size", "larger | smaller"),
    _composed("text-decoration-line", "none | underline | overline | line-through"),
    _composed("text-decoration-style", "solid | double | dotted | dashed | wavy"),
    _composed("text-decoration-color", "<color>"),
    _composed("text-decoration-thickness", "auto | from-font | <length-percentage>"),
    _composed("bg-size", "<length-percentage [0,∞]> | auto | cover | contain"),
    _composed(
        "bg-position",
        "[left | center | right | top | bottom | <length-percentage>]"
        " | [[left | center | right | <length-percentage>] [top | center | bottom | <length-percentage>]]",
    ),
    _composed("bg-image", "none | <image>"),
    _composed(
        "mix-blend-mode",
        "normal | multiply | screen | overlay | darken | lighten | color-dodge | color-burn"
        " | hard-light | soft-light | difference | exclusion | hue | saturation | color | luminosity",
    ),
    _composed("border-image-source", "none | <image>"),
    _composed("border-image-slice", "[<number [0,∞]> | <percentage [0,∞]>]{1,4} && fill?"),
    _composed("border-image-width", "[<length-percentage [0,∞]> | <number [0,∞]> | auto]{1,4}"),
    _composed("border-image-outset", "[<length [0,∞]> | <number [0,∞]>]{1,4}"),
    _composed("border-image-repeat", "[stretch | repeat | round | space]{1,2}"),
    _composed(
        "filter-function",
        "blur(<length [0,∞]>) | brightness(<number [0,∞]>) | contrast(<number [0,∞]>)"
        " | drop-shadow(<length-percentage> <length-percentage> <length-percentage> <color>)"
        " | grayscale(<number [0,∞]>) | hue-rotate(<angle>) | invert(<number [0,∞]>)"
        " | opacity(<number [0,∞]>) | saturate(<number [0,∞]>) | sepia(<number [0,∞]>)",
    ),
    _composed(
        "spread-shadow",
        "<box-shadow-position>? <length> <length> <box-shadow-blur> <box-shadow-spread> <box-shadow-color>",
    ),
    _composed("box-shadow-blur", "<length [0,∞]>"),
    _composed("box-shadow-spread", "<length>"),
    _composed("box-shadow-color", "<color>"),
    _composed("box-shadow-position", "outset | inset"),
]

BUILTIN_TOKENS: list[TokenDefinition] = PRIMITIVE_TOKENS + COMPOSED_TOKENS
