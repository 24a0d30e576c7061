"""
Built-in style property catalog.

Each property maps to the syntax of its legal values. Syntaxes may reference
any token from ``catalog``.
"""

from __future__ import annotations

from .ir.tokens import StyleDefinition

_SIZE = "auto | <length-percentage [0,∞]> | min-content | max-content | fit-content"
_MAX_SIZE = "<length-percentage [0,∞]> | min-content | max-content | fit-content"
_INSET = "auto | <length-percentage>"
_BORDER_STYLE = "none | hidden | dotted | dashed | solid | double | groove | ridge | inset | outset"

_PROPERTIES: dict[str, tuple[str, str]] = {
    # Size
    "width": (_SIZE, "Width of the element's content area."),
    "min-width": (_SIZE, "Minimum width of the element's content area."),
    "max-width": (_MAX_SIZE, "Maximum width of the element's content area."),
    "height": (_SIZE, "Height of the element's content area."),
    "min-height": (_SIZE, "Minimum height of the element's content area."),
    "max-height": (_MAX_SIZE, "Maximum height of the element's content area."),
    "aspect-ratio": ("auto || <ratio>", "Preferred width-to-height ratio of the box."),
    "overflow": ("[<overflow-block>]{1,2}", "What happens when content overflows the box."),
    # Spacing
    "padding": ("<length-percentage [0,∞]>{1,4}", "Space between content and every border."),
    "padding-top": ("<length-percentage [0,∞]>", "Space between content and the top border."),
    "padding-right": ("<length-percentage [0,∞]>", "Space between content and the right border."),
    "padding-bottom": ("<length-percentage [0,∞]>", "Space between content and the bottom border."),
    "padding-left": ("<length-percentage [0,∞]>", "Space between content and the left border."),
    "margin": ("auto | <length-percentage>{1,4}", "Space outside every border."),
    "margin-top": (_INSET, "Space outside the top border."),
    "margin-right": (_INSET, "Space outside the right border."),
    "margin-bottom": (_INSET, "Space outside the bottom border."),
    "margin-left": (_INSET, "Space outside the left border."),
    # Position
    "position": ("static | relative | absolute | fixed | sticky", "Positioning method."),
    "top": (_INSET, "Offset from the containing block's top edge."),
    "right": (_INSET, "Offset from the containing block's right edge."),
    "bottom": (_INSET, "Offset from the containing block's bottom edge."),
    "left": (_INSET, "Offset from the containing block's left edge."),
    "z-index": ("auto | <integer>", "Stacking order of positioned elements."),
    # Display
    "display": ("block | inline | inline-block | flex | grid | none", "Display type of the box."),
    "flex-direction": ("row | row-reverse | column | column-reverse", "Main axis of a flex container."),
    "flex-wrap": ("nowrap | wrap | wrap-reverse", "Whether flex items wrap onto several lines."),
    "align-items": ("flex-start | flex-end | center | baseline | stretch", "Cross-axis alignment."),
    "justify-content": (
        "flex-start | flex-end | center | space-between | space-around | space-evenly",
        "Main-axis distribution of free space.",
    ),
    "row-gap": ("<length-percentage [0,∞]>", "Gap between rows."),
    "column-gap": ("<length-percentage [0,∞]>", "Gap between columns."),
    "grid-auto-flow": ("row | column | [row dense] | [column dense]", "Grid auto-placement."),
    "grid-template-columns": ("none | <track-list>", "Column track sizes of a grid."),
    "grid-template-rows": ("none | <track-list>", "Row track sizes of a grid."),
    "object-fit": ("fill | contain | cover | none | scale-down", "How replaced content is fitted."),
    "visibility": ("visible | hidden | collapse", "Whether the box is visible."),
    "box-sizing": ("content-box | border-box", "Which box width and height apply to."),
    # Border
    "border-width": ("<length [0,∞]>", "Width of every border."),
    "border-style": (_BORDER_STYLE, "Style of every border."),
    "border-color": ("<color>", "Color of every border."),
    "border-radius": (
        "<length-percentage [0,∞]>{1,4} [ / <length-percentage [0,∞]>{1,4} ]?",
        "Rounding of the outer border corners.",
    ),
    "border-image-source": ("<border-image-source>", "Image drawn as the border."),
    "border-image-repeat": ("<border-image-repeat>", "How the border image is tiled."),
    "outline-width": ("medium | thin | thick | <length [0,∞]>", "Width of the outline."),
    "outline-color": ("<color>", "Color of the outline."),
    # Background
    "background-color": ("<color>", "Background color."),
    "background-image": ("<bg-image>", "Background image."),
    "background-size": ("<bg-size>{1,2}", "Size of the background image."),
    "mix-blend-mode": ("<mix-blend-mode>", "How content blends with the backdrop."),
    # Typography
    "color": ("<color>", "Foreground text color."),
    "font-size": ("<absolute-size> | <relative-size> | <length-percentage [0,∞]>", "Font size."),
    "font-weight": ("normal | bold | <integer [1,1000]>", "Weight of the font."),
    "font-family": ("<generic-family>", "Font family."),
    "font-style": ("normal | italic", "Slant of the font."),
    "line-height": ("normal | <number [0,∞]> | <length-percentage [0,∞]>", "Height of a line box."),
    "letter-spacing": ("normal | <length>", "Extra space between letters."),
    "word-spacing": ("normal | <length>", "Extra space between words."),
    "text-align": ("left | right | center | justify", "Horizontal alignment of inline content."),
    "text-transform": ("none | capitalize | uppercase | lowercase", "Capitalization of text."),
    "text-decoration": (
        "<text-decoration-line> || <text-decoration-style> || <text-decoration-color>",
        "Decorative lines on text.",
    ),
    "text-shadow": ("<length> <length> <length> <color>", "Shadow behind text."),
    "white-space": ("normal | pre | nowrap | pre-wrap | pre-line | break-spaces", "White-space handling."),
    "column-count": ("auto | <integer [1,∞]>", "Number of columns."),
    # Effects
    "opacity": ("<number [0,1]> | <percentage [0,100]>", "Opacity of the element."),
    "filter": ("none | <filter-function>+", "Graphical effects such as blur."),
    "transform": ("none | <transform-function>+", "Transformations applied to the element."),
    "box-shadow": ("none | <spread-shadow>", "Shadow around the box."),
    "transition-duration": ("<time [0,∞]>#", "Duration of each transition."),
}

BUILTIN_PROPERTIES: list[StyleDefinition] = [
    StyleDefinition(key=key, syntax=syntax, description=description)
    for key, (syntax, description) in _PROPERTIES.items()
]
