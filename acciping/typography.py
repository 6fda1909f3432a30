"""Unicode glyphs used when drawing to the terminal."""

BULLET = "\u2022"
HOLLOW_BULLET = "\u25E6"
DIAMOND = "\u25C6"
MULTIPLY = "\u00D7"

HOLLOW_DOWN_TRIANGLE = "\u25BD"
HOLLOW_UP_TRIANGLE = "\u25B3"
HOLLOW_LEFT_TRIANGLE = "\u25C1"
HOLLOW_RIGHT_TRIANGLE = "\u25B7"

FILLED_DOWN_TRIANGLE = "\u25BC"
FILLED_UP_TRIANGLE = "\u25B2"
FILLED_LEFT_TRIANGLE = "\u25C0"
FILLED_RIGHT_TRIANGLE = "\u25B6"

VERTICAL = "\u2502"
HORIZONTAL = "\u2500"
DOUBLE_VERTICAL = "\u2551"
DOUBLE_HORIZONTAL = "\u2550"

VERY_STEEP_UP_SLOPE = "\u002F"
STEEP_UP_SLOPE = "\u2215"
UP_SLOPE = "\u2571"
GENTLE_UP_SLOPE = "\uFF0F"

STEEP_DOWN_SLOPE = "\u005C"
DOWN_SLOPE = "\u2572"
GENTLE_DOWN_SLOPE = "\uFF3C"

BLOCK = "\u2588"
LIGHT_BLOCK = "\u2591"
MEDIUM_BLOCK = "\u2592"
DARK_BLOCK = "\u2593"

SQUARE = "\u25A0"
HOLLOW_SQUARE = "\u25A1"
ROUNDED_HOLLOW_SQUARE = "\u25A2"
SMALL_SQUARE = "\u25AA"
SMALL_HOLLOW_SQUARE = "\u25AB"

BOTTOM_LEFT_SQUARE = "\u2596"
TOP_LEFT_SQUARE = "\u2598"
BOTTOM_RIGHT_SQUARE = "\u2597"
TOP_RIGHT_SQUARE = "\u259D"

UPPER_LEFT_QUADRANT_CIRCULAR_ARC = "\u25DC"
UPPER_RIGHT_QUADRANT_CIRCULAR_ARC = "\u25DD"
LOWER_RIGHT_QUADRANT_CIRCULAR_ARC = "\u25DE"
LOWER_LEFT_QUADRANT_CIRCULAR_ARC = "\u25DF"

BOTTOM_LINE = "\u23BD"
LOWER_LINE = "\u23BC"
UPPER_LINE = "\u23BB"
TOP_LINE = "\u23BA"