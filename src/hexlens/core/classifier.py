import enum
from dataclasses import dataclass


class ByteCategory(enum.Enum):
    ZERO = "zero"
    SPACE = "space"
    OTHER_WHITESPACE = "other_whitespace"
    NON_ASCII = "non_ascii"
    PRINTABLE_ASCII = "printable_ascii"
    NON_PRINTABLE_ASCII = "non_printable_ascii"


OTHER_WHITESPACE = frozenset((0x09, 0x0A, 0x0C, 0x0D))
PRINTABLE_RANGE = range(0x20, 0x80)

GLYPHS = {
    ByteCategory.ZERO: "⋄",
    ByteCategory.SPACE: " ",
    ByteCategory.OTHER_WHITESPACE: "_",
    ByteCategory.NON_ASCII: "×",
    ByteCategory.NON_PRINTABLE_ASCII: "•",
}


@dataclass(frozen=True)
class ClassifiedByte:
    value: int
    category: ByteCategory
    hex: str
    glyph: str


def category_of(value: int) -> ByteCategory:
    """
    Ranges overlap at their edges, so the checks run in a fixed priority:
    zero, space, other whitespace, non-ASCII, printable ASCII, and whatever
    is left is non-printable ASCII.
    """
    if value == 0x00:
        return ByteCategory.ZERO
    if value == 0x20:
        return ByteCategory.SPACE
    if value in OTHER_WHITESPACE:
        return ByteCategory.OTHER_WHITESPACE
    if value > 0x7F:
        return ByteCategory.NON_ASCII
    if value in PRINTABLE_RANGE:
        return ByteCategory.PRINTABLE_ASCII
    return ByteCategory.NON_PRINTABLE_ASCII


def classify(value: int) -> ClassifiedByte:
    category = category_of(value)
    if category is ByteCategory.PRINTABLE_ASCII:
        glyph = chr(value)
    else:
        glyph = GLYPHS[category]
    return ClassifiedByte(value=value, category=category, hex=f"{value:02X}", glyph=glyph)
