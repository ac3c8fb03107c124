from rich.text import Text

from .chunker import BLOCK_SIZE, Block
from .classifier import ByteCategory

COLUMN_DIVIDER = "  "
BLANK_HEX = "  "

# Colours per byte class:
#   grey   - zero byte
#   green  - whitespace
#   yellow - ascii non printable
#   red    - non ascii
#   cyan   - printable character
CATEGORY_STYLES = {
    ByteCategory.ZERO: "bright_black",
    ByteCategory.SPACE: None,
    ByteCategory.OTHER_WHITESPACE: "green",
    ByteCategory.NON_ASCII: "bright_red",
    ByteCategory.PRINTABLE_ASCII: "cyan",
    ByteCategory.NON_PRINTABLE_ASCII: "yellow",
}


def offset_label(index: int) -> str:
    # The trailing 0 turns a block index into its byte offset column.
    return f"{index:06d}0:"


def render_line(block: Block) -> Text:
    """
    Render one block as `  <offset>:  <hex column>  <glyphs>`.

    The hex column always spans a full block; positions past the end of a
    short block are blank. Bytes are grouped in pairs, so a space follows
    every odd position.
    """
    line = Text(COLUMN_DIVIDER)
    line.append(offset_label(block.index))
    line.append(COLUMN_DIVIDER)

    for position in range(max(BLOCK_SIZE, len(block.cells))):
        spacer = " " if position % 2 == 1 else ""
        if position < len(block.cells):
            cell = block.cells[position]
            line.append(cell.hex + spacer, style=CATEGORY_STYLES[cell.category])
        else:
            line.append(BLANK_HEX + spacer)

    line.append(COLUMN_DIVIDER)
    for cell in block.cells:
        line.append(cell.glyph, style=CATEGORY_STYLES[cell.category])
    return line
