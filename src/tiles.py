"""
tile value -> colors and text size used when drawing the board
"""
from collections import namedtuple


TileStyle = namedtuple('TileStyle', ['background', 'glow', 'text'])

TEXT_DARK = (26, 26, 46)
TEXT_LIGHT = (255, 255, 255)

TILE_STYLES = {
    0: TileStyle((30, 41, 59), (0, 255, 255), TEXT_DARK),
    2: TileStyle((232, 245, 247), (255, 255, 255), TEXT_DARK),
    4: TileStyle((0, 229, 255), (0, 229, 255), TEXT_DARK),
    8: TileStyle((0, 191, 255), (0, 191, 255), TEXT_LIGHT),
    16: TileStyle((0, 255, 0), (0, 255, 0), TEXT_DARK),
    32: TileStyle((255, 255, 0), (255, 255, 0), TEXT_DARK),
    64: TileStyle((255, 140, 0), (255, 140, 0), TEXT_LIGHT),
    128: TileStyle((255, 0, 255), (255, 0, 255), TEXT_LIGHT),
    256: TileStyle((148, 0, 211), (148, 0, 211), TEXT_LIGHT),
    512: TileStyle((255, 20, 147), (255, 20, 147), TEXT_LIGHT),
    1024: TileStyle((255, 69, 0), (255, 69, 0), TEXT_LIGHT),
    2048: TileStyle((255, 215, 0), (255, 215, 0), TEXT_DARK),
    4096: TileStyle((0, 255, 255), (255, 255, 255), TEXT_DARK),
}

# anything above 4096
SUPER_TILE_STYLE = TileStyle((255, 0, 255), (255, 255, 255), TEXT_DARK)


def tile_style(value):
    """get the style for a tile value"""
    return TILE_STYLES.get(value, SUPER_TILE_STYLE)


def is_dark_text(value):
    return tile_style(value).text == TEXT_DARK


def text_size(value):
    """'large', 'medium' or 'small' depending on the number of digits"""
    if value < 100:
        return 'large'
    elif value < 1000:
        return 'medium'
    else:
        return 'small'


def tile_label(value):
    return str(value) if value else ''
