from tiles import (
    TILE_STYLES,
    SUPER_TILE_STYLE,
    TEXT_DARK,
    TEXT_LIGHT,
    tile_style,
    text_size,
    tile_label,
    is_dark_text,
)


def test_every_power_of_two_up_to_4096_has_a_style():
    for exponent in range(1, 13):
        assert 2 ** exponent in TILE_STYLES


def test_large_values_share_the_super_style():
    assert tile_style(8192) == SUPER_TILE_STYLE
    assert tile_style(2 ** 17) == SUPER_TILE_STYLE


def test_text_color():
    assert tile_style(2).text == TEXT_DARK
    assert tile_style(8).text == TEXT_LIGHT
    assert is_dark_text(2048)
    assert not is_dark_text(1024)


def test_text_size_by_digits():
    assert text_size(64) == 'large'
    assert text_size(128) == 'medium'
    assert text_size(1024) == 'small'


def test_tile_label():
    assert tile_label(0) == ''
    assert tile_label(512) == '512'
