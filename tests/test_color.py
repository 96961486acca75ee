import pytest

from pixel_proxy.errors import EmptyPaletteError
from pixel_proxy.processing.color import distance, freeze_palette, nearest


def test_distance_is_squared_euclidean():
    assert distance((0, 0, 0), (3, 4, 0)) == 25
    assert distance((200, 100, 50), (0, 0, 0)) == 52500
    assert distance((200, 100, 50), (255, 255, 255)) == 66275


def test_nearest_returns_minimising_entry():
    palette = ((0, 0, 0), (255, 0, 0), (0, 0, 255))

    assert nearest((250, 10, 10), palette) == (255, 0, 0)
    assert nearest((10, 10, 240), palette) == (0, 0, 255)


def test_nearest_breaks_ties_by_palette_order():
    palette = ((0, 0, 0), (20, 0, 0), (0, 0, 0))

    assert nearest((10, 0, 0), palette) == (0, 0, 0)
    assert nearest((10, 0, 0), palette[1:]) == (20, 0, 0)


def test_nearest_accepts_out_of_range_floats():
    assert nearest((-40.5, 300.25, 128.0), ((0, 0, 0), (0, 255, 128))) == (0, 255, 128)


def test_nearest_rejects_empty_palette():
    with pytest.raises(EmptyPaletteError):
        nearest((1, 2, 3), ())


def test_freeze_palette_returns_tuple_of_int_triples():
    palette = freeze_palette([[1, 2, 3], (4.0, 5.0, 6.0)])

    assert palette == ((1, 2, 3), (4, 5, 6))
    assert isinstance(palette, tuple)
