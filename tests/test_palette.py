"""Tests for rcp_palette.core.palette — CSS named colours and distance functions."""

from rcp_palette.core.palette import lookup_name, named_colours, nearest_colour, rgb_distance


class TestLookupName:
    def test_white(self):
        assert lookup_name('white') == (255, 255, 255)

    def test_black(self):
        assert lookup_name('black') == (0, 0, 0)

    def test_uppercase(self):
        assert lookup_name('TEAL') == (0, 128, 128)

    def test_unknown_returns_none(self):
        assert lookup_name('doesnotexist') is None


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self):
        d = rgb_distance((0, 0, 0), (255, 255, 255))
        assert d > 400  # sqrt(3 * 255^2) ≈ 441.7

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)

    def test_no_uint8_wraparound(self):
        """(0 - 200) must not wrap to 56."""
        d = rgb_distance((0, 0, 0), (200, 200, 200))
        assert d > 300


class TestNearestColour:
    def test_exact_white(self):
        name, dist = nearest_colour((255, 255, 255))
        assert name == 'white'
        assert dist == 0.0

    def test_exact_red(self):
        name, dist = nearest_colour((255, 0, 0))
        assert name == 'red'
        assert dist == 0.0

    def test_near_red(self):
        name, dist = nearest_colour((250, 2, 3))
        assert name == 'red'
        assert dist < 10

    def test_alias_tie_goes_to_first_name(self):
        name, _dist = nearest_colour((0, 255, 255))
        assert name == 'aqua'

    def test_beyond_threshold_returns_none(self):
        # #1A2B3C is not a CSS named colour
        name, dist = nearest_colour((26, 43, 60), threshold=1)
        assert name is None
        assert dist > 1


class TestNamedColours:
    def test_has_basics(self):
        table = named_colours()
        for name in ['white', 'black', 'red', 'green', 'blue', 'aliceblue']:
            assert name in table

    def test_values_are_rgb_tuples(self):
        for name, rgb in named_colours().items():
            assert len(rgb) == 3, name
            assert all(0 <= v <= 255 for v in rgb), name

    def test_sorted_by_name(self):
        names = list(named_colours())
        assert names == sorted(names)
