"""Tests for idpix.core.decoder — the full identifier-to-grid pipeline."""

import pytest
from idpix.core.decoder import decode, inspect
from idpix.core.errors import DesignIndexOutOfBounds, MalformedIdentifier
from idpix.core.types import DARK_GREYS, LIGHT_GREYS
from idpix.registry import get

MOONCAT = get('mooncat')
LABUBU = get('labubu')


class TestDecode:
    def test_all_zero_identifier(self):
        grid = decode('0000000000', ['00.01'], MOONCAT)
        assert grid == [[None, None], [None, '#330000']]

    def test_inverted_blue(self):
        decoded = inspect('0x00800000ff', ['12345'], MOONCAT)
        assert decoded.fields.invert is True
        assert decoded.design_index == 0
        assert decoded.palette[1] == '#000033'
        assert decoded.palette[2] == '#6666ff'
        assert decoded.palette[3] == '#99ddff'
        assert decoded.grid[0][:4] == ['#000033', '#6666ff', '#99ddff', '#000066']

    def test_row_count_matches_template(self):
        designs = ['0.1.2.3.4', '12.21']
        for selector in range(0, 256, 7):
            ident = f'00{selector:02x}102030'
            grid = decode(ident, designs * 64, MOONCAT)
            expected = designs[(selector % 128) % 2]
            assert len(grid) == len(expected.split('.'))

    def test_last_valid_design(self):
        designs = ['1'] * 8
        assert decode('0007000000', designs, MOONCAT) == [['#330000']]

    def test_one_past_last_design(self):
        with pytest.raises(DesignIndexOutOfBounds):
            decode('0008000000', ['1'] * 8, MOONCAT)

    def test_inverted_selector_uses_same_design(self):
        designs = ['1'] * 8
        assert len(decode('0087000000', designs, MOONCAT)) == 1

    def test_malformed_identifier(self):
        with pytest.raises(MalformedIdentifier):
            decode('0xabc', ['1'], MOONCAT)

    def test_identifier_checked_before_catalog(self):
        with pytest.raises(MalformedIdentifier):
            decode('zz', [], MOONCAT)


class TestGenesis:
    @pytest.mark.parametrize(
        'selector,expected',
        [
            (0x00, DARK_GREYS),
            (0x01, LIGHT_GREYS),
            (0x80, LIGHT_GREYS),
            (0x81, DARK_GREYS),
        ],
    )
    def test_parity_and_invert(self, selector: int, expected: tuple) -> None:
        designs = ['12345'] * 2
        decoded = inspect(f'01{selector:02x}abcdef', designs, MOONCAT)
        assert decoded.palette == expected
        assert decoded.grid == [list(expected[1:])]

    def test_seed_ignored(self):
        a = decode('0100ff0000', ['12345'], MOONCAT)
        b = decode('01000000ff', ['12345'], MOONCAT)
        assert a == b


class TestLabubu:
    def test_builtin_design(self):
        grid = decode('0000000000', LABUBU.designs, LABUBU)
        assert len(grid) == 17
        assert all(len(row) == 20 for row in grid)
        # top-left corner is background
        assert grid[0][0] is None
        assert grid[0][4] == '#330000'

    def test_only_one_design(self):
        with pytest.raises(DesignIndexOutOfBounds):
            decode('0001000000', LABUBU.designs, LABUBU)

    def test_decoded_dimensions(self):
        decoded = inspect('0x0080ff8800', LABUBU.designs, LABUBU)
        assert (decoded.width, decoded.height) == (20, 17)
        assert decoded.variant == 'labubu'
