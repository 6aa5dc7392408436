"""Tests for the grid layout tokenizer and parser."""

import numpy as np
import pytest

from gridder.errors import EmbeddedConstraintError
from gridder.layout import Region, RegionRegistry, TokenKind, parse_layout, tokenize

EXAMPLE_LAYOUT = (
    "    {c1                 +   +     c2}    "
    "    {c3:wx1,wy2,i*5,fxy +   c4    + }    "
    "    {|                  -   -     c5}    "
    "    {|                  -   c6    + }    "
)

COMPACT_LAYOUT = "{c1++c2}{c3:wx1,wy2,i*5,fxy+c4+}{|--c5}{|-c6+}"

# name -> (col, row, width, height, constraints)
EXPECTED_REGIONS = {
    "c1": (0, 0, 3, 1, ""),
    "c2": (3, 0, 1, 1, ""),
    "c3": (0, 1, 2, 3, "wx 1 wy 2 i* 5 f xy"),
    "c4": (2, 1, 2, 1, ""),
    "c5": (3, 2, 1, 1, ""),
    "c6": (2, 3, 2, 1, ""),
}


def kinds(text):
    return [token.kind for token in tokenize(text)]


def test_tokenize_structural_characters():
    assert kinds("{}|^+<-") == [
        TokenKind.ROW_START,
        TokenKind.ROW_END,
        TokenKind.EXTEND_DOWN,
        TokenKind.EXTEND_DOWN,
        TokenKind.EXTEND_RIGHT,
        TokenKind.EXTEND_RIGHT,
        TokenKind.FILLER,
    ]


def test_tokenize_identifiers_stop_at_structural_characters():
    tokens = list(tokenize("{abc+d:wx1,a.b}"))
    assert [t.text for t in tokens] == ["{", "abc", "+", "d:wx1,a.b", "}"]
    assert tokens[1].kind is TokenKind.IDENTIFIER
    assert tokens[3].offset == 5


def test_tokenize_skips_whitespace():
    tokens = list(tokenize("  \t{ c1\n  c2 }  "))
    assert [t.text for t in tokens] == ["{", "c1", "c2", "}"]


def test_tokenize_is_lazy():
    stream = tokenize("{a b}")
    assert next(stream).kind is TokenKind.ROW_START
    assert next(stream).text == "a"


@pytest.mark.parametrize("layout", [EXAMPLE_LAYOUT, COMPACT_LAYOUT])
@pytest.mark.parametrize("name,expected", list(EXPECTED_REGIONS.items()))
def test_example_layout(layout, name, expected):
    regions = parse_layout(layout)
    region = regions.get(name)
    assert region is not None
    assert (region.col, region.row, region.width, region.height, region.constraints) == expected


def test_example_layout_region_order():
    regions = parse_layout(EXAMPLE_LAYOUT)
    assert len(regions) == 6
    assert regions.names() == ["c1", "c2", "c3", "c4", "c5", "c6"]


def test_single_row():
    regions = parse_layout("{c1 + + c2}")
    assert regions.get("c1") == Region("c1", row=0, col=0, width=3, height=1)
    assert regions.get("c2") == Region("c2", row=0, col=3, width=1, height=1)


def test_filler_does_not_extend():
    regions = parse_layout("{c1 - c2 -}")
    assert regions.get("c1").width == 1
    assert regions.get("c2").col == 2


def test_synonyms_behave_like_plus_and_bar():
    assert list(parse_layout("{a < b}{^ - -}")) == list(parse_layout("{a + b}{| - -}"))


def test_extend_right_without_region_only_advances_column():
    regions = parse_layout("{+ + a}")
    assert regions.get("a").col == 2
    assert regions.get("a").width == 1


def test_extend_right_does_not_cross_rows():
    regions = parse_layout("{a}{+ b}")
    assert regions.get("a").width == 1
    assert regions.get("b").col == 1


def test_extend_down_without_region_above_only_advances_column():
    regions = parse_layout("{| a}")
    assert regions.get("a") == Region("a", row=0, col=1)


def test_extend_down_searches_past_rows_without_match():
    regions = parse_layout("{a b}{- c}{| -}")
    assert regions.get("a").height == 2


def test_extend_down_prefers_nearest_row():
    regions = parse_layout("{a}{b}{|}")
    assert regions.get("a").height == 1
    assert regions.get("b").height == 2


def test_empty_layout():
    regions = parse_layout("")
    assert len(regions) == 0
    assert regions.grid_shape() == (0, 0)
    assert regions.cell_map().shape == (0, 0)


def test_missing_name_is_not_found():
    regions = parse_layout(EXAMPLE_LAYOUT)
    assert regions.get("nobody") is None
    assert "nobody" not in regions
    assert "c1" in regions


def test_duplicate_name_resolves_to_first():
    regions = parse_layout("{a b a}")
    assert len(regions) == 3
    assert regions.get("a").col == 0


def test_none_is_rejected():
    with pytest.raises(TypeError):
        parse_layout(None)
    with pytest.raises(TypeError):
        RegionRegistry().get(None)


def test_malformed_embedded_constraint_aborts_parse():
    with pytest.raises(EmbeddedConstraintError, match="zz9"):
        parse_layout("{a b:wx1,zz9}")


def test_empty_embedded_spec():
    regions = parse_layout("{a: b}")
    assert regions.get("a").constraints == ""


@pytest.mark.parametrize("layout", ["{a::wx1}", "{a:,wx1}", "{a:wx1,,wy2}"])
def test_empty_embedded_item_aborts_parse(layout):
    with pytest.raises(EmbeddedConstraintError):
        parse_layout(layout)


@pytest.mark.parametrize(
    "identifier,name,constraints",
    [
        ("a:wx1:", "a", "wx 1"),
        ("a:wx1:fxy", "a", "wx 1"),
        ("a::", "a", ""),
        (":", "", ""),
    ],
)
def test_identifier_colon_segments(identifier, name, constraints):
    region = parse_layout("{" + identifier + "}")[0]
    assert (region.name, region.constraints) == (name, constraints)


def test_filler_after_region_leaves_it_one_column_wide():
    # "-" never widens a region, even right after an identifier, so c4 in
    # this variant of the example ends up one column wide rather than two.
    regions = parse_layout("{c1 + + c2}{c3:wx1,wy2,i*5,fxy + c4 -}{| - - c5}{| - c6 +}")
    assert len(regions) == 6
    c4 = regions.get("c4")
    assert (c4.col, c4.row, c4.width, c4.height) == (2, 1, 1, 1)
    for name in ["c1", "c2", "c3", "c5", "c6"]:
        region = regions.get(name)
        assert (region.col, region.row, region.width, region.height, region.constraints) == EXPECTED_REGIONS[name]


def test_registry_is_read_only():
    regions = parse_layout("{a}")
    with pytest.raises(TypeError):
        regions[0] = Region("b", 0, 0)
    with pytest.raises(AttributeError):
        regions[0].width = 2


def test_cell_map():
    regions = parse_layout(EXAMPLE_LAYOUT)
    expected = np.array([
        [0, 0, 0, 1],
        [2, 2, 3, 3],
        [2, 2, -1, 4],
        [2, 2, 5, 5],
    ])
    assert regions.grid_shape() == (4, 4)
    np.testing.assert_array_equal(regions.cell_map(), expected)
