"""
Unit tests for content area resolution.
"""

import warnings

import pytest

from binder_toolkit.binders import BinderStandard, EvenSpacedSpan, list_standards, lookup_standard
from binder_toolkit.common.paper import A4, A5
from binder_toolkit.layout import (
    ContentArea,
    DegenerateAreaError,
    PageSide,
    UnsupportedSizeCombination,
    hole_margin,
    resolve_content_area,
)


@pytest.fixture
def twenty_hole():
    return lookup_standard("a5-20-hole")


class TestHoleMargin:

    def test_margin_without_padding(self, twenty_hole):
        """Edge distance plus hole radius."""
        assert hole_margin(twenty_hole, padding=False) == pytest.approx(8.5)

    def test_margin_with_padding_adds_five_mm(self, twenty_hole):
        assert hole_margin(twenty_hole, padding=True) == pytest.approx(13.5)


class TestSameSize:
    """Case 1: stock equals the binder's native size."""

    def test_left_page_on_native_size(self, twenty_hole):
        """Holes on the right edge, content at the origin."""
        area = resolve_content_area(twenty_hole, A5, PageSide.LEFT, padding=False)

        assert area == ContentArea(width=139.5, height=210, offset_x=0, offset_y=0)

    def test_right_page_shifted_by_margin(self, twenty_hole):
        area = resolve_content_area(twenty_hole, A5, PageSide.RIGHT, padding=False)

        assert area.offset_x == pytest.approx(8.5)
        assert area.offset_y == 0
        assert area.width == pytest.approx(139.5)

    def test_side_accepts_plain_string(self, twenty_hole):
        area = resolve_content_area(twenty_hole, A5, "right", padding=False)
        assert area.offset_x == pytest.approx(8.5)

    @pytest.mark.parametrize("standard", list_standards(), ids=lambda s: s.id)
    @pytest.mark.parametrize("padding", [False, True])
    def test_side_flip_offsets_sum_to_margin(self, standard, padding):
        native = standard.native_size
        left = resolve_content_area(standard, native, PageSide.LEFT, padding)
        right = resolve_content_area(standard, native, PageSide.RIGHT, padding)

        assert left.offset_x + right.offset_x == pytest.approx(hole_margin(standard, padding))

    def test_height_never_reduced(self, twenty_hole):
        area = resolve_content_area(twenty_hole, A5, PageSide.LEFT, padding=True)
        assert area.height == A5.height


class TestLargerStock:
    """Case 2: native sheet centred on larger stock."""

    def test_left_page_centred_on_a4(self, twenty_hole):
        area = resolve_content_area(twenty_hole, A4, PageSide.LEFT, padding=False)

        assert area.offset_x == pytest.approx(31)  # (210 - 148) / 2
        assert area.offset_y == pytest.approx(43.5)  # (297 - 210) / 2
        assert area.width == pytest.approx(139.5)
        assert area.height == pytest.approx(210)
        assert not area.approximate

    def test_right_page_adds_margin_to_centring(self, twenty_hole):
        area = resolve_content_area(twenty_hole, A4, PageSide.RIGHT, padding=False)

        assert area.offset_x == pytest.approx(39.5)
        assert area.offset_y == pytest.approx(43.5)


class TestFallback:
    """Case 3: stock smaller than the native size."""

    def test_fallback_warns_and_marks_approximate(self):
        standard = lookup_standard("a4-4-hole")

        with pytest.warns(UnsupportedSizeCombination):
            area = resolve_content_area(standard, A5, PageSide.RIGHT, padding=False)

        assert area.approximate
        assert area.offset_x == pytest.approx(14)  # 11 + 3
        assert area.offset_y == 0
        assert area.width == pytest.approx(196)

    def test_fallback_left_page_at_origin(self):
        standard = lookup_standard("a4-4-hole")

        with pytest.warns(UnsupportedSizeCombination):
            area = resolve_content_area(standard, A5, PageSide.LEFT, padding=True)

        assert area.offset_x == 0

    def test_fallback_is_logged(self, caplog):
        standard = lookup_standard("a4-4-hole")

        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            resolve_content_area(standard, A5, PageSide.LEFT, padding=False)

        assert "approximate" in caplog.text


class TestPurity:

    @pytest.mark.parametrize("standard", list_standards(), ids=lambda s: s.id)
    @pytest.mark.parametrize("side", list(PageSide))
    def test_repeated_calls_identical(self, standard, side):
        first = resolve_content_area(standard, A4, side, padding=True)
        second = resolve_content_area(standard, A4, side, padding=True)
        assert first == second

    @pytest.mark.parametrize("standard", list_standards(), ids=lambda s: s.id)
    @pytest.mark.parametrize("side", list(PageSide))
    def test_padding_reduces_width_by_five_mm(self, standard, side):
        without = resolve_content_area(standard, A4, side, padding=False)
        with_padding = resolve_content_area(standard, A4, side, padding=True)

        assert without.width - with_padding.width == pytest.approx(5)


class TestDegenerateArea:

    def test_margin_wider_than_sheet_raises(self):
        """A margin larger than the sheet is reported, not clamped."""
        standard = BinderStandard(
            id="oversized",
            name="Oversized",
            native_size=A5,
            hole_count=2,
            hole_diameter=6,
            edge_distance=150,
            layout=EvenSpacedSpan(span=80),
        )

        with pytest.raises(DegenerateAreaError, match="oversized"):
            resolve_content_area(standard, A5, PageSide.LEFT, padding=False)

    def test_margin_equal_to_sheet_width_raises(self):
        standard = BinderStandard(
            id="exact",
            name="Exact",
            native_size=A5,
            hole_count=2,
            hole_diameter=6,
            edge_distance=145,
            layout=EvenSpacedSpan(span=80),
        )

        with pytest.raises(DegenerateAreaError):
            resolve_content_area(standard, A4, PageSide.RIGHT, padding=False)
