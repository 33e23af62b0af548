"""
Unit tests for hole position formulas.
"""

import pytest

from binder_toolkit.binders import (
    EvenSpacedPitch,
    EvenSpacedSpan,
    SymmetricGroups,
    hole_centers,
    list_standards,
    lookup_standard,
)

SHEET_HEIGHTS = list(range(100, 401, 25)) + [148, 210, 297]


class TestConcreteStandards:
    """Known hole positions for catalog standards."""

    def test_twenty_hole_on_a5(self):
        """20 holes at 9.7mm pitch centred on a 210mm sheet."""
        holes = lookup_standard("a5-20-hole").hole_centers(210)

        assert len(holes) == 20
        assert holes[0] == pytest.approx(12.85)
        assert holes[-1] == pytest.approx(197.15)
        assert holes[1] - holes[0] == pytest.approx(9.7)

    def test_two_hole_iso_838_on_297(self):
        holes = lookup_standard("a5-2-hole").hole_centers(297)

        assert holes == pytest.approx([108.5, 188.5])

    def test_filofax_on_a5(self):
        holes = lookup_standard("a5-6-hole-filofax").hole_centers(210)

        assert holes == pytest.approx([41.6, 60.6, 79.6, 130.4, 149.4, 168.4])

    def test_six_hole_standard_on_a5(self):
        """70mm central gap: groups centred at 51 and 159."""
        holes = lookup_standard("a5-6-hole-standard").hole_centers(210)

        assert holes == pytest.approx([32, 51, 70, 140, 159, 178])

    def test_four_hole_on_a4(self):
        holes = lookup_standard("a4-4-hole").hole_centers(297)

        assert holes == pytest.approx([28.5, 108.5, 188.5, 268.5])


class TestFormulaProperties:
    """Properties that hold for every standard and sheet height."""

    @pytest.mark.parametrize("standard", list_standards(), ids=lambda s: s.id)
    @pytest.mark.parametrize("height", SHEET_HEIGHTS)
    def test_count_matches_hole_count(self, standard, height):
        assert len(standard.hole_centers(height)) == standard.hole_count

    @pytest.mark.parametrize("standard", list_standards(), ids=lambda s: s.id)
    @pytest.mark.parametrize("height", SHEET_HEIGHTS)
    def test_positions_are_non_decreasing(self, standard, height):
        holes = standard.hole_centers(height)
        assert all(a <= b for a, b in zip(holes, holes[1:]))

    @pytest.mark.parametrize("standard", list_standards(), ids=lambda s: s.id)
    @pytest.mark.parametrize("height", SHEET_HEIGHTS)
    def test_positions_symmetric_about_center(self, standard, height):
        holes = standard.hole_centers(height)
        for top, bottom in zip(holes, reversed(holes)):
            assert top + bottom == pytest.approx(height, abs=1e-6)

    def test_repeated_calls_return_same_positions(self):
        standard = lookup_standard("a5-6-hole-filofax")
        assert standard.hole_centers(210) == standard.hole_centers(210)


class TestEvaluator:
    """Tests for hole_centers() on layout variants."""

    def test_pitch_and_span_layouts_agree(self):
        """Both even layouts use the same formula."""
        by_pitch = hole_centers(EvenSpacedPitch(pitch=80), 4, 297)
        by_span = hole_centers(EvenSpacedSpan(span=80), 4, 297)
        assert by_pitch == by_span

    def test_single_hole_is_centred(self):
        assert hole_centers(EvenSpacedPitch(pitch=10), 1, 200) == [100]

    def test_groups_straddle_gap(self):
        holes = hole_centers(SymmetricGroups(group_gap=50.8, pitch=19), 6, 210)
        assert holes[3] - holes[2] == pytest.approx(50.8)

    def test_unknown_layout_raises_type_error(self):
        with pytest.raises(TypeError, match="Unknown hole layout"):
            hole_centers(object(), 2, 210)
