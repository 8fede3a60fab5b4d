import pytest

from bataille3d.display import render_masked, render_surface, render_zone
from bataille3d.models import DEPTHS, ROWS, Surface


def row_lines(text):
    return [line for line in text.splitlines() if line[:1].isdigit()]


def test_depth_titles_present():
    text = render_surface(Surface())
    assert text.count("Profondeur") == DEPTHS
    assert "Profondeur 100 -> 0" in text


def test_one_line_per_row_and_depth():
    surface = Surface()
    for text in (render_surface(surface), render_masked(surface), render_zone(surface, 0)):
        assert len(row_lines(text)) == ROWS * DEPTHS


def test_full_render_shows_ships():
    surface = Surface()
    surface[(0, 0, 0)] = "A"
    assert "|  A " in render_surface(surface)


def test_masked_render_hides_ships():
    surface = Surface()
    surface[(0, 0, 0)] = "A"
    surface[(1, 15, 2)] = "B"
    masked = render_masked(surface)
    assert "A" not in masked
    assert "B" not in masked


@pytest.mark.parametrize("mark", ["T", "V", "C", "R"])
def test_masked_render_shows_shot_results(mark):
    surface = Surface()
    surface[(3, 2, 1)] = mark
    assert f"|  {mark} " in render_masked(surface)


def test_middle_columns_are_not_drawn():
    surface = Surface()
    surface[(0, 10, 0)] = "Q"
    assert "Q" not in render_surface(surface)
    surface[(0, 6, 0)] = "Q"
    assert "Q" in render_surface(surface)


def test_last_column_closed_in_both_renders():
    surface = Surface()
    surface[(0, 19, 0)] = "T"
    assert "|  T |" in render_surface(surface)
    assert "|  T |" in render_masked(surface)
    assert "|     |" in render_masked(Surface())


def test_zone_render_uses_offset():
    surface = Surface()
    surface[(2, 14, 1)] = "Q"
    assert "|  Q " in render_zone(surface, 14)
    assert "Q" not in render_zone(surface, 0)


def test_zone_render_rejects_zone_past_board():
    with pytest.raises(IndexError):
        render_zone(Surface(), 15)