import pytest

from pendu.drawing import Line, Oval, figure_shapes, gallows_lines


def _coords(line):
    return (line.x1, line.y1, line.x2, line.y2)


def test_no_errors_draws_nothing():
    assert figure_shapes(0, 600, 200) == []


@pytest.mark.parametrize("errors", range(0, 12))
def test_one_part_per_error_up_to_eight(errors):
    assert len(figure_shapes(errors, 600, 200)) == min(errors, 8)


@pytest.mark.parametrize("errors", range(0, 8))
def test_each_error_extends_previous_drawing(errors):
    before = figure_shapes(errors, 600, 200)
    after = figure_shapes(errors + 1, 600, 200)
    assert after[: len(before)] == before


def test_more_than_eight_errors_same_as_eight():
    assert figure_shapes(12, 600, 200) == figure_shapes(8, 600, 200)


def test_first_part_is_round_head():
    head = figure_shapes(1, 600, 200)[0]
    assert isinstance(head, Oval)
    assert head.width == head.height == 30


def test_other_parts_are_lines_at_fixed_positions():
    parts = figure_shapes(8, 600, 200)
    assert all(isinstance(part, Line) for part in parts[1:])
    assert [_coords(part) for part in parts[1:]] == [
        (300, 96, 300, 166),
        (300, 116, 270, 146),
        (300, 116, 330, 146),
        (300, 166, 270, 196),
        (300, 166, 330, 196),
        (293, 76, 297, 76),
        (303, 76, 307, 76),
    ]


def test_gallows_has_five_segments():
    assert len(gallows_lines(600, 200)) == 5


def test_rope_reaches_top_of_head():
    rope = gallows_lines(600, 200)[-1]
    head = figure_shapes(1, 600, 200)[0]
    assert rope.y2 == head.y
    assert rope.x2 == head.x + head.width // 2


def test_body_hangs_from_bottom_of_head():
    head, body = figure_shapes(2, 600, 200)
    assert body.x1 == head.x + head.width // 2
    assert body.y1 == head.y + head.height


@pytest.mark.parametrize("size", [(600, 200), (800, 400), (300, 150)])
def test_gallows_fits_in_area(size):
    width, height = size
    for line in gallows_lines(width, height):
        for x in (line.x1, line.x2):
            assert 0 <= x <= width
        for y in (line.y1, line.y2):
            assert 0 <= y <= height


def test_ground_sits_near_bottom():
    ground = gallows_lines(600, 200)[0]
    assert ground.y1 == ground.y2 == 200 - 5