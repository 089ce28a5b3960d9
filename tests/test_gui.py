from pathlib import Path

import pytest

from picgrid.gui import fit_biggest, grid_layout
from picgrid.state import State


def make_state(count, per_row=4):
    return State(
        image_paths=[Path(f"img{i}.png") for i in range(count)],
        filtered_image_idxs=list(range(count)),
        max_images_per_row=per_row,
    )


@pytest.mark.parametrize(
    "image_size, box_size",
    [((100, 100), (50, 50)), ((400, 200), (256, 256)), ((30, 90), (256, 256)),
     ((1920, 1080), (800, 600)), ((256, 256), (256, 256))],
)
def test_fit_biggest_covers_box(image_size, box_size):
    width, height = fit_biggest(image_size, box_size)
    assert width >= box_size[0] and height >= box_size[1]
    assert width == box_size[0] or height == box_size[1]
    ratio = image_size[0] / image_size[1]
    assert abs(width / height - ratio) < 0.02 * ratio


def test_fit_biggest_same_aspect_matches_box():
    assert fit_biggest((100, 100), (50, 50)) == (50, 50)


@pytest.mark.parametrize("image_size, box_size", [((0, 10), (5, 5)), ((10, 10), (5, 0))])
def test_fit_biggest_rejects_empty(image_size, box_size):
    with pytest.raises(ValueError):
        fit_biggest(image_size, box_size)


@pytest.mark.parametrize("count", [0, 1, 4, 7, 12])
def test_grid_layout_places_every_image_once(count):
    state = make_state(count)
    rows = grid_layout(state, 256)
    assert len(rows) == state.num_rows()
    flat = [cell for row in rows for cell in row]
    assert [idx for idx, *_ in flat] == list(range(count))
    assert [path for _, path, _, _ in flat] == state.image_paths


def test_grid_layout_positions():
    state = make_state(7, per_row=3)
    cell = 100
    rows = grid_layout(state, cell)
    for row_idx, row in enumerate(rows):
        assert len(row) <= state.max_images_per_row
        assert all(y == row_idx * cell for *_, y in row)
        xs = [x for _, _, x, _ in row]
        assert xs == [col * cell for col in range(len(row))]


def test_grid_layout_rejects_bad_cell():
    with pytest.raises(ValueError):
        grid_layout(make_state(3), 0)