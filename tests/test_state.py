from pathlib import Path

import pytest

from picgrid.state import DEFAULT_IMAGES_PER_ROW, State


def make_state(count, per_row=DEFAULT_IMAGES_PER_ROW):
    paths = [Path(f"img{i}.png") for i in range(count)]
    return State(
        image_paths=paths,
        filtered_image_idxs=list(range(count)),
        max_images_per_row=per_row,
    )


def test_defaults():
    state = State()
    assert state.max_images_per_row == 4
    assert state.num_images() == 0
    assert state.num_rows() == 0
    assert state.current_image_path() is None
    assert state.show_alert is False


def test_invalid_row_width():
    with pytest.raises(ValueError):
        State(max_images_per_row=0)


@pytest.mark.parametrize("count", [0, 1, 3, 4, 5, 8, 9, 17])
def test_rows_cover_all_images(count):
    state = make_state(count)
    per_row = [state.num_images_for_row(r) for r in range(state.num_rows())]
    assert sum(per_row) == count
    assert all(0 < n <= state.max_images_per_row for n in per_row)
    assert all(n == state.max_images_per_row for n in per_row[:-1])


def test_exact_multiple_has_full_rows():
    state = make_state(8)
    assert state.num_rows() * state.max_images_per_row == state.num_images()


def test_first_image_idx_for_row():
    state = make_state(10, per_row=3)
    firsts = [state.first_image_idx_for_row(r) for r in range(state.num_rows())]
    assert firsts[0] == 0
    assert all(b - a == state.max_images_per_row for a, b in zip(firsts, firsts[1:]))


def test_row_past_end_raises():
    state = make_state(4)
    assert state.num_images_for_row(1) == 0
    with pytest.raises(IndexError):
        state.num_images_for_row(2)
    with pytest.raises(IndexError):
        state.first_image_idx_for_row(-1)


def test_row_items_follow_filter():
    paths = [Path(f"p{i}.jpg") for i in range(6)]
    state = State(image_paths=paths, filtered_image_idxs=[1, 3, 5], max_images_per_row=2)
    rows = [state.row_items(r) for r in range(state.num_rows())]
    flat = [item for row in rows for item in row]
    assert [idx for idx, _ in flat] == list(range(state.num_images()))
    assert [path for _, path in flat] == [paths[1], paths[3], paths[5]]


def test_image_path_bounds():
    state = make_state(2)
    assert state.image_path(1) == state.image_paths[1]
    with pytest.raises(IndexError):
        state.image_path(2)
    with pytest.raises(IndexError):
        state.image_path(-1)


def test_current_image_path():
    state = make_state(3)
    state.current_image_idx = 2
    assert state.current_image_path() == state.image_paths[2]