# picgrid

A small desktop image viewer. It shows the files in a directory as a grid
of thumbnails, lets you narrow the grid down with a search box, and opens
any of them in a full-window slideshow.

## Installing

```
pip install .
```

The window is drawn with Tk (`tkinter`), which ships with most Python
installations. Images are read through Pillow.

## Running

```
picgrid [DIRECTORY]
```

`DIRECTORY` defaults to `resources/images`, relative to the directory you
start from. Every regular file in it is listed, sorted by name. Files that
Pillow cannot open are shown as a grey tile with the file name. If the
directory cannot be read, the command exits with an error message.

### The grid

- Thumbnails are laid out four to a row in 256-pixel cells. Each image is
  scaled, keeping its aspect ratio, until it covers its cell, and is then
  cropped to the cell around its centre.
- Type in the search box to keep only the images whose path contains the
  text you typed. The filter is applied on every keystroke, and the
  slideshow goes back to the first matching image.
- Click a thumbnail to open it in the slideshow.
- The **Slideshow** button opens the slideshow at the current image.

### The slideshow

- The **Left** / **Right** arrow keys, or the arrow buttons at the edges
  of the window, step through the filtered images.
- Stepping back from the first image or on from the last shows a short
  notice instead. While it is shown, **Escape** dismisses it, as does a
  click on the notice; other keys are ignored.
- Otherwise **Escape** returns to the grid.

If no image matches the search, the slideshow shows "No image".

## Using it from Python

The browsing logic in `picgrid.viewer` does not depend on the window and
can be driven directly:

```python
from picgrid.viewer import Key, Viewer

viewer = Viewer()
viewer.load_image_paths("resources/images")
viewer.filter_image_paths("holiday")
viewer.open_slideshow()
viewer.handle_key(Key.ARROW_RIGHT)
print(viewer.state.current_image_path())
print(viewer.state.show_alert, viewer.state.alert_message)
```

- `Viewer` holds a `State`, the current `query` and the current `page`
  (`Page.IMAGE_BROWSER` or `Page.SLIDESHOW`). Its methods are
  `load_image_paths`, `filter_image_paths`, `set_current_image`,
  `navigate_left`, `navigate_right`, `show_alert`, `close_alert`,
  `open_slideshow`, `handle_image_clicked` (which takes an
  `ImageClicked(image_idx)`) and `handle_key` (which takes a `Key`:
  `ESCAPE`, `ARROW_LEFT` or `ARROW_RIGHT`).
- `picgrid.state.State` holds the list of image paths and the filtered
  view of them. It answers layout questions with `num_images()`,
  `num_rows()`, `first_image_idx_for_row(row_idx)`,
  `num_images_for_row(row_idx)` and `row_items(row_idx)`, and looks up
  paths with `image_path(image_idx)` and `current_image_path()`. Indexes
  out of range raise `IndexError`.
- `picgrid.gui` has the Tk `App`, the `main` function behind the
  `picgrid` command, and two helpers: `fit_biggest(image_size, box_size)`,
  the covering scale used for thumbnails and slides, and
  `grid_layout(state, cell_size)`, the pixel positions of the thumbnails.

## Running the tests

```
pip install .[test]
pytest
```