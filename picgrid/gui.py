"""Tk front end: a searchable thumbnail grid and a full-window slideshow."""

from __future__ import annotations

import argparse
import tkinter as tk
from pathlib import Path

from PIL import Image, ImageTk

from picgrid.state import State
from picgrid.viewer import ImageClicked, Key, Page, Viewer

DEFAULT_IMAGE_DIR = "resources/images"
CELL_SIZE = 256
_KEYS = {"Escape": Key.ESCAPE, "Left": Key.ARROW_LEFT, "Right": Key.ARROW_RIGHT}


def fit_biggest(image_size: tuple[int, int], box_size: tuple[int, int]) -> tuple[int, int]:
    """Scale an image, keeping its aspect, so that it covers the whole box."""
    iw, ih = image_size
    bw, bh = box_size
    if min(iw, ih, bw, bh) <= 0:
        raise ValueError("sizes must be positive")
    scale = max(bw / iw, bh / ih)
    return max(bw, round(iw * scale)), max(bh, round(ih * scale))


def grid_layout(state: State, cell_size: int) -> list[list[tuple[int, Path, int, int]]]:
    """Rows of (image index, path, x, y) for the thumbnail grid."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    return [
        [
            (idx, path, col * cell_size, row * cell_size)
            for col, (idx, path) in enumerate(state.row_items(row))
        ]
        for row in range(state.num_rows())
    ]


def _load_photo(path: Path, box: tuple[int, int]) -> ImageTk.PhotoImage | None:
    try:
        with Image.open(path) as img:
            img.load()
            size = fit_biggest(img.size, box)
            scaled = img.resize(size)
    except (OSError, ValueError):
        return None
    left = (size[0] - box[0]) // 2
    top = (size[1] - box[1]) // 2
    return ImageTk.PhotoImage(scaled.crop((left, top, left + box[0], top + box[1])))


class App:
    """Main window showing the browser and slideshow pages over one viewer."""

    def __init__(self, root: tk.Tk, directory: str = DEFAULT_IMAGE_DIR,
                 cell_size: int = CELL_SIZE) -> None:
        self.root = root
        self.viewer = Viewer()
        self.cell_size = cell_size
        self._thumbs: dict[Path, ImageTk.PhotoImage | None] = {}
        self._slide_photo: ImageTk.PhotoImage | None = None

        root.title("Image Viewer")
        self._body = tk.Frame(root)
        self._body.pack(fill=tk.BOTH, expand=True)
        self._browser = self._build_browser()
        self._slideshow = self._build_slideshow()
        for frame in (self._browser, self._slideshow):
            frame.place(relx=0, rely=0, relwidth=1, relheight=1)

        self._alert = tk.Frame(self._body, bg="#333", highlightbackground="#555",
                               highlightthickness=1)
        self._alert_label = tk.Label(self._alert, bg="#333", fg="#fff",
                                     font=("TkDefaultFont", 12), wraplength=260)
        self._alert_label.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)
        for widget in (self._alert, self._alert_label):
            widget.bind("<Button-1>", lambda _e: self._dismiss_alert())
        root.bind("<Key>", self._on_key)

        self.viewer.load_image_paths(directory)
        self.show_page(Page.IMAGE_BROWSER)
        self.refresh()

    def _build_browser(self) -> tk.Frame:
        frame = tk.Frame(self._body)
        menu = tk.Frame(frame)
        menu.pack(fill=tk.X)
        tk.Label(menu, text="Search", fg="#888").pack(side=tk.LEFT, padx=(75, 4))
        self._query = tk.StringVar()
        tk.Entry(menu, textvariable=self._query, width=20).pack(side=tk.LEFT)
        self._query.trace_add("write", self._on_query)
        tk.Button(menu, text="Slideshow",
                  command=lambda: self.show_page(Page.SLIDESHOW)).pack(side=tk.RIGHT)

        self._grid = tk.Canvas(frame, highlightthickness=0)
        scrollbar = tk.Scrollbar(frame, orient=tk.VERTICAL, command=self._grid.yview)
        self._grid.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self._grid.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        return frame

    def _build_slideshow(self) -> tk.Frame:
        frame = tk.Frame(self._body, bg="black")
        self._slide = tk.Canvas(frame, bg="black", highlightthickness=0)
        self._slide.pack(fill=tk.BOTH, expand=True)
        self._slide.bind("<Configure>", lambda _e: self._draw_slide())
        left = tk.Button(frame, text="◀", takefocus=False, command=self._on_left)
        right = tk.Button(frame, text="▶", takefocus=False, command=self._on_right)
        left.place(relx=0, rely=0, relheight=1, width=50)
        right.place(relx=1, rely=0, relheight=1, width=50, anchor=tk.NE)
        return frame

    def refresh(self) -> None:
        """Redraw the grid, the slideshow image and the alert from the state."""
        self._draw_grid()
        self._draw_slide()
        self._update_alert()

    def show_page(self, page: Page) -> None:
        """Bring a page to the front."""
        self.viewer.page = page
        if page is Page.SLIDESHOW:
            self._slideshow.tkraise()
            self._slide.focus_set()
            self._draw_slide()
        else:
            self._browser.tkraise()
        self._update_alert()

    def _thumbnail(self, path: Path) -> ImageTk.PhotoImage | None:
        if path not in self._thumbs:
            self._thumbs[path] = _load_photo(path, (self.cell_size, self.cell_size))
        return self._thumbs[path]

    def _draw_grid(self) -> None:
        canvas = self._grid
        canvas.delete("all")
        size = self.cell_size
        for row in grid_layout(self.viewer.state, size):
            for idx, path, x, y in row:
                tag = f"image{idx}"
                photo = self._thumbnail(path)
                if photo is None:
                    canvas.create_rectangle(x, y, x + size, y + size, fill="#444",
                                            outline="", tags=(tag,))
                    canvas.create_text(x + size // 2, y + size // 2, text=path.name,
                                       fill="#ddd", width=size - 10, tags=(tag,))
                else:
                    canvas.create_image(x, y, anchor=tk.NW, image=photo, tags=(tag,))
                canvas.tag_bind(tag, "<ButtonRelease-1>",
                                lambda _e, i=idx: self._on_image_clicked(i))
        state = self.viewer.state
        canvas.configure(scrollregion=(0, 0, state.max_images_per_row * size,
                                       state.num_rows() * size))

    def _draw_slide(self) -> None:
        canvas = self._slide
        canvas.delete("all")
        width, height = canvas.winfo_width(), canvas.winfo_height()
        if width < 2 or height < 2:
            return
        path = self.viewer.state.current_image_path()
        self._slide_photo = None if path is None else _load_photo(path, (width, height))
        if self._slide_photo is not None:
            canvas.create_image(width // 2, height // 2, image=self._slide_photo)
        else:
            label = "No image" if path is None else path.name
            canvas.create_text(width // 2, height // 2, text=label, fill="#888")

    def _update_alert(self) -> None:
        state = self.viewer.state
        if state.show_alert:
            self._alert_label.configure(text=state.alert_message)
            self._alert.place(relx=0.5, rely=0.5, anchor=tk.CENTER, width=300, height=150)
            self._alert.lift()
        else:
            self._alert.place_forget()

    def _dismiss_alert(self) -> None:
        self.viewer.close_alert()
        self._update_alert()

    def _on_query(self, *_args: object) -> None:
        self.viewer.filter_image_paths(self._query.get())
        self.refresh()

    def _on_image_clicked(self, image_idx: int) -> None:
        self.viewer.handle_image_clicked(ImageClicked(image_idx))
        self.show_page(self.viewer.page)

    def _on_left(self) -> None:
        self.viewer.navigate_left()
        self._draw_slide()
        self._update_alert()

    def _on_right(self) -> None:
        self.viewer.navigate_right()
        self._draw_slide()
        self._update_alert()

    def _on_key(self, event: tk.Event) -> None:
        key = _KEYS.get(event.keysym)
        if key is None:
            return
        page = self.viewer.page
        self.viewer.handle_key(key)
        if self.viewer.page is not page:
            self.show_page(self.viewer.page)
        else:
            self._draw_slide()
            self._update_alert()


def main(argv: list[str] | None = None) -> int:
    """Open the viewer window on a directory of images."""
    parser = argparse.ArgumentParser(description="Browse a directory of images.")
    parser.add_argument("directory", nargs="?", default=DEFAULT_IMAGE_DIR,
                        help="directory holding the images")
    args = parser.parse_args(argv)
    root = tk.Tk()
    root.geometry("1100x800")
    try:
        App(root, args.directory)
    except OSError as exc:
        root.destroy()
        parser.error(f"cannot read {args.directory}: {exc}")
    root.mainloop()
    return 0