"""Viewer logic: loading, searching, slideshow navigation and alerts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from picgrid.state import State

FIRST_IMAGE_MESSAGE = "已经是第一张图片了"
LAST_IMAGE_MESSAGE = "已经是最后一张图片了"


class Page(Enum):
    """The two pages the window flips between."""

    IMAGE_BROWSER = "image_browser"
    SLIDESHOW = "slideshow"


class Key(Enum):
    """Keys the slideshow responds to."""

    ESCAPE = "escape"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"


@dataclass(frozen=True)
class ImageClicked:
    """A thumbnail in the grid was clicked."""

    image_idx: int


class Viewer:
    """Holds the state and applies user actions to it."""

    def __init__(self, state: State | None = None) -> None:
        self.state = state if state is not None else State()
        self.query = ""
        self.page = Page.IMAGE_BROWSER

    def load_image_paths(self, directory: str | os.PathLike[str]) -> None:
        """Collect the regular files of a directory, in name order, and refilter."""
        entries = Path(directory).iterdir()
        self.state.image_paths = sorted(entry for entry in entries if entry.is_file())
        self.filter_image_paths(self.query)

    def filter_image_paths(self, query: str) -> None:
        """Keep the images whose path contains the query and restart the slideshow."""
        self.query = query
        self.state.filtered_image_idxs = [
            idx for idx, path in enumerate(self.state.image_paths) if query in str(path)
        ]
        self.set_current_image(0 if self.state.filtered_image_idxs else None)

    def set_current_image(self, image_idx: int | None) -> Path | None:
        """Select the slideshow image by filtered index; return its path."""
        if image_idx is not None and not 0 <= image_idx < self.state.num_images():
            raise IndexError(f"image index {image_idx} out of range")
        self.state.current_image_idx = image_idx
        return self.state.current_image_path()

    def navigate_left(self) -> None:
        """Go to the previous image, or warn when already at the first."""
        idx = self.state.current_image_idx
        if idx is None:
            return
        if idx > 0:
            self.set_current_image(idx - 1)
        else:
            self.show_alert(FIRST_IMAGE_MESSAGE)

    def navigate_right(self) -> None:
        """Go to the next image, or warn when already at the last."""
        idx = self.state.current_image_idx
        if idx is None:
            return
        if idx + 1 < self.state.num_images():
            self.set_current_image(idx + 1)
        else:
            self.show_alert(LAST_IMAGE_MESSAGE)

    def show_alert(self, message: str) -> None:
        """Raise the alert dialog with a message."""
        self.state.show_alert = True
        self.state.alert_message = message

    def close_alert(self) -> None:
        """Dismiss the alert dialog."""
        self.state.show_alert = False

    def open_slideshow(self) -> None:
        """Flip to the slideshow page."""
        self.page = Page.SLIDESHOW

    def handle_image_clicked(self, action: object) -> bool:
        """Show a clicked image in the slideshow; return whether it was handled."""
        if not isinstance(action, ImageClicked):
            return False
        self.set_current_image(action.image_idx)
        self.open_slideshow()
        return True

    def handle_key(self, key: Key) -> None:
        """Apply a key press on the slideshow page."""
        if self.state.show_alert:
            if key is Key.ESCAPE:
                self.close_alert()
            return
        if self.page is not Page.SLIDESHOW:
            return
        if key is Key.ESCAPE:
            self.page = Page.IMAGE_BROWSER
        elif key is Key.ARROW_LEFT:
            self.navigate_left()
        elif key is Key.ARROW_RIGHT:
            self.navigate_right()