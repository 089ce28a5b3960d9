"""Image collection state shared by the browser grid and the slideshow."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_IMAGES_PER_ROW = 4


@dataclass
class State:
    """All images found, the ones the search keeps, and the slideshow position."""

    image_paths: list[Path] = field(default_factory=list)
    filtered_image_idxs: list[int] = field(default_factory=list)
    max_images_per_row: int = DEFAULT_IMAGES_PER_ROW
    current_image_idx: int | None = None
    show_alert: bool = False
    alert_message: str = ""

    def __post_init__(self) -> None:
        if self.max_images_per_row < 1:
            raise ValueError("max_images_per_row must be at least 1")

    def num_images(self) -> int:
        """Number of images that pass the current filter."""
        return len(self.filtered_image_idxs)

    def num_rows(self) -> int:
        """Number of grid rows needed to show the filtered images."""
        return -(-self.num_images() // self.max_images_per_row)

    def first_image_idx_for_row(self, row_idx: int) -> int:
        """Filtered index of the first image in a grid row."""
        if row_idx < 0:
            raise IndexError(f"row index {row_idx} is negative")
        return row_idx * self.max_images_per_row

    def num_images_for_row(self, row_idx: int) -> int:
        """Number of images shown in a grid row."""
        remaining = self.num_images() - self.first_image_idx_for_row(row_idx)
        if remaining < 0:
            raise IndexError(f"row {row_idx} lies past the last image")
        return min(self.max_images_per_row, remaining)

    def row_items(self, row_idx: int) -> list[tuple[int, Path]]:
        """Pairs of (filtered index, path) for the images in a grid row."""
        first = self.first_image_idx_for_row(row_idx)
        count = self.num_images_for_row(row_idx)
        return [(idx, self.image_path(idx)) for idx in range(first, first + count)]

    def image_path(self, image_idx: int) -> Path:
        """Path of the image at a filtered index."""
        if not 0 <= image_idx < self.num_images():
            raise IndexError(f"image index {image_idx} out of range")
        return self.image_paths[self.filtered_image_idxs[image_idx]]

    def current_image_path(self) -> Path | None:
        """Path of the slideshow image, or None when there is none."""
        if self.current_image_idx is None:
            return None
        return self.image_path(self.current_image_idx)