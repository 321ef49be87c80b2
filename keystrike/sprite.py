"""Sprites: images with a position and a speed, plus collision and bounds checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from .vector import Vector

TRANSPARENT_BIT = 0x8000


@dataclass(frozen=True)
class Image:
    """Row-major pixmap of 16-bit 1:5:5:5 pixels; bit 15 set means transparent."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pixels", tuple(self.pixels))
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must be non-negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    @classmethod
    def filled(cls, width: int, height: int, pixel: int = 0) -> Image:
        """Image whose every pixel has the same value."""
        return cls(width, height, (pixel,) * (width * height))

    def pixel_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def is_opaque_at(self, x: int, y: int) -> bool:
        return not self.pixel_at(x, y) & TRANSPARENT_BIT


class Bound(IntFlag):
    """Screen edges that can be treated as solid."""

    LOWER = 1
    RIGHT = 2
    UPPER = 4
    LEFT = 8


def _within(value: int, start: int, length: int) -> bool:
    return start <= value <= start + length


def _corner_overlap(
    a_pos: Vector, a_img: Image, b_pos: Vector, b_img: Image
) -> tuple[Vector, Vector, int, int] | None:
    """Overlap found from one of the left corners of ``a`` lying inside ``b``.

    Returns the offsets of the overlap inside ``a`` and ``b`` and its size.
    """
    if not _within(a_pos.x, b_pos.x, b_img.width):
        return None

    right_inside = _within(a_pos.x + a_img.width, b_pos.x, b_img.width)
    width = a_img.width if right_inside else b_pos.x + b_img.width - a_pos.x

    if _within(a_pos.y, b_pos.y, b_img.height):
        bottom_inside = _within(a_pos.y + a_img.height, b_pos.y, b_img.height)
        height = a_img.height if bottom_inside else b_pos.y + b_img.height - a_pos.y
        return Vector(0, 0), a_pos - b_pos, width, height

    if _within(a_pos.y + a_img.height, b_pos.y, b_img.height):
        height = a_img.height - (b_pos.y - a_pos.y)
        return Vector(0, b_pos.y - a_pos.y), Vector(a_pos.x - b_pos.x, 0), width, height

    return None


@dataclass
class Sprite:
    """An image drawn at a position that moves by its speed every update."""

    position: Vector
    image: Image
    speed: Vector = field(default_factory=lambda: Vector(0, 0))

    def next_position(self) -> Vector:
        return self.position + self.speed

    def update(self) -> None:
        """Move the sprite by its speed."""
        self.position = self.next_position()

    def collides_with(self, other: Sprite) -> bool:
        """Whether opaque pixels of both sprites overlap at their next positions."""
        a_pos, b_pos = self.next_position(), other.next_position()
        overlap = _corner_overlap(a_pos, self.image, b_pos, other.image)
        if overlap is None:
            swapped = _corner_overlap(b_pos, other.image, a_pos, self.image)
            if swapped is None:
                return False
            in_b, in_a, width, height = swapped
        else:
            in_a, in_b, width, height = overlap

        return any(
            self.image.is_opaque_at(in_a.x + col, in_a.y + row)
            and other.image.is_opaque_at(in_b.x + col, in_b.y + row)
            for row in range(height)
            for col in range(width)
        )

    def is_out_of_bounds(self, hres: int, vres: int) -> bool:
        """Whether the sprite lies wholly outside a ``hres`` x ``vres`` screen."""
        x, y = self.position.x, self.position.y
        return (
            x + self.image.width <= 0
            or y + self.image.height <= 0
            or x >= hres
            or y >= vres
        )

    def crosses_bounds(self, mask: Bound, hres: int, vres: int) -> bool:
        """Whether the next position crosses any of the solid edges in ``mask``."""
        nxt = self.next_position()
        if mask & Bound.LOWER and nxt.y + self.image.height >= vres:
            return True
        if mask & Bound.RIGHT and nxt.x + self.image.width >= hres:
            return True
        if mask & Bound.UPPER and nxt.y < 0:
            return True
        if mask & Bound.LEFT and nxt.x < 0:
            return True
        return False