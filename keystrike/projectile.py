"""Projectiles fired at enemies, either homing on one target or flying straight."""

from __future__ import annotations

from dataclasses import dataclass

from .sprite import Image, Sprite
from .vector import Vector, vector_between


def _center(sprite: Sprite) -> Vector:
    return sprite.position + Vector(sprite.image.width // 2, sprite.image.height // 2)


def _velocity(direction: Vector, speed_modifier: float) -> Vector:
    """``direction`` scaled to a length of about ``speed_modifier``."""
    norm = direction.norm()
    if norm == 0:
        return Vector(0, 0)
    return direction.scaled(speed_modifier).scaled(1.0 / norm)


@dataclass
class Projectile:
    """A moving sprite that hits enemies; it may home on a target sprite."""

    sprite: Sprite
    speed_modifier: float
    letter: str = ""
    target: Sprite | None = None
    affects_all: bool = False

    def update_speed(self) -> None:
        """Point the speed at the target's centre; without a target the speed is kept."""
        if self.target is None:
            return
        direction = vector_between(self.sprite.position, _center(self.target))
        self.sprite.speed = _velocity(direction, self.speed_modifier)

    def update(self) -> None:
        """Move by the current speed, then steer towards the target."""
        self.sprite.update()
        self.update_speed()

    def collides_with(self, sprite: Sprite) -> bool:
        """Whether the projectile and ``sprite`` overlap at their next positions."""
        return self.sprite.collides_with(sprite)


def tracking_projectile(
    image: Image,
    position: Vector,
    target: Sprite,
    speed_modifier: float,
    letter: str,
) -> Projectile:
    """Projectile that homes on ``target`` and only kills enemies bearing ``letter``."""
    if len(letter) != 1:
        raise ValueError(f"expected a single letter, got {letter!r}")
    projectile = Projectile(Sprite(position, image), speed_modifier, letter, target)
    projectile.update_speed()
    return projectile


def radial_projectile(
    image: Image,
    position: Vector,
    direction: Vector,
    speed_modifier: float,
) -> Projectile:
    """Projectile flying straight along ``direction`` that kills any enemy it hits."""
    if direction.norm() == 0:
        raise ValueError("a radial projectile needs a non-zero direction")
    sprite = Sprite(position, image, _velocity(direction, speed_modifier))
    return Projectile(sprite, speed_modifier, affects_all=True)