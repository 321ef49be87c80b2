import pytest

from keystrike.projectile import Projectile, radial_projectile, tracking_projectile
from keystrike.sprite import Image, Sprite
from keystrike.vector import Vector

DOT = Image.filled(2, 2)


def test_tracking_speed_points_at_target_centre():
    target = Sprite(Vector(30, 40), Image.filled(0, 0))
    projectile = tracking_projectile(DOT, Vector(0, 0), target, 10, "a")
    assert projectile.sprite.speed == Vector(6, 8)
    assert projectile.letter == "a"
    assert projectile.affects_all is False
    assert projectile.target is target


def test_tracking_uses_half_of_the_target_image():
    plain = Sprite(Vector(30, 40), Image.filled(0, 0))
    sized = Sprite(Vector(28, 37), Image.filled(4, 6))
    first = tracking_projectile(DOT, Vector(0, 0), plain, 10, "a")
    second = tracking_projectile(DOT, Vector(0, 0), sized, 10, "a")
    assert first.sprite.speed == second.sprite.speed


def test_tracking_letter_must_be_single():
    target = Sprite(Vector(30, 40), DOT)
    with pytest.raises(ValueError):
        tracking_projectile(DOT, Vector(0, 0), target, 10, "ab")


def test_projectile_on_target_centre_stands_still():
    target = Sprite(Vector(10, 10), Image.filled(0, 0))
    projectile = tracking_projectile(DOT, Vector(10, 10), target, 7, "q")
    assert projectile.sprite.speed == Vector(0, 0)


def test_radial_projectile_straight_up():
    projectile = radial_projectile(DOT, Vector(10, 10), Vector(0, -1), 5)
    assert projectile.sprite.speed == Vector(0, -5)
    assert projectile.affects_all is True
    assert projectile.target is None


def test_radial_diagonal_is_symmetric():
    projectile = radial_projectile(DOT, Vector(0, 0), Vector(1, 1), 5)
    speed = projectile.sprite.speed
    assert speed.x == speed.y
    assert speed.x > 0


def test_radial_zero_direction_raises():
    with pytest.raises(ValueError):
        radial_projectile(DOT, Vector(0, 0), Vector(0, 0), 5)


def test_update_without_target_moves_and_keeps_speed():
    projectile = radial_projectile(DOT, Vector(10, 10), Vector(-1, 0), 3)
    speed = projectile.sprite.speed
    projectile.update()
    assert projectile.sprite.position == Vector(10, 10) + speed
    assert projectile.sprite.speed == speed


def test_update_resteers_towards_target():
    target = Sprite(Vector(100, 0), Image.filled(0, 0))
    projectile = tracking_projectile(DOT, Vector(0, 50), target, 10, "z")
    start_speed = projectile.sprite.speed
    projectile.update()
    new_position = projectile.sprite.position
    assert new_position == Vector(0, 50) + start_speed
    fresh = tracking_projectile(DOT, new_position, target, 10, "z")
    assert projectile.sprite.speed == fresh.sprite.speed


def test_released_target_keeps_current_speed():
    target = Sprite(Vector(30, 40), Image.filled(0, 0))
    projectile = tracking_projectile(DOT, Vector(0, 0), target, 10, "a")
    speed = projectile.sprite.speed
    projectile.target = None
    target.position = Vector(500, 500)
    projectile.update_speed()
    assert projectile.sprite.speed == speed


def test_collides_with_overlapping_sprite():
    projectile = Projectile(Sprite(Vector(0, 0), DOT), 1.0, "a")
    near = Sprite(Vector(1, 1), DOT)
    far = Sprite(Vector(50, 50), DOT)
    assert projectile.collides_with(near) is True
    assert projectile.collides_with(far) is False