# keystrike

Building blocks for a typing shooter. In this game, enemy ships fall down the
screen and each one carries a character. Typing that character fires a homing
projectile at the ship.

The package has no graphics code and no device code. It provides these pieces:

- integer vectors and a small random generator
- sprites with pixel-exact collisions
- the shuffled letter queues that enemies draw their characters from
- keyboard and mouse decoding
- projectiles
- player statistics
- a highscore table kept in a text file

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `keystrike.vector`

- `Vector(x, y)` is a frozen integer vector. It supports `+`, `-` and unary `-`.
  - `norm()` returns the length of the vector.
  - `scaled(factor)` multiplies both components by `factor` and rounds each result, with halves rounded away from zero.
- `vector_between(start, end)` returns `end - start`.
- `gcd(a, b)` computes the greatest common divisor with Euclid's algorithm.
- `XorShift32(seed)` is a 32-bit xorshift generator.
  - `next()` advances the generator and returns the new state.
  - `between(low, high)` returns an integer in the closed range `low`..`high`. It raises `ValueError` when the range is empty.

### `keystrike.letter_queue`

`CharQueue` is a queue of single characters. Its methods:

- `insert(char, position)`
- `delete(position)`
- `pop()` removes the front character. It raises `IndexError` when the queue is empty.
- `retrieve(position)` returns `"\0"` when the position is out of range.
- `is_empty()`
- `clear()`

It also supports `len()` and iteration.

### `keystrike.sprite`

- `Image(width, height, pixels)` is a row-major pixmap of 16-bit pixels. A pixel with bit 15 set is transparent.
  - `Image.filled(width, height, pixel)` builds an image in which every pixel has the same value.
  - `pixel_at(x, y)` returns the pixel at that position.
  - `is_opaque_at(x, y)` tells whether that pixel is opaque.
- `Sprite(position, image, speed)` is an image at a position that moves by its speed.
  - `next_position()` returns the position after the next move.
  - `update()` moves the sprite by its speed.
  - `collides_with(other)` checks whether opaque pixels of the two sprites overlap at their next positions.
  - `is_out_of_bounds(hres, vres)` checks whether the sprite lies wholly off the screen.
  - `crosses_bounds(mask, hres, vres)` checks whether the next position crosses any solid edge in `mask`.
- `Bound` is a flag set of screen edges: `LOWER`, `RIGHT`, `UPPER` and `LEFT`. Combine edges to form the `mask` argument.

### `keystrike.keyboard`

`KeyMapper().translate(scancode)` turns a make code into a character. It returns `""` for codes that map to no character.

The mapper tracks caps lock and both shift keys. Caps lock and shift together give lower case. The property `caps_lock` reports the caps-lock state, and `shift` reports whether either shift key is held.

### `keystrike.mouse`

- `PacketAssembler.feed(byte)` collects bytes into a three-byte `Packet`. It discards bytes until it sees one with bit 3 set, so the packet starts in sync.
- `MouseEventDetector.detect(packet)` returns a `MouseEvent` whose type is one of these `MouseEventType` values:
  - `LB_PRESSED`
  - `LB_RELEASED`
  - `RB_PRESSED`
  - `RB_RELEASED`
  - `BUTTON_EV`
  - `MOUSE_MOV`
- `VerticalLineGesture.feed(event)` recognises a downward line drawn while one button is held. It returns `Gesture.LEFT` or `Gesture.RIGHT` when it recognises a line, and `Gesture.NONE` otherwise.
  - The line must be longer than `MIN_LENGTH`.
  - Sideways movement may not exceed `TOL`.

### `keystrike.projectile`

- `tracking_projectile(image, position, target, speed_modifier, letter)` makes a projectile that homes on the centre of the `target` sprite.
- `radial_projectile(image, position, direction, speed_modifier)` makes a projectile that flies straight along `direction` and has `affects_all` set.
- `Projectile` has these methods:
  - `update()` moves the projectile and then steers it towards its target.
  - `update_speed()` only steers it.
  - `collides_with(sprite)` checks for a collision with `sprite`.

### `keystrike.highscores`

The table holds at most `NUMBER_HIGHSCORES` (5) entries, best first.

- `Highscore(username, score, timestamp)` is one entry. Usernames have at most 10 characters.
- `Timestamp` holds the date and time of an entry. Its year counts from 2000. `Timestamp.from_datetime(moment)` builds one from a `datetime`.
- `load_highscores(path)` reads the table from a file.
- `store_highscores(scores, path)` writes the table. Each line has the form `name@score year month day hours minutes seconds`.
- `insert_new_highscore(scores, username, score, timestamp)` puts a new entry into the list in place. When the table is full, its last entry drops out.
- `lowest_highscore(scores)` returns the score of the fifth entry, or 0 while the table has room.

### `keystrike.stats`

- `GameStats` holds the counters of one game. Its methods:
  - `score()` returns a tenth of the seconds played plus 25 points per kill, per hit letter and per power-up.
  - `cpm()` returns the letters hit per minute.
  - `accuracy()` returns the percentage of typed letters that hit.
  - `summary_lines()` returns the text for a game-over screen.
  - `reset()` clears the counters.
- `Username` collects a typed name. A backspace `"\b"` removes the last character.
- `HelperBoard` is the list of characters that a helping player sees.
- `build_letter_queues(rng)` returns four shuffled `CharQueue`s, one for each difficulty level:
  1. lower case
  2. adds upper case
  3. adds digits
  4. adds punctuation

## Example

```python
from keystrike.vector import Vector, XorShift32
from keystrike.letter_queue import CharQueue
from keystrike.keyboard import KeyMapper
from keystrike.stats import GameStats

rng = XorShift32(seed=42)
print(rng.between(1, 6))     # some value from 1 to 6

queue = CharQueue("abc")
queue.insert("z", 1)
print(list(queue))           # ['a', 'z', 'b', 'c']
print(queue.pop())           # 'a'

print(Vector(3, 4).norm())   # 5.0

keys = KeyMapper()
print(keys.translate(0x1E))  # 'a'
keys.translate(0x3A)         # caps lock on
print(keys.translate(0x1E))  # 'A'

stats = GameStats(time_sec=120, total_typed_letters=10,
                  total_hit_letters=8, total_enemies_killed=5)
print(stats.score(), stats.cpm(), stats.accuracy())  # 337 4 80
```

## What this package does not do

The package supplies parts, not a game you can play. It has none of the following:

- a game loop
- enemy spawning, or the rules for enemy and projectile collisions
- menus or a game state machine
- rendering
- keyboard, mouse, clock or serial-port drivers
- a command to run

A program that uses it must supply these itself.