"""Building blocks for a typing shooter: vectors, sprites, letter queues, input decoding, projectiles, statistics and highscores."""

__version__ = "0.1.0"