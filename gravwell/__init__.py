"""A small 2D space arcade game with a black hole, parallax starfields and an enemy ship."""

__version__ = "0.1.0"