"""A brick-breaking arcade game: paddle, ball, brick layouts, menus and effects."""

__version__ = "0.1.0"