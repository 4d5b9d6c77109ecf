"""Game logic for an arena shooter: enemies, family members, bullets, animation and collision."""

__version__ = "0.1.0"