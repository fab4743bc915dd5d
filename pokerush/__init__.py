"""Terminal game where two Pokémon must finish an obstacle course together."""

__version__ = "1.0.0"