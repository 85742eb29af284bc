"""A bilingual terminal text adventure driven by a CSV dialogue table."""

__version__ = "0.1.0"
__all__ = ["application", "console", "dialogue", "game_state", "inventory"]