"""Recipe Finder: ingredient-based recipe search backed by Spoonacular."""

__version__ = "0.1.0"
