"""A catalog of movies and series episodes with ratings, filters and an interactive menu."""

__version__ = "1.0.0"
__all__ = ["videos", "cli"]