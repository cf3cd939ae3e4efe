"""Video catalogue entries: generic videos, movies and series episodes."""

from __future__ import annotations

from typing import TextIO


def _num(value: float) -> str:
    """Format a number the way a default-precision stream would (6 significant digits)."""
    return f"{value:g}"


class Video:
    """A generic video with an identifier, title, genre, duration and average rating."""

    def __init__(
        self,
        video_id: int,
        title: str,
        genre: str,
        duration: float,
        rating: float,
    ) -> None:
        self.video_id = video_id
        self.title = title
        self.genre = genre
        self.duration = duration
        self.rating = rating

    def save(self, stream: TextIO) -> None:
        """Write the video as a record to ``stream``; a generic video writes nothing."""

    def add_rating(self, new_rating: float) -> float:
        """Average a new rating into the current one and return the result."""
        self.rating = (self.rating + new_rating) / 2
        return self.rating

    def _filtered_line(self, rating: float) -> str:
        return (
            f"Nombre: {self.title}. Género: {self.genre}. ID: {self.video_id}\n"
            f". Calificación: {_num(rating)}"
        )

    def show_filtered(self, rating: float, threshold: float) -> bool:
        """Print the video if ``rating`` is strictly above ``threshold``."""
        if rating > threshold:
            print(self._filtered_line(rating))
            return True
        return False

    def filter_by_genre(self, genre: str) -> bool:
        """Print the video when the requested genre is ``Drama``."""
        if genre == "Drama":
            print(
                f"Nombre: {self.title}. Género: {genre}. ID: {self.video_id}\n"
                f". Calificación: {_num(self.rating)}"
            )
            return True
        return False

    def __str__(self) -> str:
        return (
            f"Nombre: {self.title}. Género: {self.genre}. ID: {self.video_id}. "
            f"Calificación: {_num(self.rating)}"
        )


class Movie(Video):
    """A feature film."""

    def save(self, stream: TextIO) -> None:
        """Write ``id,title,genre,duration,rating`` as one line."""
        stream.write(
            f"{self.video_id},{self.title},{self.genre},"
            f"{_num(self.duration)},{_num(self.rating)}\n"
        )

    def show_filtered(self, rating: float, threshold: float) -> bool:
        """Print the movie if ``rating`` is strictly above ``threshold``."""
        if rating > threshold:
            print(self._filtered_line(rating))
            return True
        return False


class Series(Video):
    """One episode of a series."""

    def __init__(
        self,
        video_id: int,
        title: str,
        rating: float,
        genre: str,
        duration: float,
        episode: int,
    ) -> None:
        super().__init__(video_id, title, genre, duration, rating)
        self.episode = episode

    def save(self, stream: TextIO) -> None:
        """Write ``id,title,episode,genre,duration,rating`` as one line."""
        stream.write(
            f"{self.video_id},{self.title},{self.episode},{self.genre},"
            f"{_num(self.duration)},{_num(self.rating)}\n"
        )

    def show_filtered(self, rating: float, threshold: float) -> bool:
        """Print the episode if ``rating`` is strictly above ``threshold``."""
        if rating > threshold:
            print(
                f"Nombre: {self.title}. Número de episodio: {self.episode}. "
                f"Género: {self.genre}. ID: {self.video_id}. "
                f"Calificación: {_num(rating)}"
            )
            return True
        return False

    def __str__(self) -> str:
        return f"{super().__str__()}. Episodio: {self.episode}"