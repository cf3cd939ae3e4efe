"""Interactive catalogue of movies and series episodes loaded from a text file."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from videoteca.videos import Movie, Series, Video

DEFAULT_DATA_FILE = "lista_videos.txt"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FLOAT32_MAX = 3.4028234663852886e38

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {match.group(1)}")
    return value


def _leading_float(text: str, limit: float | None = None) -> float:
    """Parse the number at the start of ``text``, ignoring what follows it."""
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {literal}")
    if limit is not None and math.isfinite(value) and abs(value) > limit:
        raise ValueError(f"number out of range: {literal}")
    return value


def _take(rest: str) -> tuple[str, str]:
    """Split off the next comma-separated field.

    When no comma is left the whole remainder is the field and stays in place.
    """
    head, sep, tail = rest.partition(",")
    if not sep:
        return rest, rest
    return head, tail


def parse_line(line: str) -> Video:
    """Parse ``id,title,episode,genre,duration,rating`` into a movie or a series.

    An episode of -1 marks a movie. Raises ValueError when a field is not valid.
    """
    id_text, rest = _take(line)
    video_id = _leading_int(id_text)
    title, rest = _take(rest)
    episode_text, rest = _take(rest)
    episode = _leading_int(episode_text)
    genre, rest = _take(rest)
    duration_text, rest = _take(rest)
    duration = _leading_float(duration_text, _FLOAT32_MAX)
    rating = _leading_float(rest)

    if episode == -1:
        return Movie(video_id, title, genre, duration, rating)
    return Series(video_id, title, rating, genre, duration, episode)


@dataclass
class Catalog:
    """All loaded videos, with movies and series episodes also kept apart."""

    videos: list[Video] = field(default_factory=list)
    movies: list[Movie] = field(default_factory=list)
    series: list[Series] = field(default_factory=list)

    def _add(self, video: Video) -> None:
        self.videos.append(video)
        if isinstance(video, Series):
            self.series.append(video)
        elif isinstance(video, Movie):
            self.movies.append(video)

    def load(self, path: str | Path) -> int:
        """Load every valid line of ``path`` and return how many videos were added.

        Invalid lines are reported on stderr and skipped; a missing file adds nothing.
        """
        try:
            with open(path, encoding="utf-8") as handle:
                lines = [raw.rstrip("\n") for raw in handle]
        except OSError:
            lines = []

        added = 0
        for line in lines:
            try:
                video = parse_line(line)
            except ValueError:
                print(f"Error al procesar línea: {line}", file=sys.stderr)
                continue
            self._add(video)
            added += 1

        print(f"Se cargaron {len(self.videos)} videos correctamente")
        return added


class _Console:
    """Reads whitespace-separated tokens and whole lines from one text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError
        self._buffer += line

    def token(self) -> str:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                break
            self._fill()
        match = re.match(r"\S+", self._buffer)
        assert match is not None
        self._buffer = self._buffer[match.end():]
        return match.group(0)

    def integer(self) -> int | None:
        try:
            return _leading_int(self.token())
        except ValueError:
            return None

    def number(self) -> float | None:
        try:
            return _leading_float(self.token())
        except ValueError:
            return None

    def skip_char(self) -> None:
        if self._buffer:
            self._buffer = self._buffer[1:]

    def line(self) -> str:
        if not self._buffer:
            self._fill()
        head, sep, tail = self._buffer.partition("\n")
        self._buffer = tail if sep else ""
        return head


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


_MENU = (
    "1. Cargar archivos de datos\n"
    "2. Mostrar videos por calificación o género\n"
    "3. Mostrar episodios de una serie con calificación\n"
    "4. Mostrar películas con cierta calificación\n"
    "5. Calificar un video\n"
    "0. Salir\n"
    "Opción: "
)


def _show_by_rating_or_genre(catalog: Catalog, console: _Console) -> None:
    print("1. Filtrar por calificación")
    print("2. Filtrar por género")
    choice = console.integer()
    if choice == 1:
        _prompt("Mostrar videos con calificación mayor a: ")
        threshold = console.number()
        if threshold is None:
            return
        for video in catalog.videos:
            video.show_filtered(video.rating, threshold)
    elif choice == 2:
        _prompt("Mostrar videos con género: ")
        genre = console.token()
        for video in catalog.videos:
            video.filter_by_genre(genre)
    else:
        print("Seleccione una opción válida")


def _show_episodes(catalog: Catalog, console: _Console) -> None:
    console.skip_char()
    _prompt("Serie a visualizar: ")
    name = console.line()
    _prompt("Mostrar episodios con calificación mayor a: ")
    threshold = console.number()
    if threshold is None:
        return
    for episode in catalog.series:
        if episode.title == name:
            episode.show_filtered(episode.rating, threshold)


def _show_movies(catalog: Catalog, console: _Console) -> None:
    _prompt("Mostrar películas con calificación mayor a: ")
    threshold = console.number()
    if threshold is None:
        return
    for movie in catalog.movies:
        movie.show_filtered(movie.rating, threshold)


def _rate(catalog: Catalog, console: _Console) -> None:
    print("1. Calificar película")
    print("2. Calificar episodio")
    choice = console.integer()
    console.skip_char()
    _prompt("Ingrese título a calificar: ")
    title = console.line()

    if choice == 1:
        movie = next((m for m in catalog.movies if m.title == title), None)
        if movie is None:
            return
        _prompt("¿Cómo califica esta película del 1 al 5?: ")
        score = console.number()
        if score is None:
            return
        movie.add_rating(score)
        print(movie)
        print("La calificación promedio se ha actualizado.")
    elif choice == 2:
        _prompt("Ingrese el número de episodio: ")
        number = console.integer()
        episode = next(
            (s for s in catalog.series if s.title == title and s.episode == number),
            None,
        )
        if episode is None:
            return
        _prompt("¿Cómo califica este episodio del 1 al 5?: ")
        score = console.number()
        if score is None:
            return
        episode.add_rating(score)
        print(episode)
        print("La calificación promedio del episodio se ha actualizado.")
    else:
        print("Opción inválida.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu over the catalogue stored in a data file."""
    parser = argparse.ArgumentParser(description="Catálogo de películas y series.")
    parser.add_argument(
        "data_file",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help="archivo de datos de videos",
    )
    args = parser.parse_args(argv)

    data_file = Path(args.data_file)
    data_file.touch(exist_ok=True)

    catalog = Catalog()
    console = _Console(sys.stdin)
    actions = {
        2: _show_by_rating_or_genre,
        3: _show_episodes,
        4: _show_movies,
        5: _rate,
    }

    try:
        while True:
            _prompt(_MENU)
            option = console.integer()
            if option == 0:
                break
            if option == 1:
                print("Cargando archivo de videos...")
                catalog.load(data_file)
            elif option in actions:
                actions[option](catalog, console)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())