# videoteca

A small catalog of movies and series episodes. Each entry has an id, a title,
a genre, a duration and an average rating. You can load entries from a text
file, list the ones rated above a threshold, list the episodes of a series and
rate a movie or an episode. The menu and all output are in Spanish.

## Installing

```
pip install .
```

## The interactive menu

```
videoteca [DATA_FILE]
```

`DATA_FILE` defaults to `lista_videos.txt` in the current directory. The file
is created empty if it does not exist. The menu reads its answers from
standard input and offers these options:

1. Load the data file. Each load appends what it reads to the catalog and
   prints the total number of videos held.
2. Show videos filtered by rating or by genre. Filtering by rating lists every
   video rated strictly above the threshold you give. Filtering by genre lists
   the loaded videos only when the genre you ask for is `Drama`; any other
   genre lists nothing.
3. Show the episodes of a series (by title) rated strictly above a threshold.
4. Show movies rated strictly above a threshold.
5. Rate a movie (by title) or an episode (by title and episode number). The
   new rating is averaged with the current one: `(current + new) / 2`, and the
   updated entry is printed.
0. Quit. The menu also ends when standard input runs out.

## Data file format

The file has one entry per line, with the fields separated by commas:

```
id,title,episode,genre,duration,rating
```

An episode of `-1` marks a movie. Any other value marks an episode of a series.
For example:

```
1,Interstellar,-1,Sci-Fi,2.8,4.5
2,Breaking Bad,1,Drama,0.8,4.9
```

Lines that cannot be parsed are reported on standard error and skipped.

## What it does not do

Ratings given in the menu are kept in memory only: the data file is never
written back, so they are lost when the program ends. There is no way to add,
edit or remove entries from the menu; edit the data file by hand.

## Using the library

```python
from videoteca.videos import Movie, Series

movie = Movie(101, "Interstellar", "Sci-Fi", 2.5, 4.5)
movie.add_rating(5.0)   # returns 4.75
print(movie)            # Nombre: Interstellar. Género: Sci-Fi. ID: 101. Calificación: 4.75

episode = Series(201, "Breaking Bad", 4.9, "Drama", 1.0, 5)
print(episode)          # Nombre: Breaking Bad. Género: Drama. ID: 201. Calificación: 4.9. Episodio: 5
```

`Video`, `Movie` and `Series` live in `videoteca.videos`:

- `add_rating(new_rating)` averages a new rating into the current one and
  returns the result.
- `show_filtered(rating, threshold)` prints the entry when `rating` is strictly
  above `threshold` and returns whether it printed.
- `filter_by_genre(genre)` prints the entry when `genre` is `"Drama"` and
  returns whether it printed.
- `save(stream)` writes the entry as one comma-separated line:
  `id,title,genre,duration,rating` for a `Movie`,
  `id,title,episode,genre,duration,rating` for a `Series`. A plain `Video`
  writes nothing.

`videoteca.cli.parse_line(line)` turns one line of a data file into a `Movie`
or a `Series`, raising `ValueError` for a line it cannot parse.
`videoteca.cli.Catalog` holds the loaded `videos`, `movies` and `series`;
`Catalog.load(path)` reads a whole file into it and returns how many entries
were added.

## Running the tests

```
pip install .[test]
pytest
```