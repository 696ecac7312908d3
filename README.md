# sollong

Map handling for a small top-down tile game in which a player collects
every coin on a walled map and then leaves through the exit. The package
reads `.ber` map files, checks that they describe a playable level, and
gives you the resulting tile grid. It also carries a few small helpers for
text, byte buffers, linked lists, formatted output and chunked line
reading.

It needs nothing beyond the Python standard library (3.10 or later).

```
pip install .
```

## Map format

A map is a plain text file, one row per line, using these characters
(`sollong.gamemap.Tile`):

| Char | Tile              |
|------|-------------------|
| `1`  | `Tile.WALL`       |
| `0`  | `Tile.SPACE`      |
| `P`  | `Tile.PLAYER`     |
| `C`  | `Tile.COIN`       |
| `E`  | `Tile.EXIT`       |
| `O`  | `Tile.OPPONENT`   |

A map is accepted only when:

* the file name ends in `.ber`;
* it has at least three rows, all of the same length *counting the line
  ending*, so every row, the last one included, must end with a newline;
* it holds only the characters above;
* it has exactly one `P`, exactly one `E`, and at least one `C`;
* it is closed by walls on every side;
* every coin and the exit can be reached from the player, walking through
  anything that is not a wall.

Example (with a trailing newline after the last row):

```
1111111
1P0C0E1
1111111
```

## Loading a map

```python
from sollong.gamemap import load_map, parse_map, MapError, Point, Tile

try:
    level = load_map("level.ber")
except MapError as exc:
    print("Error\nInvalid input", exc)

level.player             # Point(row=1, col=1)
level.exit               # Point(row=1, col=5)
level.coins              # 1
level.height, level.width
level.rows               # ["1111111", "1P0C0E1", "1111111"]
level.tile_at(Point(1, 3))          # Tile.COIN
level.set_tile(Point(1, 3), Tile.SPACE)
```

`MapError` is a `ValueError`; it is raised for a wrong extension, an
unreadable file, and every validation failure. `tile_at` and `set_tile`
raise `IndexError` for a point outside the grid.

`parse_map(lines)` validates lines already in memory (each with its line
ending) and builds a `GameMap`. The individual checks are available on
their own: `has_ber_extension`, `read_map_lines`, `check_size`,
`check_elements`, `check_enclosed` and `path_reaches_all`.

## Helpers

* `sollong.linereader` – `LineReader(stream, buffer_size=42)` returns one
  line at a time from a text or binary stream (`next_line()`, or iterate
  over it), reading in chunks of `buffer_size`; `read_lines` yields them
  all.
* `sollong.printf` – `format_string(template, *args)` and
  `printf(template, *args, stream=None)` support the conversions `c`, `s`,
  `p`, `d`, `i`, `u`, `x`, `X` and `%%`, with 32-bit integer semantics;
  `to_base` and `is_conversion` are exposed too.
* `sollong.ftstring` – `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strjoin`, `substr`, `strtrim`, `split`, `strmapi`, `striteri`,
  `strlcpy`, `strlcat`.
* `sollong.ftchar` – `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, `atoi`, `itoa`.
* `sollong.ftmem` – `bzero`, `calloc`, `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp` over `bytes` and `bytearray`.
* `sollong.ftlist` – a singly linked `Node` with `lst_new`,
  `lst_add_front`, `lst_add_back`, `lst_size`, `lst_last`, `lst_iter`,
  `lst_map`, `lst_del_one`, `lst_clear` and `iter_nodes`.
* `sollong.ftio` – `put_char`, `put_str`, `put_endl`, `put_nbr` writing to
  a text stream (standard output by default).

## What it does not do

There is no playable game here: the package has no window or drawing, no
keyboard handling, no movement or scoring, and no command to launch. It
stops at a validated `GameMap` that a game loop could be built on.

## Running the tests

```
pip install ".[test]"
pytest
```