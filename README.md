# antfarm

`antfarm` reads an ant farm description and prints how the ants travel
from the start room to the end room, one turn per line. A farm description
gives a number of ants, a set of rooms with one start and one end, and
tunnels between rooms.

## Installation

```
pip install .
```

## Usage

The farm description is read from standard input:

```
antfarm < farm.txt
```

The command takes no options apart from `--help`.

### Input format

```
3
##start
start 0 0
a 1 0
b 2 0
##end
end 3 0
start-a
a-b
b-end
```

- The first line is the number of ants. It must be a positive integer.
- Each room line is `name x y`. A room name may not begin with `L` or `#`,
  and the coordinates must be non-negative integers.
- `##start` and `##end` mark the room on the next line as the start or the
  end. Exactly one of each is required. Other lines that begin with `##`
  are accepted and have no effect.
- Lines that begin with a single `#` are comments and are ignored.
- Empty lines are not allowed.
- Links are written `name1-name2` and are split at the first hyphen. Both
  rooms must already exist, and every room must take part in at least one
  link.

### Output

The input is echoed first, followed by a blank line. After that, each line
is one turn. Each move in a turn is written as `L<ant>-<room>` followed by
a space, and the moves are ordered by ant number:

```
L1-a
L1-b L2-a
L1-end L2-b L3-a
L2-end L3-b
L3-end
```

When the input is invalid, or when the end room cannot be reached from the
start, the program prints `ERROR` and exits with status 1.

## Library use

```python
from antfarm.cli import solve

lines = ["1", "##start", "s 0 0", "##end", "e 1 0", "s-e"]
print(solve(lines), end="")
```

`solve` returns the whole output as a single string. It raises
`antfarm.model.LeminError` for invalid or unsolvable input.

The steps can also be run one at a time:

- `antfarm.parser.parse_farm(lines)` builds an `antfarm.model.Farm` from
  input lines. `antfarm.parser.iter_lines(stream)` yields the lines of a
  text stream without their newlines.
- `antfarm.graph.prepare(farm)` levels the rooms by breadth-first search.
  It then prunes the tunnels until only paths that share no rooms are left.
- `antfarm.routes.build_ways(farm)` collects those tunnels into `Way`
  objects, shortest first.
- `antfarm.routes.launch_ants(farm, ways)` yields the list of `Move`
  objects for each turn. `antfarm.routes.format_turn(moves)` and
  `antfarm.routes.format_input(farm)` produce the text shown above.

The package also holds small helpers with C-library semantics:

- `antfarm.numbers` parses integers with 32-bit wrapping (`parse_int`,
  `get_number`, `check_number`) and formats them (`format_int`).
- `antfarm.textops` compares, searches, splits and trims strings.
- `antfarm.chars` classifies ASCII characters and reverses the bits of a
  byte.
- `antfarm.output` writes characters, strings and numbers to a stream.

## Limitations

Paths are chosen by a fixed pruning of the tunnel graph, not by a
max-flow search. The number of turns is therefore not guaranteed to be the
smallest possible for every farm. The farm is read only from standard
input. There is no option to read it from a file, and no visualiser.

## Development

```
pip install -e ".[test]"
pytest
```