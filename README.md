# samdrawer

Build the suffix automaton (SAM) of a string, or the generalised suffix
automaton of several strings, and draw it as Graphviz DOT or as SVG.

Each state is labelled with three things:

- its number
- its longest length (`Max=`)
- a `sizeN=` line for each string `N` whose end positions the state covers,
  in order of string number. `N` is the string's position in the input,
  counting from 0, and the value is the size of the state's right
  (end-position) set in that string.

Transitions are black edges labelled with their character. Suffix links
are red edges.

## Installation

```
pip install .
```

The package needs only the standard library.

## Command line

```
samdrawer "abcab"
```

This writes an SVG drawing to standard output.

To draw a generalised automaton, separate the strings with `|`:

```
samdrawer "abab|baba"
```

Options:

- `-f`, `--format {svg,dot}`: output format. The default is `svg`.
- `-o`, `--output FILE`: write to `FILE` instead of standard output. The
  file is written as UTF-8.

For example, to write the DOT description to a file:

```
samdrawer "aab" -f dot -o aab.dot
```

## Library

```python
from samdrawer.automaton import SAMPool
from samdrawer.render import build_automaton, generate_dot, generate_svg, render_svg

pool = SAMPool()
pool.join_string("abcab", 0)   # add a string under id 0
pool.collect()                 # build the suffix-link tree and sum right-set sizes
dot_text = pool.generate_graph()

dot_text = generate_dot("abab|baba")   # split on '|', build, collect, return DOT
svg_text = generate_svg("abab|baba")   # the same, returned as an SVG document

pool = build_automaton("aab")          # built and collected, ready to draw
svg_text = render_svg(pool)
```

The library has the following parts:

- `SAMPool.append(char, str_id)` extends the automaton by a single
  character. It raises `ValueError` if `char` is not exactly one character.
- `SAMPool.nodes` holds every state, and `SAMPool.root` is the initial
  state.
- Each `SAMNode` has these members:
  - `vtx_id`, `max_len`, `accept`
  - `link`, the suffix link
  - `children`, the transitions by character
  - `right_size`, the right-set size for each string id
  - `tree_children`, filled in by `collect`
- `SAMNode.clone()` returns a copy for splitting a state. The copy keeps the
  transitions, suffix link and length. Its id is `-1`, and it has no counts.

## Drawing

`generate_graph` and `generate_dot` produce DOT text. Pass it to Graphviz
to lay it out and render it yourself.

`render_svg` and `generate_svg` do not use Graphviz. They draw with a
simple built-in layout:

- States are placed in rows by their longest length.
- Each state is an ellipse.
- Each edge is a curve with an arrow head.

Large automata can produce wide drawings.

## What it does not do

There is no interactive page or window for typing strings and viewing the
result. The package offers only the `samdrawer` command and the library
functions above. It does not run Graphviz and does not write image formats
other than SVG.

## Tests

```
pip install .[test]
pytest
```