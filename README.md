# hullserve

Compute the area of the convex hull of a set of 2-D points: once from
standard input, interactively from a terminal, or through a TCP server that
many clients share.

The hull is built with Andrew's monotone chain algorithm and its area with the
shoelace formula. Collinear points on the boundary are dropped.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## One-shot calculation

`hullserve-hull` reads a point count, then that many `x,y` pairs, from
standard input and prints the hull area with six digits after the decimal
point:

```
4
0,0
0,1
1,1
1,0
```

```
hullserve-hull < input.txt
1.000000
```

A missing count or too few points is reported on standard error and the
command exits with status 1.

## Interactive shell

```
hullserve-interactive
```

Commands, one per line:

| Command             | Effect                                                    |
|---------------------|-----------------------------------------------------------|
| `Newgraph n`        | start a new graph; the next `n` lines are `x,y` points    |
| `Newpoint x,y`      | add a point                                               |
| `Removepoint x,y`   | remove the first matching point, if any                   |
| `CH`                | print the area of the convex hull of the current points   |

Unknown lines are ignored.

## Generating input

```
hullserve-generate [--output input_large.txt] [--count 10000] [--seed N]
```

writes a file in the `hullserve-hull` input format holding random points on a
0.1 grid between 0 and 999.9. `--seed` makes the output repeatable.

```
hullserve-hull < input_large.txt
```

## Servers

Every server takes `--host` (default: all interfaces) and `--port`
(default 9034). The point graph is shared by every connected client.

| Command                      | How clients are served                                  |
|------------------------------|---------------------------------------------------------|
| `hullserve-select-server`    | one thread, `select` over all sockets                   |
| `hullserve-reactor-server`   | a `Reactor` dispatching readable sockets to handlers    |
| `hullserve-threaded-server`  | one thread per client                                   |
| `hullserve-proactor-server`  | a `Proactor` starting a thread per accepted client      |
| `hullserve-graph-server`     | proactor threads, with `Newpoint` and `Removepoint`     |
| `hullserve-monitor-server`   | as the graph server, and watches the hull area          |

### Select, reactor and threaded servers

These speak the interactive shell's commands. `Newgraph n` replies
`Expecting n point(s)...`, `CH` replies with the area, and an unknown command
replies `Unknown command`. With `nc localhost 9034`:

```
Newgraph 3
Expecting 3 point(s)...
0,0
4,0
0,4
CH
8.000000
```

### Proactor server

Greets each client with `Welcome to the convex hull server!`. It knows only
`Newgraph n`, point lines written `x y` and `CH`. Each accepted point is
acknowledged with `Added point: (x,y)`, and the last one is followed by
`All points received. You may now run CH.` `CH` replies
`Convex Hull Area: <area>`, or an error while the graph is empty or points
are still pending.

### Graph server

Greets each client, accepts `Newgraph n`, `Newpoint x y`, `Removepoint x y`
and `CH` (area with six decimals). After `Newgraph n` the client may send `n`
point lines as `x,y` or `x y`, each answered with `Added point: (x,y)`.
A point sent when none is expected gets `Unexpected point. Use Newgraph
first.`, and anything else `Invalid command.`

### Monitor server

Works like the graph server and also prints on its own console
`At Least 100 units belongs to CH` when a `CH` request first yields an area
of at least 100, and `At Least 100 units no longer belongs to CH` when a later
one falls below it.

## Library use

```python
from hullserve.geometry import Point, convex_hull, polygon_area, format_area

points = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1)]
print(format_area(polygon_area(convex_hull(points))))  # 4.000000
```

`hullserve.geometry` also offers `cross`, `parse_point` and
`convex_hull_stack`, a second hull implementation giving the same result.

`hullserve.reactor.Reactor` calls a handler whenever a registered descriptor
becomes readable (`add_fd` raises `ValueError` for a descriptor already
registered, `remove_fd` raises `KeyError` for an unknown one).
`hullserve.proactor.start_proactor` runs an accept loop on a listening socket
and serves every connection in its own thread; `open_listener` creates such a
socket.

## What is not included

There is no command that times the hull implementations against each other:
`hullserve-generate` produces large inputs, but measuring performance is left
to the user.