# hallpath

Finds the shortest walking route between two rooms on a school campus.
The campus is modelled as a weighted undirected graph: each node is a room
with the teacher or facility that uses it, and each edge is a hallway
distance in metres. Routes are found with the Bellman–Ford algorithm.

## Installation

```
pip install .
```

## Command line

Give a start and an end, each either a room number or a teacher/facility
name:

```
hallpath 101 Library
hallpath Park 302
```

The same command can be run as `python -m hallpath.campus 101 Library`.

The route is printed on one line as the room labels in walking order, each
prefixed with `L` and followed by a space:

```
L101 L101_126 L126 L134
```

Labels such as `101_126` are hallway junctions between sections of the
building. If a name is not found, `Invalid source or destination` is
written to standard error; if no route connects the two places, a
`No path exists from ...` message is written there too. The exit status is
0 in these cases. Called with anything other than exactly two arguments,
the command prints nothing and exits with status 1.

## Library use

```python
from hallpath.campus import build_campus_graph, find_route, format_route

graph = build_campus_graph()
path = find_route(graph, "Park", "Library")
print(format_route(path))
```

- `build_campus_graph()` returns a `Graph` holding every room, junction and
  corridor of the school.
- `find_route(graph, origin, target)` looks both names up and returns the
  shortest path as a list of `Course` objects.
- `format_route(path)` renders a path as the `L`-prefixed labels shown above.
- `main(argv=None)` is the command-line entry point; it returns the exit
  status.

The building blocks can also be used on their own:

```python
from hallpath.course import Course
from hallpath.graph import Graph

a = Course("Alpha", "1")
b = Course("Beta", "2")
g = Graph()
g.add_edge(a, b, 5.0)
print(g.bellman_ford(a, b))
print(g.get_node("Beta"))
```

`Course` is a frozen dataclass with `teacher_name`, `room_name` and
`teacher_names`. Two courses are equal when teacher and room match, and
they sort by room, then teacher. `Course()` is the empty course, for which
`Course.is_empty()` is true.

`Graph.add_edge(u, v, weight)` joins two courses both ways.
`Graph.get_node(name)` looks a node up by room name or teacher name and
returns an empty `Course` when nothing matches. `Graph.bellman_ford(source,
destination)` returns the list of courses from source to destination, or an
empty list when there is no path.

## What it does not do

The campus layout is fixed in `hallpath.campus`; there is no way to load a
different floor plan from a file. Routes are printed only as text labels;
there is no map or drawing of the route.

## Running the tests

```
pip install .[test]
pytest
```