"""The school floor plan and a command that prints a route between two rooms."""

from __future__ import annotations

import sys

from hallpath.course import Course
from hallpath.graph import Graph

_ROOMS = [
    # 100s hall
    ("Park", "101"), ("Nurse", "102"), ("Pressler", "103"),
    ("JasonEscandell", "104"), ("Williams", "105"), ("Pinkston", "107"),
    ("Castro", "108"), ("Snyder", "109A"), ("Sharp", "109B"),
    ("Lange", "110A"), ("Baley", "110B"),
    # extra 100s hall
    ("MainOffice", "126"), ("WritingCenter", "133"), ("Library", "134"),
    ("Welin", "134D"),
    # 200s hall
    ("AcademicCounselors", "201"), ("HirokoKarch", "202"), ("Zhong", "204"),
    ("Ramírez", "205"), ("Preston", "206"), ("Contreras", "207A"),
    ("Walker", "207B"), ("Breland", "210"),
    # 300s hall
    ("Tabor", "301"), ("AdamEscandell", "302"), ("SiFuentes", "303"),
    ("Goodell", "304"), ("Pettigrew", "307"), ("Flowers", "308"),
    ("JosueGarcia", "309A"), ("MarcKarch", "309B"), ("Moody", "310A"),
    ("Martanovic", "310B"),
    # 400s hall
    ("Kossa", "401"), ("Parra", "402"), ("Brockhoff", "405"),
    ("Ahmed", "406"), ("Harrelson", "409"), ("Willie", "410"),
    # 500s hall
    ("BookRoom", "501"), ("Saldana", "502"), ("CollegeCenter", "503"),
    ("Czaplinski", "504"), ("Shockey", "505"), ("Mueller", "506"),
    # 700s hall
    ("GranadoOffice", "700"), ("KevinGarcia", "701"), ("Granado", "702"),
    ("DeBerry", "703"), ("Villanueva", "704"), ("Baldwin", "705"),
    ("Cuttill", "706"), ("Zamora", "707"), ("Hewitt", "708A"),
    ("Fisher", "708B"), ("Mokry", "709"), ("MetalShop", "710"),
    ("Gonzalez", "711A"), ("WoodShop", "711B"),
    # fine arts hall
    ("Band", "166"), ("Choir", "155"), ("Orchestra", "156"),
    # gyms
    ("BigGym", "073"), ("SmallGym", "098"), ("DanceOffice", "001D"),
    ("Dance", "606A"), ("JazzBand", "606B"), ("WeightRoom", "118"),
    ("SportsMed", "117"), ("LockerRoom1", "001L"), ("LockerRoom2", "002L"),
    ("LockerRoom3", "003L"), ("LockerRoom4", "004L"), ("LockerRoom5", "005L"),
    # cafeteria
    ("Cafeteria", "001C"),
]

# Junctions between halls carry the same name as teacher and room.
_JUNCTIONS = [
    "101_126", "126_201", "104_108", "303_307", "302_506", "701_outside",
    "502_402", "156_outside", "206_210", "405_409", "166_155",
]

# Distances in metres, in the order the floor plan lists them.
_EDGES = [
    # 100s hall
    ("101", "102", 2.0), ("101", "103", 10.0), ("103", "104", 2.0),
    ("103", "105", 10.0), ("105", "107", 10.0), ("107", "108", 2.0),
    ("107", "109B", 10.0), ("109B", "110B", 2.0), ("109B", "109A", 10.0),
    ("109A", "110A", 2.0),
    ("102", "104", 10.0), ("104", "108", 20.0), ("108", "110B", 10.0),
    ("110B", "110A", 10.0),
    # 200s hall
    ("201", "202", 2.0), ("201", "205", 30.0), ("202", "204", 11.25),
    ("204", "206", 11.25), ("205", "207A", 11.25), ("207A", "207B", 11.25),
    ("207B", "210", 2.0),
    ("202", "204", 11.25), ("204", "206", 11.25), ("206", "210", 23.5),
    # 300s hall
    ("301", "302", 2.0), ("301", "303", 16.66), ("303", "304", 2.0),
    ("303", "307", 16.66), ("307", "308", 2.0), ("307", "309B", 11.66),
    ("309B", "310B", 2.0), ("309B", "309A", 11.66), ("309A", "310A", 2.0),
    ("302", "304", 16.66), ("308", "310B", 11.66), ("310B", "310A", 11.66),
    # 400s hall
    ("401", "402", 2.0), ("401", "405", 22.5), ("405", "406", 2.0),
    ("405", "409", 22.5), ("406", "410", 24.375),
    ("402", "406", 22.5), ("409", "410", 11.5),
    # 500s hall
    ("501", "502", 2.0), ("502", "503", 4.0), ("503", "504", 2.0),
    ("503", "505", 25.0), ("505", "506", 2.0),
    # 700s hall
    ("701", "703", 14.57), ("703", "700", 16.0), ("703", "705", 18.94),
    ("705", "707", 14.57), ("707", "709", 10.92), ("700", "702", 9.0),
    ("705", "711A", 2.0), ("707", "711B", 2.0), ("708B", "708A", 25.78),
    ("708A", "710", 12.89), ("708B", "706", 20.265), ("706", "704", 20.625),
    ("702", "708B", 17.0),
    # extra 100s hall
    ("126", "134", 2.0), ("134", "133", 27.78), ("134", "134D", 5.0),
    # fine arts hall
    ("155", "166", 22.5), ("155", "156", 5.0),
    # gym section
    ("073", "001D", 30.0), ("606A", "606B", 13.63), ("606A", "001L", 2.0),
    ("606B", "098", 4.0), ("606B", "118", 15.68), ("118", "117", 14.5),
    ("117", "002L", 18.0), ("002L", "003L", 10.5), ("003L", "004L", 18.0),
    ("004L", "005L", 27.5),
    # 100s to 200s
    ("101", "101_126", 3.33), ("126", "101_126", 9.375),
    ("126", "126_201", 30.5), ("201", "126_201", 3.33),
    # 100s to 300s
    ("104", "104_108", 7.66), ("108", "104_108", 10.66),
    ("105", "104_108", 37.5),
    ("303", "303_307", 6.66), ("307", "303_307", 6.66),
    ("104_108", "303_307", 0.0),
    # 300s to 500s
    ("302", "302_506", 5.0), ("301", "302_506", 6.0), ("506", "302_506", 12.0),
    ("302_506", "505", 12.0),
    ("701", "701_outside", 7.28), ("701_outside", "001C", 10.92),
    ("701_outside", "302_506", 36.5),
    # 500s to 400s
    ("502", "502_402", 6.0), ("402", "502_402", 9.0),
    ("156", "156_outside", 10.92), ("156_outside", "502_402", 37.0),
    ("156_outside", "001C", 40.04),
    # 200s to 400s
    ("206", "206_210", 6.0), ("210", "206_210", 8.0),
    ("405", "405_409", 6.0), ("409", "405_409", 8.0),
    ("206_210", "405_409", 37.5),
    # other connections
    ("073", "410", 45.0), ("156", "073", 26.38), ("001C", "156", 40.63),
    ("166", "166_155", 15.0), ("005L", "166_155", 55.5),
    ("302_506", "101_126", 37.0), ("502_402", "126_201", 37.0),
]


def build_campus_graph() -> Graph:
    """Build the graph of every room, junction and corridor of the school."""
    rooms = {room: Course(teacher, room) for teacher, room in _ROOMS}
    rooms.update((name, Course(name, name)) for name in _JUNCTIONS)
    graph = Graph()
    for first, second, distance in _EDGES:
        graph.add_edge(rooms[first], rooms[second], distance)
    return graph


def find_route(graph: Graph, origin: str, target: str) -> list[Course]:
    """Return the shortest route between two rooms named by number or teacher."""
    return graph.bellman_ford(graph.get_node(origin), graph.get_node(target))


def format_route(path: list[Course]) -> str:
    """Render a route as room labels, each prefixed with ``L`` and followed by a space."""
    return "".join(f"L{course.room_name} " for course in path)


def main(argv: list[str] | None = None) -> int:
    """Print the route between the two rooms given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        return 1
    origin, target = args

    graph = build_campus_graph()
    source = graph.get_node(origin)
    destination = graph.get_node(target)
    if source.is_empty() or destination.is_empty():
        print("Invalid source or destination", file=sys.stderr)

    path = graph.bellman_ford(source, destination)
    if not path:
        print(
            f"No path exists from {source.room_name} ({source.teacher_name}) "
            f"to {destination.room_name} ({destination.teacher_name})",
            file=sys.stderr,
        )
    else:
        sys.stdout.write(format_route(path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())