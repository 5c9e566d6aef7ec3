import pytest

from hallpath.campus import build_campus_graph, find_route, format_route, main
from hallpath.course import Course


@pytest.fixture(scope="module")
def campus():
    return build_campus_graph()


def test_adjacent_rooms(campus):
    assert find_route(campus, "101", "102") == [
        Course("Park", "101"),
        Course("Nurse", "102"),
    ]


def test_band_to_choir(campus):
    assert find_route(campus, "Band", "Choir") == [
        Course("Band", "166"),
        Course("Choir", "155"),
    ]


def test_teacher_and_room_names_agree(campus):
    assert find_route(campus, "Park", "Nurse") == find_route(campus, "101", "102")


def test_get_node_finds_junction(campus):
    assert campus.get_node("104_108") == Course("104_108", "104_108")


@pytest.mark.parametrize(
    "origin, target",
    [("101", "710"), ("Cafeteria", "005L"), ("Library", "409"), ("001D", "310A")],
)
def test_routes_span_endpoints_without_repeats(campus, origin, target):
    path = find_route(campus, origin, target)
    assert path[0] == campus.get_node(origin)
    assert path[-1] == campus.get_node(target)
    assert len(set(path)) == len(path)


def test_route_to_self(campus):
    assert find_route(campus, "305", "305") == [Course()]
    assert find_route(campus, "Park", "101") == [Course("Park", "101")]


def test_unknown_destination_has_no_route(campus):
    assert find_route(campus, "101", "nowhere") == []


def test_format_route():
    path = [Course("Park", "101"), Course("Nurse", "102")]
    assert format_route(path) == "L101 L102 "


def test_format_empty_route():
    assert format_route([]) == ""


@pytest.mark.parametrize("argv", [[], ["101"], ["101", "102", "103"]])
def test_main_rejects_wrong_argument_count(argv):
    assert main(argv) == 1


def test_main_prints_route(capsys):
    assert main(["101", "102"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "L101 L102 "
    assert captured.err == ""


def test_main_reports_unknown_destination(capsys):
    assert main(["101", "nowhere"]) == 0
    captured = capsys.readouterr()
    assert "Invalid source or destination" in captured.err
    assert "No path exists from 101 (Park)" in captured.err
    assert captured.out == ""


def test_main_both_unknown(capsys):
    assert main(["nowhere", "elsewhere"]) == 0
    captured = capsys.readouterr()
    assert "Invalid source or destination" in captured.err
    assert captured.out == "L "