import pytest

from hallpath.course import Course


def test_default_course_is_empty():
    assert Course().is_empty() is True
    assert Course() == Course("", "")


@pytest.mark.parametrize(
    "teacher, room",
    [("Park", "101"), ("", "101"), ("Park", "")],
)
def test_named_course_is_not_empty(teacher, room):
    assert Course(teacher, room).is_empty() is False


def test_equality_uses_teacher_and_room():
    assert Course("Park", "101") == Course("Park", "101")
    assert not (Course("Park", "101") == Course("Nurse", "101"))
    assert not (Course("Park", "101") == Course("Park", "102"))


def test_equality_ignores_teacher_names():
    first = Course("Park", "101", teacher_names=["A", "B"])
    second = Course("Park", "101")
    assert first == second
    assert hash(first) == hash(second)


def test_teacher_names_stored_as_tuple():
    course = Course(room_name="101", teacher_names=["A", "B"])
    assert course.teacher_names == ("A", "B")


def test_orders_by_room_then_teacher():
    courses = [
        Course("Zed", "102"),
        Course("Beta", "101"),
        Course("Alpha", "101"),
    ]
    assert sorted(courses) == [
        Course("Alpha", "101"),
        Course("Beta", "101"),
        Course("Zed", "102"),
    ]


def test_room_outranks_teacher_in_ordering():
    assert Course("Zzz", "100") < Course("Aaa", "200")
    assert Course("Aaa", "200") > Course("Zzz", "100")


def test_usable_as_dict_key():
    table = {Course("Park", "101"): 1}
    assert table[Course("Park", "101")] == 1


def test_frozen():
    course = Course("Park", "101")
    with pytest.raises(AttributeError):
        course.room_name = "102"
    assert course.room_name == "101"
    assert course == Course("Park", "101")