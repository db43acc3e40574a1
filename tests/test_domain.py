import pytest

from api_mapper.domain import Application, Controller, DataPoint, RecordNotFoundError


def test_new_controller_is_empty_with_counters_at_one():
    c = Controller("New System")
    assert c.system_name == "New System"
    assert c.get_data_points() == ()
    assert c.get_applications() == ()
    assert c.next_data_point_id == 1
    assert c.next_application_id == 1


def test_add_data_point_ids_increase_by_one_and_match_records():
    c = Controller("s")
    ids = [c.add_data_point(f"dp{i}", f"desc{i}") for i in range(5)]

    assert ids == [1, 2, 3, 4, 5]
    assert [d.id for d in c.get_data_points()] == ids
    assert c.get_data_points()[2] == DataPoint(3, "dp2", "desc2")
    assert c.next_data_point_id == 6


def test_counters_are_independent():
    c = Controller("s")
    for i in range(4):
        c.add_data_point(f"dp{i}", "")

    assert c.next_application_id == 1
    assert c.add_application("app", "first") == 1
    assert c.get_applications() == (Application(1, "app", "first"),)

    c.remove_data_point(2)
    assert c.add_application("app2", "") == 2
    assert c.next_data_point_id == 5


def test_remove_twice_fails_second_time_without_mutation():
    c = Controller("s")
    c.add_data_point("a", "")
    c.add_data_point("b", "")

    assert c.remove_data_point(1) == 1
    assert len(c.get_data_points()) == 1

    with pytest.raises(RecordNotFoundError) as exc_info:
        c.remove_data_point(1)

    assert exc_info.value.record_id == 1
    assert "Data point with ID 1 doesn't exist" in str(exc_info.value)
    assert len(c.get_data_points()) == 1
    assert c.next_data_point_id == 3


def test_remove_unknown_application_reports_kind_and_id():
    c = Controller("s")
    c.add_application("a", "")

    with pytest.raises(RecordNotFoundError) as exc_info:
        c.remove_application(42)

    assert exc_info.value.kind == "Application"
    assert exc_info.value.record_id == 42
    assert c.get_applications() == (Application(1, "a", ""),)


def test_remove_middle_keeps_order_and_values():
    c = Controller("s")
    c.add_data_point("A", "first")
    c.add_data_point("B", "second")
    c.add_data_point("C", "third")

    c.remove_data_point(2)

    assert c.get_data_points() == (
        DataPoint(1, "A", "first"),
        DataPoint(3, "C", "third"),
    )


def test_ids_are_not_reused_after_removal():
    c = Controller("s")
    c.add_application("x", "")
    c.remove_application(1)

    assert c.add_application("y", "") == 2


def test_index_lookup():
    c = Controller("s")
    c.add_data_point("A", "")
    c.add_data_point("B", "")
    c.add_application("X", "")

    assert c.get_data_point_index(2) == 1
    assert c.get_data_point_index(9) is None
    assert c.get_application_index(1) == 0
    assert c.get_application_index(2) is None


def test_change_name_keeps_last_value_including_empty():
    c = Controller("first")
    c.change_name("second")
    assert c.system_name == "second"
    c.change_name("")
    assert c.system_name == ""


def test_values_are_stored_verbatim():
    c = Controller("s")
    c.add_data_point("  padded  ", "")
    assert c.get_data_points()[0].name == "  padded  "


def test_listing_is_read_only_view():
    c = Controller("s")
    c.add_data_point("A", "")
    listing = c.get_data_points()

    c.add_data_point("B", "")

    assert isinstance(listing, tuple)
    assert len(listing) == 1


def test_controllers_compare_by_value():
    a = Controller("s")
    b = Controller("s")
    a.add_data_point("x", "y")
    b.add_data_point("x", "y")
    assert a == b

    b.add_application("z", "")
    assert a != b


def test_restore_keeps_records_and_counters():
    c = Controller.restore(
        "restored",
        [DataPoint(2, "a", ""), DataPoint(5, "b", "")],
        7,
        [Application(1, "x", "")],
        3,
    )

    assert c.system_name == "restored"
    assert c.add_data_point("c", "") == 7
    assert c.add_application("y", "") == 3


@pytest.mark.parametrize(
    "data_points, next_dp",
    [
        ([DataPoint(1, "a", ""), DataPoint(1, "b", "")], 5),
        ([DataPoint(3, "a", "")], 3),
        ([], 0),
    ],
)
def test_restore_rejects_broken_registry(data_points, next_dp):
    with pytest.raises(ValueError):
        Controller.restore("s", data_points, next_dp, [], 1)
