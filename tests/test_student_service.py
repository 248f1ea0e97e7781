from concurrent.futures import ThreadPoolExecutor

import pytest

from student_crud_api.app.services.student_service import (
    StudentNotFoundError,
    StudentStore,
    parse_student_id,
)


def test_create_assigns_increasing_ids(store):
    alice = store.create({"name": "Alice", "age": 20})
    bob = store.create({"name": "Bob", "age": 22})

    assert alice == {"id": 1, "name": "Alice", "age": 20}
    assert bob == {"id": 2, "name": "Bob", "age": 22}
    assert store.next_id == 3


def test_create_ignores_caller_id(store):
    student = store.create({"id": 42, "name": "Mallory"})

    assert student == {"id": 1, "name": "Mallory"}
    assert list(student)[0] == "id"


def test_create_accepts_any_fields(store):
    student = store.create({"name": None, "age": "twenty", "tags": ["a", "b"]})

    assert student == {"id": 1, "name": None, "age": "twenty", "tags": ["a", "b"]}
    assert store.create({}) == {"id": 2}


def test_ids_are_never_reused_after_delete(store):
    store.create({"name": "Alice"})
    store.create({"name": "Bob"})
    store.delete_by_id(2)

    carol = store.create({"name": "Carol"})

    assert carol["id"] == 3
    assert [s["id"] for s in store.list_all()] == [1, 3]


def test_list_all_empty(store):
    assert store.list_all() == []
    assert len(store) == 0


def test_list_all_preserves_insertion_order(store):
    for name in ("Alice", "Bob", "Carol"):
        store.create({"name": name})

    assert [s["name"] for s in store.list_all()] == ["Alice", "Bob", "Carol"]


def test_get_by_id_round_trip(store):
    created = store.create({"name": "Alice", "age": 20})

    assert store.get_by_id(created["id"]) == created


def test_get_by_id_accepts_string_ids(store):
    created = store.create({"name": "Alice"})

    assert store.get_by_id("1") == created
    assert store.get_by_id(" 1 ") == created


@pytest.mark.parametrize("student_id", [999, "999", "abc", "1.5", "", "1_0", "\u0661", True])
def test_get_by_id_missing(store, student_id):
    store.create({"name": "Alice"})

    with pytest.raises(StudentNotFoundError) as exc_info:
        store.get_by_id(student_id)

    assert exc_info.value.student_id == student_id


def test_update_replaces_whole_record(store):
    store.create({"name": "Bob", "age": 22})

    updated = store.update_by_id(1, {"name": "Bobby"})

    assert updated == {"id": 1, "name": "Bobby"}
    assert store.get_by_id(1) == {"id": 1, "name": "Bobby"}


def test_update_keeps_id_and_position(store):
    store.create({"name": "Alice"})
    store.create({"name": "Bob"})
    store.create({"name": "Carol"})

    updated = store.update_by_id("2", {"id": 99, "name": "Robert"})

    assert updated == {"id": 2, "name": "Robert"}
    assert [s["name"] for s in store.list_all()] == ["Alice", "Robert", "Carol"]
    assert store.next_id == 4


def test_update_missing_leaves_store_unchanged(store):
    store.create({"name": "Alice"})
    before = store.list_all()

    with pytest.raises(StudentNotFoundError):
        store.update_by_id(7, {"name": "Ghost"})
    with pytest.raises(StudentNotFoundError):
        store.update_by_id("seven", {"name": "Ghost"})

    assert store.list_all() == before


def test_delete_is_idempotent(store):
    store.create({"name": "Alice"})
    store.create({"name": "Bob"})

    store.delete_by_id(1)
    after_first = store.list_all()
    store.delete_by_id(1)

    assert store.list_all() == after_first == [{"id": 2, "name": "Bob"}]


def test_delete_unknown_or_invalid_id_is_a_no_op(store):
    store.create({"name": "Alice"})

    store.delete_by_id(999)
    store.delete_by_id("not-a-number")

    assert store.list_all() == [{"id": 1, "name": "Alice"}]


def test_delete_preserves_order_of_remaining(store):
    for name in ("Alice", "Bob", "Carol", "Dave"):
        store.create({"name": name})

    store.delete_by_id("2")

    assert [s["id"] for s in store.list_all()] == [1, 3, 4]


def test_returned_records_are_copies(store):
    created = store.create({"name": "Alice"})
    created["name"] = "Changed"
    store.list_all()[0]["name"] = "Changed again"

    assert store.get_by_id(1)["name"] == "Alice"


def test_concurrent_creates_get_unique_ids():
    store = StudentStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda n: store.create({"n": n}), range(400)))

    ids = [r["id"] for r in results]
    assert sorted(ids) == list(range(1, 401))
    assert len(store) == 400


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3),
        ("3", 3),
        ("-2", -2),
        ("03", 3),
        ("x", None),
        ("2.0", None),
        ("1_0", None),
        ("\u0661", None),
        ("0x1", None),
        (False, None),
    ],
)
def test_parse_student_id(value, expected):
    assert parse_student_id(value) == expected
