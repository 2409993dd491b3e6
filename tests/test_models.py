import threading

import pytest

from usermgmt.models import (
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserNotFoundError,
    UserStore,
    ValidationError,
    seeded_store,
)


@pytest.fixture
def store():
    return seeded_store()


def test_seeded_store_holds_initial_users(store):
    users = store.get_all_users()
    assert [u.name for u in users] == ["Alice", "Bob", "Charlie"]
    assert [u.email for u in users] == [
        "alice@example.com",
        "bob@example.com",
        "charlie@example.com",
    ]
    assert [u.id for u in users] == [1, 2, 3]


def test_create_user_assigns_unique_increasing_ids():
    store = UserStore()
    created = [store.create_user(f"user{i}", f"user{i}@example.com") for i in range(5)]
    ids = [u.id for u in created]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
    assert len(store) == len(created)


def test_ids_are_not_reused_after_delete(store):
    first = store.create_user("Dave", "dave@example.com")
    store.delete_user(first.id)
    second = store.create_user("Eve", "eve@example.com")
    assert second.id > first.id


def test_get_user_returns_stored_user(store):
    created = store.create_user("Dave", "dave@example.com")
    assert store.get_user(created.id) == created


def test_get_unknown_user_raises(store):
    with pytest.raises(UserNotFoundError) as info:
        store.get_user(99)
    assert info.value.user_id == 99


def test_update_changes_only_given_fields(store):
    updated = store.update_user(1, name="Alice Updated")
    assert updated.name == "Alice Updated"
    assert updated.email == "alice@example.com"
    assert store.get_user(1) == updated


def test_update_with_empty_values_keeps_user(store):
    before = store.get_user(2)
    after = store.update_user(2, name="", email="")
    assert after == before


def test_update_unknown_user_raises(store):
    with pytest.raises(UserNotFoundError):
        store.update_user(999, name="Nobody")


def test_delete_removes_user(store):
    store.delete_user(1)
    with pytest.raises(UserNotFoundError):
        store.get_user(1)
    assert 1 not in [u.id for u in store.get_all_users()]


def test_delete_twice_raises(store):
    store.delete_user(1)
    with pytest.raises(UserNotFoundError):
        store.delete_user(1)


def test_reset_empties_store_and_restarts_ids(store):
    store.reset()
    assert store.get_all_users() == []
    assert store.create_user("Alice", "alice@example.com").id == 1


def test_returned_users_are_copies(store):
    users = store.get_all_users()
    users[0].name = "changed"
    fetched = store.get_user(1)
    fetched.email = "changed@example.com"
    assert store.get_user(1).name == "Alice"
    assert store.get_user(1).email == "alice@example.com"


def test_user_to_dict_round_trip():
    user = User(id=1, name="Alice", email="alice@example.com")
    data = user.to_dict()
    assert data == {"id": 1, "name": "Alice", "email": "alice@example.com"}
    assert User(**data) == user


@pytest.mark.parametrize(
    "data",
    [
        {"name": "Charlie", "email": "charlie@example.com"},
        '{"name": "Charlie", "email": "charlie@example.com"}',
        b'{"name": "Charlie", "email": "charlie@example.com", "extra": 1}',
    ],
)
def test_create_request_accepts_complete_body(data):
    req = CreateUserRequest.from_json(data)
    assert (req.name, req.email) == ("Charlie", "charlie@example.com")


@pytest.mark.parametrize(
    "data",
    [
        {"name": "Incomplete"},
        {"email": "charlie@example.com"},
        {"name": "", "email": "charlie@example.com"},
        {"name": None, "email": "charlie@example.com"},
        {"name": 5, "email": "charlie@example.com"},
        "not json",
        b"",
        None,
        ["Charlie", "charlie@example.com"],
    ],
)
def test_create_request_rejects_bad_body(data):
    with pytest.raises(ValidationError):
        CreateUserRequest.from_json(data)


def test_update_request_defaults_to_empty_fields():
    req = UpdateUserRequest.from_json("{}")
    assert req == UpdateUserRequest(name="", email="")


def test_update_request_reads_given_fields():
    req = UpdateUserRequest.from_json({"email": "alice.updated@example.com"})
    assert req.email == "alice.updated@example.com"
    assert req.name == ""


@pytest.mark.parametrize("data", [None, "", "{", {"name": ["x"]}, 42])
def test_update_request_rejects_bad_body(data):
    with pytest.raises(ValidationError):
        UpdateUserRequest.from_json(data)


def test_concurrent_creates_get_distinct_ids():
    store = UserStore()
    threads_count, per_thread = 8, 50

    def work():
        for _ in range(per_thread):
            store.create_user("Alice", "alice@example.com")

    threads = [threading.Thread(target=work) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    ids = {u.id for u in store.get_all_users()}
    assert len(ids) == threads_count * per_thread
    assert len(store) == threads_count * per_thread