import pytest

from proctinet.auth import (
    AuthenticationAborted,
    UserRecord,
    authenticate,
    build_dsn,
    is_valid_user,
)

USERS = [
    UserRecord("alice", "alice@example.com"),
    UserRecord("bob", "bob@example.com"),
]


def _reader(lines):
    it = iter(lines)
    return lambda: next(it)


def test_build_dsn_contains_all_settings():
    password = "password"
    env = {
        "DB_HOST": "localhost",
        "DB_USER": "user",
        "DB_PASSWORD": password,
        "DB_NAME": "proctinet",
        "DB_PORT": "5432",
    }
    dsn = build_dsn(env)
    assert dsn == (
        "host=localhost user=user password=password dbname=proctinet "
        "port=5432 sslmode=require"
    )


def test_build_dsn_missing_values_are_empty():
    dsn = build_dsn({})
    assert dsn.startswith("host= user=")
    assert dsn.endswith("sslmode=require")


def test_is_valid_user_requires_both_fields():
    assert is_valid_user(USERS, "alice", "alice@example.com")
    assert not is_valid_user(USERS, "alice", "bob@example.com")
    assert not is_valid_user([], "alice", "alice@example.com")


def test_authenticate_returns_matching_user():
    out = []
    user = authenticate(USERS, _reader(["  bob \n", "bob@example.com\n"]), out.append)
    assert user == UserRecord("bob", "bob@example.com")
    assert any("Welcome, bob!" in text for text in out)


def test_authenticate_retries_after_invalid_input():
    out = []
    user = authenticate(
        USERS,
        _reader(["alice", "wrong@example.com", "alice", "alice@example.com"]),
        out.append,
    )
    assert user.username == "alice"
    assert sum("Invalid username or email" in text for text in out) == 1


@pytest.mark.parametrize("word", ["exit", "EXIT", " Exit "])
def test_authenticate_exit_aborts(word):
    out = []
    with pytest.raises(AuthenticationAborted):
        authenticate(USERS, _reader([word]), out.append)
    assert any("Exiting program." in text for text in out)