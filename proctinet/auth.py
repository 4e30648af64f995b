"""Interactive login against the known users of the service."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class UserRecord:
    """A registered user's name and e-mail address."""

    username: str
    email: str


class AuthenticationAborted(Exception):
    """Raised when the user chooses to quit instead of logging in."""


def build_dsn(env: Mapping[str, str]) -> str:
    """Build a PostgreSQL connection string from the database settings in *env*."""
    return (
        f"host={env.get('DB_HOST', '')} user={env.get('DB_USER', '')} "
        f"password={env.get('DB_PASSWORD', '')} dbname={env.get('DB_NAME', '')} "
        f"port={env.get('DB_PORT', '')} sslmode=require"
    )


def is_valid_user(users: Iterable[UserRecord], username: str, email: str) -> bool:
    """Tell whether some user has exactly this username and e-mail address."""
    return any(user.username == username and user.email == email for user in users)


def authenticate(
    users: Iterable[UserRecord],
    read_line: Callable[[], str],
    write: Callable[[str], object],
) -> UserRecord:
    """Prompt for credentials until they match a user, and return that user.

    Raises AuthenticationAborted when the user types ``exit``.
    """
    known = list(users)
    while True:
        write(f"{_CYAN}Enter username (or type 'exit' to quit): {_RESET}")
        username = read_line().strip()
        if username.lower() == "exit":
            write(f"{_YELLOW}Exiting program.{_RESET}\n")
            raise AuthenticationAborted("login cancelled by user")

        write(f"{_CYAN}Enter email: {_RESET}")
        email = read_line().strip()

        if is_valid_user(known, username, email):
            write(f"{_GREEN}✅ Welcome, {username}!{_RESET}\n")
            return UserRecord(username, email)
        write(f"{_RED}❌ Invalid username or email. Please try again.{_RESET}\n")