"""A single stored credential and its line-oriented serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

_SEPARATOR = "|"
_TRACKED_FIELDS = frozenset({"website", "username", "password"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CredentialEntry:
    """Website login details; changing any detail refreshes ``last_modified``."""

    website: str = ""
    username: str = ""
    password: str = ""
    last_modified: datetime = field(default_factory=_now)

    def __setattr__(self, name: str, value: object) -> None:
        super().__setattr__(name, value)
        if name in _TRACKED_FIELDS:
            super().__setattr__("last_modified", _now())

    def serialize(self) -> str:
        """Return ``website|username|password|unix_seconds``."""
        timestamp = int(self.last_modified.timestamp())
        return _SEPARATOR.join((self.website, self.username, self.password, str(timestamp)))

    @classmethod
    def deserialize(cls, data: str) -> CredentialEntry:
        """Parse a line produced by :meth:`serialize`.

        Raises ValueError when the timestamp field is missing or not an integer.
        """
        parts = data.split(_SEPARATOR, 3)
        if len(parts) < 4:
            raise ValueError(f"malformed credential record: {data!r}")
        website, username, password, timestamp = parts
        try:
            seconds = int(timestamp.strip())
        except ValueError as exc:
            raise ValueError(f"invalid timestamp in credential record: {timestamp!r}") from exc
        return cls(
            website,
            username,
            password,
            datetime.fromtimestamp(seconds, tz=timezone.utc),
        )