from datetime import datetime, timedelta, timezone

import pytest

from pwvault.credential import CredentialEntry

STAMP = datetime.fromtimestamp(1700000000, tz=timezone.utc)


def make_entry():
    password = "password"
    return CredentialEntry("example.com", "user", password, STAMP)


def test_serialize_format():
    assert make_entry().serialize() == "example.com|user|password|1700000000"


def test_round_trip():
    entry = make_entry()
    restored = CredentialEntry.deserialize(entry.serialize())
    assert restored.website == "example.com"
    assert restored.username == "user"
    assert restored.password == "password"
    assert restored.last_modified == STAMP
    assert restored == entry


def test_deserialize_keeps_empty_fields():
    restored = CredentialEntry.deserialize("||secret|42")
    assert restored.website == ""
    assert restored.username == ""
    assert restored.password == "secret"
    assert int(restored.last_modified.timestamp()) == 42


@pytest.mark.parametrize("data", ["example.com|user|secret", "", "a|b|c|notanumber", "a|b|c|"])
def test_deserialize_rejects_bad_records(data):
    with pytest.raises(ValueError):
        CredentialEntry.deserialize(data)


@pytest.mark.parametrize("attribute", ["website", "username", "password"])
def test_changing_details_refreshes_timestamp(attribute):
    entry = make_entry()
    setattr(entry, attribute, "token")
    assert getattr(entry, attribute) == "token"
    assert entry.last_modified > STAMP


def test_new_entry_timestamp_is_current():
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    entry = CredentialEntry("example.com", "user", "secret")
    assert before <= entry.last_modified <= datetime.now(timezone.utc)