"""An encrypted, file-backed store of credentials guarded by a master password."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path

from .credential import CredentialEntry
from .encryption import EncryptionManager


class Vault:
    """Credentials kept in memory while unlocked and saved encrypted to a file.

    Mutating operations return ``False`` when the vault is locked or the
    requested change does not apply; otherwise they save and report the result.
    """

    def __init__(self, vault_path: str | os.PathLike[str]) -> None:
        self._path = Path(vault_path)
        self._credentials: list[CredentialEntry] = []
        self._encryption = EncryptionManager()
        self._initialized = False
        self._locked = True

    @property
    def path(self) -> Path:
        return self._path

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def locked(self) -> bool:
        return self._locked

    def __enter__(self) -> Vault:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self._locked:
            self.save()

    def initialize(self, master_password: str) -> bool:
        """Set the master password on a new vault and write it out."""
        if self._initialized:
            return False
        self._encryption.set_master_password(master_password)
        self._initialized = True
        self._locked = False
        return self.save()

    def load(self, master_password: str) -> bool:
        """Check the master password and read the credentials from disk."""
        if not self._encryption.verify_master_password(master_password):
            return False
        if not self._read_vault_file():
            return False
        self._initialized = True
        self._locked = False
        return True

    def save(self) -> bool:
        if self._locked:
            return False
        return self._write_vault_file()

    def _find(self, website: str) -> int | None:
        return next(
            (i for i, entry in enumerate(self._credentials) if entry.website == website),
            None,
        )

    def add_credential(self, entry: CredentialEntry) -> bool:
        """Add ``entry`` unless one for the same website already exists."""
        if self._locked or self._find(entry.website) is not None:
            return False
        self._credentials.append(dataclasses.replace(entry))
        return self.save()

    def update_credential(self, website: str, new_entry: CredentialEntry) -> bool:
        if self._locked:
            return False
        index = self._find(website)
        if index is None:
            return False
        self._credentials[index] = dataclasses.replace(new_entry)
        return self.save()

    def delete_credential(self, website: str) -> bool:
        if self._locked:
            return False
        index = self._find(website)
        if index is None:
            return False
        del self._credentials[index]
        return self.save()

    def search_credentials(self, query: str) -> list[CredentialEntry]:
        """Return copies of entries whose website contains ``query``, ignoring case."""
        if self._locked:
            return []
        needle = query.lower()
        return [
            dataclasses.replace(entry)
            for entry in self._credentials
            if needle in entry.website.lower()
        ]

    def lock(self) -> None:
        """Save, forget the credentials in memory and lock."""
        if not self._locked:
            self.save()
            self._credentials.clear()
            self._locked = True

    def unlock(self, master_password: str) -> bool:
        if not self._locked:
            return True
        return self.load(master_password)

    def _read_vault_file(self) -> bool:
        try:
            encrypted = self._path.read_bytes()
        except OSError:
            return False
        if not encrypted:
            return True
        decrypted = self._encryption.decrypt(encrypted)
        self._credentials.extend(
            CredentialEntry.deserialize(line) for line in decrypted.split("\n") if line
        )
        return True

    def _write_vault_file(self) -> bool:
        if self._locked:
            return False
        text = "".join(entry.serialize() + "\n" for entry in self._credentials)
        encrypted = self._encryption.encrypt(text)
        try:
            self._path.write_bytes(encrypted)
        except OSError:
            return False
        return True