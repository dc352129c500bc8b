# pwvault

A small password-manager library. Credentials (website, username, password)
are kept in a single vault file. The file is encrypted with AES-256-CBC under
a key derived from a master password with PBKDF2-HMAC-SHA256.

## Installation

```
pip install .
```

## Usage

```python
from pwvault.vault import Vault
from pwvault.credential import CredentialEntry
from pwvault.passwords import generate_password, calculate_password_strength

master_password = "password"
vault = Vault("vault.dat")
vault.initialize(master_password)
vault.add_credential(CredentialEntry("example.com", "alice", generate_password(16, True)))
for entry in vault.search_credentials("example"):
    print(entry.website, entry.username)
vault.lock()

print(calculate_password_strength("password"))
```

### `pwvault.vault.Vault`

- `initialize(master_password)` sets the master password on a new vault and
  writes the file. It returns `False` if the vault is already initialized.
- `unlock(master_password)` / `load(master_password)` check the master
  password and read the credentials from disk.
- `lock()` saves the vault, forgets the credentials held in memory and locks it.
- `add_credential(entry)` refuses a second entry for the same website.
- `update_credential(website, new_entry)` and `delete_credential(website)`
  act on the entry whose website matches exactly.
- `search_credentials(query)` returns copies of the entries whose website
  contains `query`, ignoring case.
- `save()` writes the encrypted file.

Mutating methods return `False` while the vault is locked or when the change
does not apply. Otherwise they save and return whether the save succeeded.
The properties `path`, `initialized` and `locked` report the vault's state.
A `Vault` can be used as a context manager; on exit it saves if it is unlocked.

### `pwvault.credential.CredentialEntry`

A dataclass with `website`, `username`, `password` and `last_modified`.
Changing any of the first three refreshes `last_modified`. `serialize()`
produces `website|username|password|unix_seconds`, and
`CredentialEntry.deserialize(line)` parses that form back. It raises
`ValueError` on a malformed record.

### `pwvault.encryption`

`EncryptionManager` holds the master-password hash and the derived key. It
provides `set_master_password`, `verify_master_password`, `derive_key`,
`encrypt` (which prepends a random IV to the result) and `decrypt`, which
raises `EncryptionError` on bad input. `hash_password(password)` returns the
SHA-256 hex digest of a password.

### `pwvault.passwords`

`generate_password(length, use_special_chars)` returns a random password with
at least one lowercase letter, one uppercase letter, one digit and, if asked
for, one special character. `calculate_password_strength(password)` scores a
password from 0 to 100 by its length, the kinds of characters it uses and how
many distinct characters it has.

## What this package does not do

There is no interactive command-line front end and no installed command. The
package has no menu, no masked password prompt, no clipboard support and no
automatic locking after inactivity. Drive a `Vault` from your own code.

The key is derived with a fresh random salt each time, and the salt is not
stored. A vault file can therefore be decrypted only by the `Vault` object
that wrote it, during that object's lifetime.

## Running the tests

```
pip install .[test]
pytest
```