"""Master-password hashing, key derivation and AES-256-CBC encryption."""

from __future__ import annotations

import hashlib
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

KEY_SIZE = 32
IV_SIZE = 16
SALT_SIZE = 16
ITERATIONS = 100_000
_BLOCK_BITS = algorithms.AES.block_size
_BLOCK_BYTES = _BLOCK_BITS // 8


class EncryptionError(Exception):
    """Raised when data cannot be encrypted or decrypted."""


def hash_password(password: str) -> str:
    """Return the lowercase hex SHA-256 digest of ``password``."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class EncryptionManager:
    """Holds the master-password hash and the derived encryption key."""

    def __init__(self) -> None:
        self._key = bytes(KEY_SIZE)
        self._master_password_hash = ""

    def set_master_password(self, password: str) -> None:
        """Remember the password's hash and derive a fresh key from it."""
        self._master_password_hash = hash_password(password)
        self.derive_key(password)

    def verify_master_password(self, password: str) -> bool:
        return hash_password(password) == self._master_password_hash

    def derive_key(self, password: str) -> None:
        """Derive the key with PBKDF2-HMAC-SHA256 over a new random salt."""
        salt = secrets.token_bytes(SALT_SIZE)
        self._key = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, ITERATIONS, dklen=KEY_SIZE
        )

    def _cipher(self, iv: bytes) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(iv))

    def encrypt(self, plaintext: str) -> bytes:
        """Encrypt ``plaintext``; the random IV is prepended to the result."""
        iv = secrets.token_bytes(IV_SIZE)
        padder = padding.PKCS7(_BLOCK_BITS).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
        encryptor = self._cipher(iv).encryptor()
        return iv + encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, ciphertext: bytes) -> str:
        """Decrypt data produced by :meth:`encrypt`."""
        data = bytes(ciphertext)
        if len(data) < IV_SIZE:
            raise EncryptionError("Invalid ciphertext size")
        iv, body = data[:IV_SIZE], data[IV_SIZE:]
        if not body or len(body) % _BLOCK_BYTES:
            raise EncryptionError("Failed to finalize decryption")
        decryptor = self._cipher(iv).decryptor()
        padded = decryptor.update(body) + decryptor.finalize()
        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        try:
            plain = unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise EncryptionError("Failed to finalize decryption") from exc
        try:
            return plain.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncryptionError("Decrypted data is not valid text") from exc