"""Public key decoding, program ids and program address derivation."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass

PUBKEY_BYTES = 32
MAX_SEEDS = 16
PDA_MARKER = b"ProgramDerivedAddress"

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}


def from_str(value: str) -> bytes:
    """Decode a base58 string into a 32-byte public key."""
    number = 0
    for char in value:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading = len(value) - len(value.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    decoded = bytes(leading) + body
    if len(decoded) != PUBKEY_BYTES:
        raise ValueError(
            f"decoded key is {len(decoded)} bytes long, expected {PUBKEY_BYTES}"
        )
    return decoded


def derive_address(seeds: Iterable[bytes], bump: int | None, program_id: bytes) -> bytes:
    """Derive a program address from seeds, an optional bump and a program id.

    The result is not checked to lie off the curve.
    """
    seeds = [bytes(seed) for seed in seeds]
    if len(seeds) >= MAX_SEEDS:
        raise ValueError("number of seeds must be less than MAX_SEEDS")
    program_id = bytes(program_id)
    if len(program_id) != PUBKEY_BYTES:
        raise ValueError(f"program id must be {PUBKEY_BYTES} bytes long")
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    if bump is not None:
        if not 0 <= bump <= 0xFF:
            raise ValueError("bump must fit in one byte")
        hasher.update(bytes([bump]))
    hasher.update(program_id)
    hasher.update(PDA_MARKER)
    return hasher.digest()


@dataclass(frozen=True)
class ProgramId:
    """A declared program id."""

    id: bytes

    def check_id(self, pubkey: bytes) -> bool:
        """Return True if the given key is this program id."""
        return bytes(pubkey) == self.id

    def __bytes__(self) -> bytes:
        return self.id


def declare_id(value: str) -> ProgramId:
    """Declare a program id from its base58 form."""
    return ProgramId(from_str(value))