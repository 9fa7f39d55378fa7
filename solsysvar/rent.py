"""The current cluster rent and rent-exemption calculations."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import ClassVar

from .sysvar import InvalidArgument, Sysvar

RENT_ID = bytes(
    [
        6, 167, 213, 23, 25, 44, 92, 81, 33, 140, 201, 76, 61, 74, 241, 127, 88, 218, 238, 8,
        155, 161, 253, 68, 227, 219, 217, 138, 0, 0, 0, 0,
    ]
)

DEFAULT_LAMPORTS_PER_BYTE_YEAR = 1_000_000_000 // 100 * 365 // (1024 * 1024)
DEFAULT_EXEMPTION_THRESHOLD = 2.0
DEFAULT_BURN_PERCENT = 50
ACCOUNT_STORAGE_OVERHEAD = 128

_DEFAULT_EXEMPTION_THRESHOLD_AS_INT = 2
_U64_MAX = (1 << 64) - 1

_LAYOUT = struct.Struct("<QdB")


def _float_to_u64(value: float) -> int:
    """Convert a float to an unsigned 64-bit integer, truncating and saturating."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _U64_MAX
    return min(int(value), _U64_MAX)


@dataclass(frozen=True)
class RentDue:
    """The rent owed by an account; ``amount`` is None when it is exempt."""

    amount: int | None = None

    def lamports(self) -> int:
        """Return the lamports due for rent."""
        return 0 if self.amount is None else self.amount

    def is_exempt(self) -> bool:
        """Return True if the account is rent exempt."""
        return self.amount is None


EXEMPT = RentDue()


@dataclass
class Rent(Sysvar):
    """Rent sysvar data."""

    lamports_per_byte_year: int
    exemption_threshold: float
    burn_percent: int

    LEN: ClassVar[int] = _LAYOUT.size

    @classmethod
    def default(cls) -> Rent:
        """Return the rent with the cluster's default values."""
        return cls(
            DEFAULT_LAMPORTS_PER_BYTE_YEAR,
            DEFAULT_EXEMPTION_THRESHOLD,
            DEFAULT_BURN_PERCENT,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Rent:
        """Read the rent from account data of at least ``LEN`` bytes."""
        if len(data) < cls.LEN:
            raise InvalidArgument(f"rent data must be at least {cls.LEN} bytes long")
        return cls(*_LAYOUT.unpack_from(data))

    @classmethod
    def from_account(cls, key: bytes, data: bytes) -> Rent:
        """Read the rent from an account, checking that the key is the rent sysvar."""
        if bytes(key) != RENT_ID:
            raise InvalidArgument("account is not the rent sysvar")
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        """Serialize the rent to its account data layout."""
        return _LAYOUT.pack(
            self.lamports_per_byte_year, self.exemption_threshold, self.burn_percent
        )

    def calculate_burn(self, rent_collected: int) -> tuple[int, int]:
        """Split collected rent into ``(burned, distributed to validators)``."""
        burned = rent_collected * self.burn_percent // 100
        return burned, rent_collected - burned

    def due(self, balance: int, data_len: int, years_elapsed: float) -> RentDue:
        """Rent due on an account's data length with the given balance."""
        if self.is_exempt(balance, data_len):
            return EXEMPT
        return RentDue(self.due_amount(data_len, years_elapsed))

    def due_amount(self, data_len: int, years_elapsed: float) -> int:
        """Rent due for an account that is known not to be exempt."""
        lamports_per_year = self.lamports_per_byte_year * (data_len + ACCOUNT_STORAGE_OVERHEAD)
        return _float_to_u64(float(lamports_per_year) * years_elapsed)

    def minimum_balance(self, data_len: int) -> int:
        """Minimum balance in lamports for an account of ``data_len`` bytes to be exempt."""
        lamports_per_year = (ACCOUNT_STORAGE_OVERHEAD + data_len) * self.lamports_per_byte_year
        if self.exemption_threshold == DEFAULT_EXEMPTION_THRESHOLD:
            return lamports_per_year * _DEFAULT_EXEMPTION_THRESHOLD_AS_INT
        return _float_to_u64(float(lamports_per_year) * self.exemption_threshold)

    def is_exempt(self, lamports: int, data_len: int) -> bool:
        """Return True if an account with this balance and size is rent exempt."""
        return lamports >= self.minimum_balance(data_len)