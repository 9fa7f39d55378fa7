"""Information about the network's clock, ticks, slots and epochs."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from .sysvar import InvalidArgument, Sysvar

CLOCK_ID = bytes(
    [
        6, 167, 213, 23, 24, 199, 116, 201, 40, 86, 99, 152, 105, 29, 94, 182, 139, 94, 184, 163,
        155, 75, 109, 92, 115, 85, 91, 33, 0, 0, 0, 0,
    ]
)

DEFAULT_TICKS_PER_SLOT = 64
DEFAULT_TICKS_PER_SECOND = 160
DEFAULT_MS_PER_SLOT = 1_000 * DEFAULT_TICKS_PER_SLOT // DEFAULT_TICKS_PER_SECOND

_LAYOUT = struct.Struct("<QqQQq")


@dataclass(frozen=True)
class Clock(Sysvar):
    """A representation of network time."""

    slot: int
    epoch_start_timestamp: int
    epoch: int
    leader_schedule_epoch: int
    unix_timestamp: int

    LEN: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> Clock:
        """Read a clock from account data of at least ``LEN`` bytes."""
        if len(data) < cls.LEN:
            raise InvalidArgument(f"clock data must be at least {cls.LEN} bytes long")
        return cls(*_LAYOUT.unpack_from(data))

    @classmethod
    def from_account(cls, key: bytes, data: bytes) -> Clock:
        """Read a clock from an account, checking that the key is the clock sysvar."""
        if bytes(key) != CLOCK_ID:
            raise InvalidArgument("account is not the clock sysvar")
        return cls.from_bytes(data)

    def to_bytes(self) -> bytes:
        """Serialize the clock to its account data layout."""
        return _LAYOUT.pack(
            self.slot,
            self.epoch_start_timestamp,
            self.epoch,
            self.leader_schedule_epoch,
            self.unix_timestamp,
        )