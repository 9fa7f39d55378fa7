"""Introspection of the instructions sysvar."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from .pubkey import PUBKEY_BYTES
from .sysvar import InvalidArgument, InvalidInstructionData, UnsupportedSysvar

INSTRUCTIONS_ID = bytes(
    [
        0x06, 0xA7, 0xD5, 0x17, 0x18, 0x7B, 0xD1, 0x66, 0x35, 0xDA, 0xD4, 0x04, 0x55, 0xFD,
        0xC2, 0xC0, 0xC1, 0x24, 0xC6, 0x8F, 0x21, 0x56, 0x75, 0xA5, 0xDB, 0xBA, 0xCB, 0x5F,
        0x08, 0x00, 0x00, 0x00,
    ]
)

IS_SIGNER = 0b00000001
IS_WRITABLE = 0b00000010

_U16 = struct.Struct("<H")


def _read_u16(data: bytes, offset: int) -> int:
    if offset < 0 or offset + _U16.size > len(data):
        raise InvalidInstructionData("instructions sysvar data is truncated")
    return _U16.unpack_from(data, offset)[0]


def _read(data: bytes, offset: int, length: int) -> bytes:
    if offset < 0 or offset + length > len(data):
        raise InvalidInstructionData("instructions sysvar data is truncated")
    return data[offset:offset + length]


@dataclass(frozen=True)
class IntrospectedAccountMeta:
    """An account referenced by an introspected instruction."""

    flags: int
    key: bytes

    LEN: ClassVar[int] = 1 + PUBKEY_BYTES

    def is_writable(self) -> bool:
        """Return True if the account is writable."""
        return bool(self.flags & IS_WRITABLE)

    def is_signer(self) -> bool:
        """Return True if the account is a signer."""
        return bool(self.flags & IS_SIGNER)


@dataclass(frozen=True)
class IntrospectedInstruction:
    """An instruction of the executing transaction, read from the sysvar data."""

    data: bytes
    offset: int

    def _num_accounts(self) -> int:
        return _read_u16(self.data, self.offset)

    def _program_id_offset(self) -> int:
        return self.offset + _U16.size + self._num_accounts() * IntrospectedAccountMeta.LEN

    def get_account_meta_at(self, index: int) -> IntrospectedAccountMeta:
        """Return the account meta at ``index``."""
        if not 0 <= index < self._num_accounts():
            raise InvalidArgument(f"account index {index} is out of range")
        start = self.offset + _U16.size + index * IntrospectedAccountMeta.LEN
        raw = _read(self.data, start, IntrospectedAccountMeta.LEN)
        return IntrospectedAccountMeta(raw[0], bytes(raw[1:]))

    def get_program_id(self) -> bytes:
        """Return the program id of the instruction."""
        return bytes(_read(self.data, self._program_id_offset(), PUBKEY_BYTES))

    def get_instruction_data(self) -> bytes:
        """Return the instruction data."""
        length_offset = self._program_id_offset() + PUBKEY_BYTES
        data_len = _read_u16(self.data, length_offset)
        return bytes(_read(self.data, length_offset + _U16.size, data_len))


@dataclass(frozen=True)
class Instructions:
    """The instructions sysvar account data."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_account(cls, key: bytes, data: bytes) -> Instructions:
        """Read the sysvar from an account, checking that the key is the instructions sysvar."""
        if bytes(key) != INSTRUCTIONS_ID:
            raise UnsupportedSysvar("account is not the instructions sysvar")
        return cls(data)

    def num_instructions(self) -> int:
        """Number of instructions in the executing transaction."""
        return _read_u16(self.data, 0)

    def load_current_index(self) -> int:
        """Index of the currently executing instruction."""
        return _read_u16(self.data, len(self.data) - _U16.size)

    def load_instruction_at(self, index: int) -> IntrospectedInstruction:
        """Return the instruction at ``index``."""
        if not 0 <= index < self.num_instructions():
            raise InvalidInstructionData(f"instruction index {index} is out of range")
        offset = _read_u16(self.data, _U16.size + index * _U16.size)
        return IntrospectedInstruction(self.data, offset)

    def get_instruction_relative(self, index_relative_to_current: int) -> IntrospectedInstruction:
        """Return the instruction at an offset from the currently executing one."""
        index = self.load_current_index() + index_relative_to_current
        if index < 0:
            raise InvalidInstructionData(f"instruction index {index} is out of range")
        return self.load_instruction_at(index)