"""Program errors and the common base for sysvar types."""

from __future__ import annotations


class ProgramError(Exception):
    """Base class for errors reported while reading program data."""


class InvalidArgument(ProgramError):
    """An argument, such as an account key or a byte length, is not valid."""


class InvalidInstructionData(ProgramError):
    """Instruction data is malformed or an index is out of range."""


class UnsupportedSysvar(ProgramError):
    """The sysvar cannot be loaded in this context."""


class Sysvar:
    """A type that holds sysvar data."""

    @classmethod
    def get(cls):
        """Load the sysvar directly from the runtime.

        No runtime is reachable from here, so the load always fails with
        :class:`UnsupportedSysvar`.
        """
        raise UnsupportedSysvar(f"{cls.__name__} cannot be loaded from the runtime")