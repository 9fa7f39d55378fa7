# solsysvar

Pure-Python models of the cluster system variables (sysvars) and helpers
for program ids and program-derived addresses. It has no runtime
dependencies.

## Installation

```
pip install solsysvar
```

## Modules

- `solsysvar.pubkey`
  - `from_str(value)` decodes a base58 string into a 32-byte key. It raises
    `ValueError` on a character outside the base58 alphabet, or when the
    result is not 32 bytes long.
  - `derive_address(seeds, bump, program_id)` returns the SHA-256 hash of the
    seeds, the optional one-byte bump, the program id and the
    `ProgramDerivedAddress` marker. It does not check that the result lies
    off the curve. It raises `ValueError` for `MAX_SEEDS` (16) or more seeds,
    a program id that is not 32 bytes, or a bump outside 0–255.
  - `declare_id(value)` returns a `ProgramId`. Its `id` attribute holds the
    decoded bytes, and `check_id(pubkey)` compares a key with it.
- `solsysvar.clock`
  - `Clock` has `slot`, `epoch_start_timestamp`, `epoch`,
    `leader_schedule_epoch` and `unix_timestamp`.
  - `Clock.from_bytes(data)` reads the 40-byte little-endian layout, and
    `to_bytes()` writes it.
  - `Clock.from_account(key, data)` first checks `key` against `CLOCK_ID`.
  - The module also defines `DEFAULT_TICKS_PER_SLOT`,
    `DEFAULT_TICKS_PER_SECOND` and `DEFAULT_MS_PER_SLOT`.
- `solsysvar.fees`
  - `FeeCalculator` holds a plain `lamports_per_signature` value.
  - `FeeRateGovernor` has the cluster defaults.
    `create_fee_calculator()` returns a `FeeCalculator`, and `burn(fees)`
    returns `(unburned, burned)`.
  - `Fees` pairs a `FeeCalculator` with a `FeeRateGovernor`.
- `solsysvar.rent`
  - `Rent.default()` returns the cluster defaults.
  - `Rent.from_bytes` and `Rent.to_bytes` read and write the 17-byte layout.
    `Rent.from_account(key, data)` first checks `key` against `RENT_ID`.
  - `minimum_balance(data_len)` gives the balance needed for exemption, and
    `is_exempt(lamports, data_len)` says whether a balance reaches it.
  - `due(balance, data_len, years_elapsed)` returns a `RentDue`, which has
    `lamports()` and `is_exempt()`. `due_amount(...)` gives the rent owed by
    an account that is not exempt.
  - `calculate_burn(rent_collected)` returns
    `(burned, distributed)`.
- `solsysvar.instructions`
  - `Instructions` wraps the instructions sysvar data.
    `Instructions.from_account(key, data)` checks `key` against
    `INSTRUCTIONS_ID`.
  - It provides `num_instructions()`, `load_current_index()`,
    `load_instruction_at(index)` and
    `get_instruction_relative(index_relative_to_current)`.
  - Each `IntrospectedInstruction` has `get_account_meta_at(index)`,
    `get_program_id()` and `get_instruction_data()`.
  - Each `IntrospectedAccountMeta` has `key`, `is_signer()` and
    `is_writable()`.
- `solsysvar.sysvar`
  - The error hierarchy: `ProgramError` and its subclasses
    `InvalidArgument`, `InvalidInstructionData` and `UnsupportedSysvar`.
  - The `Sysvar` base class.

## Example

```python
from solsysvar.rent import Rent
from solsysvar.pubkey import declare_id, derive_address

rent = Rent.default()
print(rent.minimum_balance(100))         # lamports needed for exemption
print(rent.due(0, 100, 1.0).lamports())  # rent owed after one year

program = declare_id("11111111111111111111111111111111")
address = derive_address([b"vault"], 255, program.id)
print(program.check_id(program.id))      # True
```

## Errors

The sysvar readers raise subclasses of `ProgramError`:

- `InvalidArgument` for data shorter than the layout, for a clock or rent
  account key that does not match the sysvar's id, and for an account
  index out of range.
- `UnsupportedSysvar` when an instructions account key does not match.
- `InvalidInstructionData` for an instruction index out of range or for
  truncated instructions data.

The helpers in `solsysvar.pubkey` raise `ValueError`.

## What it does not do

No runtime is reachable from this package. `Sysvar.get()` therefore always
raises `UnsupportedSysvar`, and sysvars can only be read from account data
that you supply. Derived addresses are not validated as off-curve.

## Running the tests

```
pip install -e .[test]
pytest
```