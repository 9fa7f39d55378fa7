import pytest

from solsysvar.pubkey import (
    MAX_SEEDS,
    PUBKEY_BYTES,
    declare_id,
    derive_address,
    from_str,
)

INSTRUCTIONS_STR = "Sysvar1nstructions1111111111111111111111111"
INSTRUCTIONS_BYTES = bytes(
    [
        0x06, 0xA7, 0xD5, 0x17, 0x18, 0x7B, 0xD1, 0x66, 0x35, 0xDA, 0xD4, 0x04, 0x55, 0xFD, 0xC2, 0xC0,
        0xC1, 0x24, 0xC6, 0x8F, 0x21, 0x56, 0x75, 0xA5, 0xDB, 0xBA, 0xCB, 0x5F, 0x08, 0x00, 0x00, 0x00,
    ]
)


def test_all_ones_decode_to_zero_key():
    assert from_str("1" * 32) == bytes(32)


def test_decode_instructions_sysvar_id():
    assert from_str(INSTRUCTIONS_STR) == INSTRUCTIONS_BYTES


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        from_str("0" + "1" * 31)


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        from_str("1")


def test_declare_id_checks_id():
    program = declare_id(INSTRUCTIONS_STR)
    assert program.id == INSTRUCTIONS_BYTES
    assert bytes(program) == INSTRUCTIONS_BYTES
    assert program.check_id(INSTRUCTIONS_BYTES)
    assert not program.check_id(bytes(32))


def test_derive_address_is_deterministic_and_sized():
    first = derive_address([b"vault", b"x"], 254, INSTRUCTIONS_BYTES)
    second = derive_address([b"vault", b"x"], 254, INSTRUCTIONS_BYTES)
    assert first == second
    assert len(first) == PUBKEY_BYTES


def test_seeds_are_hashed_in_sequence():
    joined = derive_address([b"ab"], None, INSTRUCTIONS_BYTES)
    split = derive_address([b"a", b"b"], None, INSTRUCTIONS_BYTES)
    assert joined == split


def test_bump_acts_as_trailing_seed():
    with_bump = derive_address([b"seed"], 7, INSTRUCTIONS_BYTES)
    as_seed = derive_address([b"seed", bytes([7])], None, INSTRUCTIONS_BYTES)
    assert with_bump == as_seed
    assert with_bump != derive_address([b"seed"], None, INSTRUCTIONS_BYTES)


def test_program_id_changes_address():
    a = derive_address([b"seed"], 1, INSTRUCTIONS_BYTES)
    b = derive_address([b"seed"], 1, bytes(32))
    assert a != b


def test_too_many_seeds_raises():
    with pytest.raises(ValueError):
        derive_address([b"s"] * MAX_SEEDS, None, INSTRUCTIONS_BYTES)


def test_fewer_than_max_seeds_allowed():
    address = derive_address([b"s"] * (MAX_SEEDS - 1), None, INSTRUCTIONS_BYTES)
    assert len(address) == PUBKEY_BYTES


def test_bump_out_of_range_raises():
    with pytest.raises(ValueError):
        derive_address([b"seed"], 256, INSTRUCTIONS_BYTES)


def test_short_program_id_raises():
    with pytest.raises(ValueError):
        derive_address([b"seed"], None, b"short")