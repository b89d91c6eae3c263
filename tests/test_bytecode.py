"""Tests for creation/runtime bytecode matching."""

from gasledger.catalog.bytecode import (
    is_empty_bytecode,
    matches_creation_prefix,
    matches_runtime_bytecode,
    normalize_bytecode,
)

from conftest import TOKEN_BYTECODE, TOKEN_RUNTIME

LINKED_ADDRESS = "1234567890abcdef1234567890abcdef12345678"


def test_normalize_and_empty():
    assert normalize_bytecode("0xAbCd") == "abcd"
    assert normalize_bytecode(None) == ""
    assert is_empty_bytecode("0x")
    assert is_empty_bytecode("")
    assert not is_empty_bytecode("0x00")


def test_creation_prefix_ignores_constructor_arguments():
    input_data = TOKEN_BYTECODE + "00" * 31 + "64"
    assert matches_creation_prefix(input_data, TOKEN_BYTECODE)


def test_creation_prefix_is_case_insensitive():
    assert matches_creation_prefix(TOKEN_BYTECODE.upper().replace("0X", "0x"), TOKEN_BYTECODE)


def test_creation_prefix_rejects_different_code():
    assert not matches_creation_prefix("0xbbbb6080604052", TOKEN_BYTECODE)
    assert not matches_creation_prefix(TOKEN_BYTECODE[:-2], TOKEN_BYTECODE)


def test_empty_creation_bytecode_never_matches():
    assert not matches_creation_prefix(TOKEN_BYTECODE, "0x")


def test_link_placeholder_matches_any_library_address():
    placeholder = "__$" + "a" * 34 + "$__"
    known = "0x6080" + "73" + placeholder + "6000"
    deployed = "0x6080" + "73" + LINKED_ADDRESS + "6000" + "ff" * 4

    assert matches_creation_prefix(deployed, known)
    assert not matches_creation_prefix("0x6081" + "73" + LINKED_ADDRESS + "6000", known)


def test_legacy_placeholder_name_is_masked():
    placeholder = "__SafeMath" + "_" * 30
    known = "0x60" + placeholder + "56"
    assert matches_runtime_bytecode("0x60" + LINKED_ADDRESS + "56", known)


def test_library_self_address_is_masked():
    known = "0x6080" + "73" + "f" * 40 + "3014"
    deployed = "0x6080" + "73" + LINKED_ADDRESS + "3014"
    assert matches_runtime_bytecode(deployed, known)


def test_runtime_match_requires_whole_code():
    assert matches_runtime_bytecode(TOKEN_RUNTIME, TOKEN_RUNTIME)
    assert not matches_runtime_bytecode(TOKEN_RUNTIME + "00", TOKEN_RUNTIME)
    assert not matches_runtime_bytecode("0x", "0x")
