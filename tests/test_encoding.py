"""
Tests for base58check and bech32 encoding
"""
from secrets import token_bytes

import pytest

from ordclone.core import DataEncodingError
from ordclone.data import encode_base58, decode_base58, encode_base58check, decode_base58check, encode_bech32, \
    decode_bech32


def test_base58_leading_zeros():
    data = b'\x00\x00' + token_bytes(20)
    encoded = encode_base58(data)

    assert encoded.startswith("11")
    assert decode_base58(encoded) == data


def test_base58check():
    payload = bytes.fromhex("62e907b15cbf27d5425399ebf6f0fb50ebb88f18")
    encoded = encode_base58check(payload, b'\x00')

    assert encoded == "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
    assert decode_base58check(encoded) == (b'\x00', payload)


def test_base58_invalid():
    with pytest.raises(DataEncodingError):
        decode_base58("0OIl")
    with pytest.raises(DataEncodingError):
        decode_base58check("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNb")


def test_bech32_versions():
    program = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")

    assert encode_bech32(program, "bc", 0) == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
    assert decode_bech32("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", "bc") == (0, program)

    taproot = bytes.fromhex("79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
    address = "bc1p0xlxvlhemja6c4dqv22uapctqupfhlxm9h8z3k2e72q4k9hcz7vqzk5jj0"
    assert encode_bech32(taproot, "bc", 1) == address
    assert decode_bech32(address, "bc") == (1, taproot)


def test_bech32_invalid():
    with pytest.raises(DataEncodingError):
        decode_bech32("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", "tb")
    with pytest.raises(DataEncodingError):
        decode_bech32("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t5", "bc")
