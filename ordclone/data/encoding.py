"""
Methods for encoding and decoding addresses: Base58Check for legacy payloads, Bech32/Bech32m for witness programs
"""
import re

from embit import bech32

from ordclone.core import DataEncodingError, DATA
from ordclone.cryptography import hash256

__all__ = ["encode_base58", "decode_base58", "encode_base58check", "decode_base58check", "encode_bech32",
           "decode_bech32"]

# --- BASE58 ENCODING --- #
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def encode_base58(data: bytes) -> str:
    """
    Given bytes we return a base58 encoded string.
    """
    # Setup
    base = len(BASE58_ALPHABET)
    n = int.from_bytes(data, "big")
    encoded_string = ""

    # Encode into Base58
    while n > 0:
        n, temp_index = divmod(n, base)
        encoded_string = BASE58_ALPHABET[temp_index] + encoded_string

    # Each leading zero byte is a leading '1'
    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ("1" * leading_zeros) + encoded_string


def decode_base58(encoded: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes
    """
    total = 0
    for char in encoded:
        char_i = BASE58_ALPHABET.find(char)
        if char_i < 0:
            raise DataEncodingError(f"Invalid base58 character: {char!r}")
        total = total * 58 + char_i

    # Each leading '1' represents a leading zero byte
    leading_zeros = len(re.match(r"^1*", encoded).group(0))
    body = total.to_bytes((total.bit_length() + 7) // 8, "big")
    return b'\x00' * leading_zeros + body


def encode_base58check(payload: bytes, prefix: bytes = b'\x00') -> str:
    """
    Base58Check encoding of prefix || payload || checksum
    """
    data = prefix + payload
    checksum = hash256(data)[:DATA.CHECKSUM]
    return encode_base58(data + checksum)


def decode_base58check(encoded: str) -> tuple[bytes, bytes]:
    """
    Given a string of base58Check chars, we return the 1-byte prefix and the payload.
    Raise DataEncodingError if the checksum fails
    """
    decoded = decode_base58(encoded)
    if len(decoded) <= DATA.CHECKSUM:
        raise DataEncodingError("Base58Check data too short")

    data, checksum = decoded[:-DATA.CHECKSUM], decoded[-DATA.CHECKSUM:]
    if hash256(data)[:DATA.CHECKSUM] != checksum:
        raise DataEncodingError("Decoded checksum does not equal given checksum")
    return data[:1], data[1:]


# --- BECH32 ENCODING --- #

def encode_bech32(witness_program: bytes, hrp: str = "bc", witver: int = 0) -> str:
    """
    Returns the segwit address for the given witness program. Version 0 uses Bech32, later versions Bech32m (BIP350).
    """
    address = bech32.encode(hrp, witver, witness_program)
    if address is None:
        raise DataEncodingError(f"Unable to bech32 encode witness v{witver} program of length {len(witness_program)}")
    return address


def decode_bech32(address: str, hrp: str = "bc") -> tuple[int, bytes]:
    """
    Given a segwit address we return the witness version and program. The checksum variant must match the version.
    """
    witver, witprog = bech32.decode(hrp, address)
    if witver is None:
        raise DataEncodingError(f"Invalid segwit address for hrp {hrp!r}: {address}")
    return witver, bytes(witprog)
