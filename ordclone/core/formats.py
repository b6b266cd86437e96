"""
The Bitcoin standard formats
"""
from typing import Final

__all__ = ["DATA", "TX", "BLOCK", "OUTPOINT", "SATPOINT", "INSCRIPTION", "OPCODES", "WITNESS", "DISPLAY"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff
    CHECKSUM: Final[int] = 4
    HASH160: Final[int] = 20
    SHA256: Final[int] = 32


class TX:
    """
    Transaction byte sizes
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    LOCKTIME: Final[int] = 4
    COINBASE_VOUT: Final[int] = 0xffffffff


class BLOCK:
    """
    Block header byte sizes
    """
    VERSION: Final[int] = 4
    PREV_BLOCK: Final[int] = 32
    MERKLE_ROOT: Final[int] = 32
    TIME: Final[int] = 4
    BITS: Final[int] = 4
    NONCE: Final[int] = 4


class OUTPOINT:
    """
    txid || vout
    """
    SEPARATOR: Final[str] = ":"


class SATPOINT:
    """
    outpoint || offset
    """
    OFFSET: Final[int] = 8
    MAX_OFFSET: Final[int] = 0xffffffffffffffff


class INSCRIPTION:
    """
    txid || index
    """
    INDEX: Final[int] = 4
    SEPARATOR: Final[str] = "i"


class WITNESS:
    """
    Witness program bounds (BIP141)
    """
    MIN_PROGRAM: Final[int] = 2
    MAX_PROGRAM: Final[int] = 40
    MAX_VERSION: Final[int] = 16


class DISPLAY:
    TIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class OPCODES:
    """
    The opcode bytes needed to recognize standard scriptpubkeys
    """
    OP_0: Final[bytes] = b'\x00'
    OP_PUSHBYTES_20: Final[bytes] = b'\x14'
    OP_1: Final[bytes] = b'\x51'
    OP_16: Final[bytes] = b'\x60'
    OP_DUP: Final[bytes] = b'\x76'
    OP_EQUAL: Final[bytes] = b'\x87'
    OP_EQUALVERIFY: Final[bytes] = b'\x88'
    OP_HASH160: Final[bytes] = b'\xa9'
    OP_CHECKSIG: Final[bytes] = b'\xac'

    @staticmethod
    def witness_version_opcode(version: int) -> bytes:
        """OP_0 for version 0, OP_1..OP_16 otherwise"""
        if version == 0:
            return OPCODES.OP_0
        return bytes([OPCODES.OP_1[0] + version - 1])

    @staticmethod
    def decode_witness_version(opcode: int) -> int | None:
        """Inverse of witness_version_opcode. Returns None if the byte isn't a witness version opcode."""
        if opcode == OPCODES.OP_0[0]:
            return 0
        if OPCODES.OP_1[0] <= opcode <= OPCODES.OP_16[0]:
            return opcode - OPCODES.OP_1[0] + 1
        return None
