"""
The Block classes
"""
from datetime import datetime, timezone

from ordclone.core import SERIALIZED, get_stream, read_stream, read_little_int, read_compact_size, \
    write_compact_size, Serializable, BLOCK, DISPLAY
from ordclone.cryptography import hash256
from ordclone.data import get_merkle_root
from ordclone.tx import Transaction, txid_to_display

__all__ = ["BlockHeader", "Block"]


class BlockHeader(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |   Version     |   int         |   little-endian       |   4       |
    |   prev_block  |   bytes       |   natural byte order  |   32      |
    |   merkle_root |   bytes       |   natural byte order  |   32      |
    |   time        |   int         |   little-endian       |   4       |
    |   bits        |   bytes       |   little-endian       |   4       |
    |   nonce       |   int         |   little-endian       |   4       |
    ---------------------------------------------------------------------
    """
    __slots__ = ('version', 'prev_block', 'merkle_root', 'timestamp', 'bits', 'nonce')

    def __init__(self, version: int, prev_block: bytes, merkle_root: bytes, timestamp: int, bits: bytes,
                 nonce: int):
        self.version = version
        self.prev_block = prev_block
        self.merkle_root = merkle_root
        self.timestamp = timestamp
        self.bits = bits
        self.nonce = nonce

    @property
    def block_id(self) -> bytes:
        """Natural byte order block hash"""
        return hash256(self.to_bytes())

    @property
    def block_hash(self) -> str:
        """Display byte order block hash"""
        return self.block_id[::-1].hex()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, BLOCK.VERSION, "version")
        prev_block = read_stream(stream, BLOCK.PREV_BLOCK, "prev_block")
        merkle_root = read_stream(stream, BLOCK.MERKLE_ROOT, "merkle_root")
        timestamp = read_little_int(stream, BLOCK.TIME, "time")
        bits = read_stream(stream, BLOCK.BITS, "bits")[::-1]  # Bits is little-endian bytes
        nonce = read_little_int(stream, BLOCK.NONCE, "nonce")

        return cls(version, prev_block, merkle_root, timestamp, bits, nonce)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(BLOCK.VERSION, "little"),
            self.prev_block,
            self.merkle_root,
            self.timestamp.to_bytes(BLOCK.TIME, "little"),
            self.bits[::-1],  # Little endian serialized
            self.nonce.to_bytes(BLOCK.NONCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "block_hash": self.block_hash,
            "version": self.version,
            "previous_block": self.prev_block[::-1].hex(),
            "merkle_root": self.merkle_root[::-1].hex(),
            "timestamp": datetime.fromtimestamp(self.timestamp, tz=timezone.utc).strftime(DISPLAY.TIME_FORMAT),
            "bits": self.bits.hex(),
            "nonce": self.nonce
        }


class Block(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |   header      |   BlockHeader |   see BlockHeader     |   80      |
    |   tx_num      |   int         |   CompactSize         |   var     |
    |   txs         |   list        |   Transaction         |   var     |
    ---------------------------------------------------------------------
    """
    __slots__ = ('header', 'txs')

    def __init__(self, header: BlockHeader, txs: list[Transaction]):
        self.header = header
        self.txs = txs

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        header = BlockHeader.from_bytes(stream)
        tx_num = read_compact_size(stream)
        txs = [Transaction.from_bytes(stream) for _ in range(tx_num)]

        return cls(header, txs)

    @property
    def block_id(self) -> bytes:
        return self.header.block_id

    @property
    def block_hash(self) -> str:
        return self.header.block_hash

    def compute_merkle_root(self) -> bytes:
        return get_merkle_root([tx.txid for tx in self.txs])

    def check_merkle_root(self) -> bool:
        """True if the header commits to the txs in this block"""
        return bool(self.txs) and self.compute_merkle_root() == self.header.merkle_root

    def to_bytes(self) -> bytes:
        tx_parts = [write_compact_size(len(self.txs))]
        tx_parts.extend(tx.to_bytes() for tx in self.txs)
        return self.header.to_bytes() + b''.join(tx_parts)

    def to_dict(self) -> dict:
        return {
            "header": self.header.to_dict(),
            "tx_num": len(self.txs),
            "txids": [txid_to_display(tx.txid) for tx in self.txs]
        }
