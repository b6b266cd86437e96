"""
The classes for OrdClone transactions
"""
from io import SEEK_CUR

from ordclone.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, read_compact_size, \
    write_compact_size, ReadError, TX
from ordclone.cryptography import hash256
from ordclone.tx.outpoint import OutPoint, txid_to_display

__all__ = ["TxInput", "TxOutput", "WitnessField", "Transaction"]

# --- CACHE KEYS --- #
TXID_KEY = "txid"
WTXID_KEY = "wtxid"


class TxInput(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   outpoint        |   OutPoint    |   txid || vout        |   36          |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("outpoint", "scriptsig", "sequence")

    def __init__(self, outpoint: OutPoint, scriptsig: bytes = b'', sequence: int = 0xffffffff):
        self.outpoint = outpoint
        self.scriptsig = scriptsig
        self.sequence = sequence

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        outpoint = OutPoint.from_bytes(stream)
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(outpoint, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        outpoint || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.outpoint.to_bytes(),
            write_compact_size(len(self.scriptsig)),
            self.scriptsig,
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": txid_to_display(self.outpoint.txid),
            "vout": self.outpoint.vout,
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence
        }


class TxOutput(Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("amount", "scriptpubkey")

    def __init__(self, amount: int, scriptpubkey: bytes):
        self.amount = amount
        self.scriptpubkey = scriptpubkey

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return self.amount.to_bytes(TX.AMOUNT, "little") + write_compact_size(len(self.scriptpubkey)) + \
            self.scriptpubkey

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "scriptpubkey": self.scriptpubkey.hex()
        }


class WitnessField(Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Stack Items     |   var         |   CompactSize         |
    =============================================================
    |   Size            |   var         |   CompactSize         |
    |   Item            |   var         |   bytes               |
    =============================================================
    |   the Size | Item format repeats for all witness items    |
    -------------------------------------------------------------
    """
    __slots__ = ("items",)

    def __init__(self, items: list[bytes] = None):
        self.items = items or []

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        stack_items = read_compact_size(stream)
        witness_items = []
        for _ in range(stack_items):
            item_len = read_compact_size(stream)
            witness_items.append(read_stream(stream, item_len, "WitnessField data"))
        return cls(witness_items)

    def to_bytes(self) -> bytes:
        parts = [write_compact_size(len(self.items))]
        for item in self.items:
            parts.append(write_compact_size(len(item)))
            parts.append(item)
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "items": [item.hex() for item in self.items]
        }


class Transaction(Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   Marker*         |   1           |   fixed byte          |
    |   Flag*           |   1           |   fixed byte          |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   witness*        |   var         |   WitnessField        |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    * indicates optional segwit specific fields
    """
    __slots__ = ("version", "inputs", "outputs", "witness", "locktime", "_cache")

    def __init__(self, inputs: list[TxInput] = None, outputs: list[TxOutput] = None,
                 witness: list[WitnessField] = None, locktime: int = 0, version: int = 2):
        self.inputs = inputs or []
        self.outputs = outputs or []
        self.witness = witness or []
        self.locktime = locktime
        self.version = version
        self._cache = {}

    def _get_input_bytes(self) -> bytes:
        return write_compact_size(len(self.inputs)) + b''.join(i.to_bytes() for i in self.inputs)

    def _get_output_bytes(self) -> bytes:
        return write_compact_size(len(self.outputs)) + b''.join(o.to_bytes() for o in self.outputs)

    def _get_witness_bytes(self) -> bytes:
        return b''.join(w.to_bytes() for w in self.witness)

    def _legacy_bytes(self) -> bytes:
        """version || inputs || outputs || locktime. The txid preimage for every tx."""
        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            self._get_input_bytes(),
            self._get_output_bytes(),
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    @property
    def is_segwit(self) -> bool:
        return len(self.witness) > 0

    @property
    def is_coinbase(self) -> bool:
        return len(self.inputs) == 1 and self.inputs[0].outpoint.is_null

    @property
    def txid(self) -> bytes:
        """
        Natural byte order txid. Cached since txs are never mutated once decoded.
        """
        if TXID_KEY not in self._cache:
            self._cache[TXID_KEY] = hash256(self._legacy_bytes())
        return self._cache[TXID_KEY]

    @property
    def wtxid(self) -> bytes:
        if WTXID_KEY not in self._cache:
            self._cache[WTXID_KEY] = hash256(self.to_bytes())
        return self._cache[WTXID_KEY]

    def outpoints(self) -> list[OutPoint]:
        """The outpoints created by this transaction, one per output"""
        return [OutPoint(self.txid, vout) for vout in range(len(self.outputs))]

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, TX.VERSION, "version")

        # Marker/Flag
        marker = read_stream(stream, 1, "marker")
        if marker == b'\x00':
            flag = read_stream(stream, 1, "flag")
            if flag != b'\x01':
                raise ReadError("Invalid SegWit flag.")
            segwit = True
        else:
            segwit = False
            stream.seek(-1, SEEK_CUR)  # Rewind the marker byte

        num_inputs = read_compact_size(stream)
        inputs = [TxInput.from_bytes(stream) for _ in range(num_inputs)]

        num_outputs = read_compact_size(stream)
        outputs = [TxOutput.from_bytes(stream) for _ in range(num_outputs)]

        witness = [WitnessField.from_bytes(stream) for _ in range(num_inputs)] if segwit else []

        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        return cls(inputs, outputs, witness, locktime, version)

    def to_bytes(self) -> bytes:
        if not self.is_segwit:
            return self._legacy_bytes()

        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            b'\x00\x01',  # Marker/Flag
            self._get_input_bytes(),
            self._get_output_bytes(),
            self._get_witness_bytes(),
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        tx_dict = {
            "txid": txid_to_display(self.txid),
            "version": self.version,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
        }
        if self.is_segwit:
            tx_dict["witness"] = [w.to_dict() for w in self.witness]
        tx_dict.update({
            "locktime": self.locktime,
            "is_segwit": self.is_segwit,
            "is_coinbase": self.is_coinbase
        })
        return tx_dict
