"""
The OutPoint and SatPoint classes

An OutPoint references a single transaction output. A SatPoint locates a single satoshi inside that output.
Both have a wire form (natural byte order txid) and a canonical text form (display byte order txid).
"""
from ordclone.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, TX, OUTPOINT, \
    SATPOINT, DataEncodingError

__all__ = ["OutPoint", "SatPoint", "txid_from_display", "txid_to_display"]


def txid_to_display(txid: bytes) -> str:
    """Natural byte order -> reversed hex, as shown by explorers and RPC"""
    return txid[::-1].hex()


def txid_from_display(txid_hex: str) -> bytes:
    if len(txid_hex) != 2 * TX.TXID:
        raise DataEncodingError(f"txid must be {2 * TX.TXID} hex chars, received {len(txid_hex)}")
    try:
        return bytes.fromhex(txid_hex)[::-1]
    except ValueError as e:
        raise DataEncodingError(f"Invalid txid hex: {txid_hex}") from e


def _parse_uint(text: str, max_value: int, name: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise DataEncodingError(f"Invalid {name}: {text!r}")
    value = int(text)
    if value > max_value:
        raise DataEncodingError(f"{name} out of range: {value}")
    return value


class OutPoint(Serializable):
    """
    -------------------------------------------------------------
    |   Field   |   Byte Size   |   Format                      |
    -------------------------------------------------------------
    |   txid    |   32          |   natural byte order          |
    |   vout    |   4           |   little-endian               |
    -------------------------------------------------------------
    Text form: <display txid>:<vout>
    """
    __slots__ = ("txid", "vout")

    def __init__(self, txid: bytes, vout: int):
        if len(txid) != TX.TXID:
            raise DataEncodingError(f"OutPoint txid must be {TX.TXID} bytes")
        if not 0 <= vout <= TX.COINBASE_VOUT:
            raise DataEncodingError(f"OutPoint vout out of range: {vout}")
        self.txid = txid
        self.vout = vout

    @classmethod
    def null(cls):
        """The outpoint spent by coinbase inputs"""
        return cls(b'\x00' * TX.TXID, TX.COINBASE_VOUT)

    @property
    def is_null(self) -> bool:
        return self == OutPoint.null()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        return cls(txid, vout)

    @classmethod
    def from_str(cls, text: str):
        txid_hex, sep, vout = text.partition(OUTPOINT.SEPARATOR)
        if not sep:
            raise DataEncodingError(f"OutPoint missing separator: {text!r}")
        return cls(txid_from_display(txid_hex), _parse_uint(vout, TX.COINBASE_VOUT, "vout"))

    def to_bytes(self) -> bytes:
        return self.txid + self.vout.to_bytes(TX.VOUT, "little")

    def to_dict(self) -> dict:
        return {
            "txid": txid_to_display(self.txid),
            "vout": self.vout
        }

    def __str__(self):
        return f"{txid_to_display(self.txid)}{OUTPOINT.SEPARATOR}{self.vout}"


class SatPoint(Serializable):
    """
    -------------------------------------------------------------
    |   Field       |   Byte Size   |   Format                  |
    -------------------------------------------------------------
    |   outpoint    |   36          |   OutPoint                |
    |   offset      |   8           |   little-endian           |
    -------------------------------------------------------------
    Text form: <display txid>:<vout>:<offset>
    """
    __slots__ = ("outpoint", "offset")

    def __init__(self, outpoint: OutPoint, offset: int = 0):
        if not 0 <= offset <= SATPOINT.MAX_OFFSET:
            raise DataEncodingError(f"SatPoint offset out of range: {offset}")
        self.outpoint = outpoint
        self.offset = offset

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        outpoint = OutPoint.from_bytes(stream)
        offset = read_little_int(stream, SATPOINT.OFFSET, "offset")
        return cls(outpoint, offset)

    @classmethod
    def from_str(cls, text: str):
        outpoint, sep, offset = text.rpartition(OUTPOINT.SEPARATOR)
        if not sep:
            raise DataEncodingError(f"SatPoint missing offset: {text!r}")
        return cls(OutPoint.from_str(outpoint), _parse_uint(offset, SATPOINT.MAX_OFFSET, "offset"))

    def to_bytes(self) -> bytes:
        return self.outpoint.to_bytes() + self.offset.to_bytes(SATPOINT.OFFSET, "little")

    def to_dict(self) -> dict:
        return {
            "outpoint": str(self.outpoint),
            "offset": self.offset
        }

    def __str__(self):
        return f"{self.outpoint}{OUTPOINT.SEPARATOR}{self.offset}"
