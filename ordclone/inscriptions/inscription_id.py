"""
The InscriptionId class
"""
from ordclone.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, TX, INSCRIPTION, \
    DataEncodingError
from ordclone.tx import txid_from_display, txid_to_display

__all__ = ["InscriptionId"]


class InscriptionId(Serializable):
    """
    Identifies an inscription by the reveal transaction and the inscription's index inside it
    -------------------------------------------------------------
    |   Field   |   Byte Size   |   Format                      |
    -------------------------------------------------------------
    |   txid    |   32          |   natural byte order          |
    |   index   |   4           |   little-endian               |
    -------------------------------------------------------------
    Text form: <display txid>i<index>. Only hex digits, 'i' and decimal digits, so it is safe to put in a url.
    """
    __slots__ = ("txid", "index")

    def __init__(self, txid: bytes, index: int = 0):
        if len(txid) != TX.TXID:
            raise DataEncodingError(f"InscriptionId txid must be {TX.TXID} bytes")
        if not 0 <= index <= 0xffffffff:
            raise DataEncodingError(f"InscriptionId index out of range: {index}")
        self.txid = txid
        self.index = index

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        index = read_little_int(stream, INSCRIPTION.INDEX, "index")
        return cls(txid, index)

    @classmethod
    def from_str(cls, text: str):
        txid_hex, sep, index = text.partition(INSCRIPTION.SEPARATOR)
        if not sep:
            raise DataEncodingError(f"InscriptionId missing separator: {text!r}")
        if not (index.isascii() and index.isdigit()):
            raise DataEncodingError(f"Invalid inscription index: {index!r}")
        return cls(txid_from_display(txid_hex), int(index))

    def to_bytes(self) -> bytes:
        return self.txid + self.index.to_bytes(INSCRIPTION.INDEX, "little")

    def to_dict(self) -> dict:
        return {
            "txid": txid_to_display(self.txid),
            "index": self.index
        }

    def __str__(self):
        return f"{txid_to_display(self.txid)}{INSCRIPTION.SEPARATOR}{self.index}"
