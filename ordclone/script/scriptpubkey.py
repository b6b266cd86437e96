"""
The ScriptPubKey class and its children
SCRIPTPUBKEY = LOCKING SCRIPT

Only the templates that have an address are modelled here. Anything else (P2PK, bare multisig, OP_RETURN...) is
left unclassified.
"""
from abc import ABC, abstractmethod
from enum import Enum

from ordclone.core import ScriptPubKeyError, OPCODES, WITNESS, DATA

__all__ = ["ScriptType", "ScriptPubKey", "P2PKH_Key", "P2SH_Key", "Witness_Key", "classify_scriptpubkey"]

# --- OPCODES --- #
_OP = OPCODES


class ScriptType(Enum):
    P2PKH = "p2pkh"
    P2SH = "p2sh"
    P2WPKH = "p2wpkh"
    P2WSH = "p2wsh"
    P2TR = "p2tr"
    WITNESS_UNKNOWN = "witness_unknown"


class ScriptPubKey(ABC):
    """
    Base class for scriptPubKeys
    """
    __slots__ = ("script",)

    @classmethod
    @abstractmethod
    def matches(cls, b: bytes) -> bool:
        """Return True if the given script matches this type"""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_bytes(cls, script: bytes):
        raise NotImplementedError

    @property
    @abstractmethod
    def script_type(self) -> ScriptType:
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        return self.script

    def to_dict(self) -> dict:
        return {
            "type": self.script_type.value,
            "script": self.script.hex()
        }

    def __eq__(self, other):
        if isinstance(other, ScriptPubKey):
            return self.script == other.script
        return NotImplemented

    def __hash__(self):
        return hash(self.script)


class P2PKH_Key(ScriptPubKey):
    """
    OP_DUP || OP_HASH160 || OP_PUSHBYTES_20 || pubkeyhash || OP_EQUALVERIFY || OP_CHECKSIG
    """
    __slots__ = ()

    def __init__(self, pubkeyhash: bytes):
        if len(pubkeyhash) != DATA.HASH160:
            raise ScriptPubKeyError(f"P2PKH pubkeyhash must be {DATA.HASH160} bytes")
        self.script = _OP.OP_DUP + _OP.OP_HASH160 + _OP.OP_PUSHBYTES_20 + pubkeyhash + _OP.OP_EQUALVERIFY + \
            _OP.OP_CHECKSIG

    @classmethod
    def from_bytes(cls, script: bytes):
        if not cls.matches(script):
            raise ScriptPubKeyError("Given scriptpubkey doesn't match P2PKH OP_CODE structure")
        return cls(script[3:-2])

    @classmethod
    def matches(cls, b: bytes) -> bool:
        return (
                len(b) == 25
                and b[0] == _OP.OP_DUP[0]
                and b[1] == _OP.OP_HASH160[0]
                and b[2] == _OP.OP_PUSHBYTES_20[0]
                and b[-2] == _OP.OP_EQUALVERIFY[0]
                and b[-1] == _OP.OP_CHECKSIG[0]
        )

    @property
    def script_type(self) -> ScriptType:
        return ScriptType.P2PKH

    @property
    def pubkeyhash(self) -> bytes:
        return self.script[3:-2]


class P2SH_Key(ScriptPubKey):
    """
    OP_HASH160 || OP_PUSHBYTES_20 || script_hash || OP_EQUAL
    """
    __slots__ = ()

    def __init__(self, script_hash: bytes):
        if len(script_hash) != DATA.HASH160:
            raise ScriptPubKeyError(f"P2SH script hash must be {DATA.HASH160} bytes")
        self.script = _OP.OP_HASH160 + _OP.OP_PUSHBYTES_20 + script_hash + _OP.OP_EQUAL

    @classmethod
    def from_bytes(cls, script: bytes):
        if not cls.matches(script):
            raise ScriptPubKeyError("Failed OP_Code structure for P2SH ScriptPubKey")
        return cls(script[2:-1])

    @classmethod
    def matches(cls, b: bytes) -> bool:
        return (
                len(b) == 23
                and b[0] == _OP.OP_HASH160[0]
                and b[1] == _OP.OP_PUSHBYTES_20[0]
                and b[-1] == _OP.OP_EQUAL[0]
        )

    @property
    def script_type(self) -> ScriptType:
        return ScriptType.P2SH

    @property
    def script_hash(self) -> bytes:
        return self.script[2:-1]


class Witness_Key(ScriptPubKey):
    """
    Segwit output: OP_n || OP_PUSHBYTES_k || program, with 0 <= n <= 16 and 2 <= k <= 40.
    Version 0 programs must be 20 (P2WPKH) or 32 (P2WSH) bytes.
    """
    __slots__ = ()

    def __init__(self, version: int, program: bytes):
        if not 0 <= version <= WITNESS.MAX_VERSION:
            raise ScriptPubKeyError(f"Invalid witness version: {version}")
        if not WITNESS.MIN_PROGRAM <= len(program) <= WITNESS.MAX_PROGRAM:
            raise ScriptPubKeyError(f"Invalid witness program length: {len(program)}")
        if version == 0 and len(program) not in (DATA.HASH160, DATA.SHA256):
            raise ScriptPubKeyError("Witness v0 program must be 20 or 32 bytes")
        self.script = _OP.witness_version_opcode(version) + bytes([len(program)]) + program

    @classmethod
    def from_bytes(cls, script: bytes):
        if not cls.matches(script):
            raise ScriptPubKeyError("Data failed witness program opcode structure")
        return cls(_OP.decode_witness_version(script[0]), script[2:])

    @classmethod
    def matches(cls, b: bytes) -> bool:
        if len(b) < 2 + WITNESS.MIN_PROGRAM or len(b) > 2 + WITNESS.MAX_PROGRAM:
            return False
        version = _OP.decode_witness_version(b[0])
        if version is None or b[1] != len(b) - 2:
            return False
        return version != 0 or b[1] in (DATA.HASH160, DATA.SHA256)

    @property
    def version(self) -> int:
        return _OP.decode_witness_version(self.script[0])

    @property
    def program(self) -> bytes:
        return self.script[2:]

    @property
    def script_type(self) -> ScriptType:
        match (self.version, len(self.program)):
            case (0, DATA.HASH160):
                return ScriptType.P2WPKH
            case (0, DATA.SHA256):
                return ScriptType.P2WSH
            case (1, DATA.SHA256):
                return ScriptType.P2TR
            case _:
                return ScriptType.WITNESS_UNKNOWN


def classify_scriptpubkey(script: bytes) -> ScriptPubKey | None:
    """
    Returns the matching template for the script, or None if it has no address
    """
    for key_type in (P2PKH_Key, P2SH_Key, Witness_Key):
        if key_type.matches(script):
            return key_type.from_bytes(script)
    return None
