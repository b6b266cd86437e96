"""
The Address class

An Address is a ScriptPubKey rendered under the encoding rules of a given Chain: base58check with the chain's
version byte for P2PKH/P2SH, bech32 (v0) or bech32m (v1+) with the chain's hrp for witness programs.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ordclone.core import AddressError, DataEncodingError, ScriptPubKeyError
from ordclone.cryptography import hash160
from ordclone.data import encode_base58check, decode_base58check, encode_bech32, decode_bech32
from ordclone.script.scriptpubkey import ScriptPubKey, P2PKH_Key, P2SH_Key, Witness_Key, classify_scriptpubkey

if TYPE_CHECKING:
    from ordclone.chain import Chain

__all__ = ["Address"]


class Address:
    """
    A displayable address for a ScriptPubKey on a Chain
    """
    __slots__ = ("chain", "scriptpubkey")

    def __init__(self, chain: Chain, scriptpubkey: ScriptPubKey):
        self.chain = chain
        self.scriptpubkey = scriptpubkey

    @classmethod
    def from_script(cls, script: bytes, chain: Chain) -> Address:
        """
        Raises AddressError if the script matches no address template
        """
        scriptpubkey = classify_scriptpubkey(script)
        if scriptpubkey is None:
            raise AddressError(f"Script has no address on {chain}: {script.hex()}")
        return cls(chain, scriptpubkey)

    @classmethod
    def from_string(cls, address: str, chain: Chain) -> Address:
        """
        Parse an address, requiring it to belong to the given chain
        """
        hrp = chain.bech32_hrp
        if address.lower().startswith(hrp + "1"):
            try:
                version, program = decode_bech32(address, hrp)
                return cls(chain, Witness_Key(version, program))
            except (DataEncodingError, ScriptPubKeyError) as e:
                raise AddressError(f"Invalid segwit address for {chain}: {address}") from e

        try:
            prefix, payload = decode_base58check(address)
        except DataEncodingError as e:
            raise AddressError(f"Invalid base58 address: {address}") from e

        try:
            if prefix == chain.p2pkh_prefix:
                return cls(chain, P2PKH_Key(payload))
            if prefix == chain.p2sh_prefix:
                return cls(chain, P2SH_Key(payload))
        except ScriptPubKeyError as e:
            raise AddressError(f"Invalid payload length for address: {address}") from e
        raise AddressError(f"Address {address} does not belong to {chain}")

    @classmethod
    def p2pkh(cls, pubkey: bytes, chain: Chain) -> Address:
        return cls(chain, P2PKH_Key(hash160(pubkey)))

    @classmethod
    def p2wpkh(cls, pubkey: bytes, chain: Chain) -> Address:
        if len(pubkey) != 33:
            raise AddressError("P2WPKH only uses compressed public keys")
        return cls(chain, Witness_Key(0, hash160(pubkey)))

    @property
    def script_type(self):
        return self.scriptpubkey.script_type

    def script_pubkey(self) -> bytes:
        return self.scriptpubkey.to_bytes()

    def encode(self) -> str:
        spk = self.scriptpubkey
        if isinstance(spk, P2PKH_Key):
            return encode_base58check(spk.pubkeyhash, self.chain.p2pkh_prefix)
        if isinstance(spk, P2SH_Key):
            return encode_base58check(spk.script_hash, self.chain.p2sh_prefix)
        try:
            return encode_bech32(spk.program, self.chain.bech32_hrp, spk.version)
        except DataEncodingError as e:
            raise AddressError(str(e)) from e

    def to_dict(self) -> dict:
        return {
            "address": self.encode(),
            "chain": str(self.chain),
            "type": self.script_type.value,
            "scriptpubkey": self.script_pubkey().hex()
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self):
        return self.encode()

    def __repr__(self):
        return f"Address({self.encode()!r}, chain={self.chain})"

    def __eq__(self, other):
        if not isinstance(other, Address):
            return NotImplemented
        return self.chain is other.chain and self.scriptpubkey == other.scriptpubkey

    def __hash__(self):
        return hash((self.chain, self.scriptpubkey))
