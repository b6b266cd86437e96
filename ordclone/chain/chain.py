"""
The Chain enum

Every network specific fact lives here: consensus identity, ports, genesis block, inscription policy, data directory
layout, address encoding and explorer links. Callers ask the Chain instead of branching on the network themselves.
"""
import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ordclone.blockchain import Block
from ordclone.core import GenesisBlockError, UnknownNetworkError, StreamError, get_logger, get_stream, is_exhausted
from ordclone.chain.genesis import MAINNET_GENESIS, TESTNET_GENESIS, SIGNET_GENESIS, REGTEST_GENESIS
from ordclone.script import Address

__all__ = ["Chain"]

logger = get_logger(__name__)

# Historical names accepted on input
_ALIASES = {
    "main": "mainnet",
    "test": "testnet",
}


class Chain(Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"

    @classmethod
    def default(cls) -> "Chain":
        return cls.MAINNET

    @classmethod
    def from_str(cls, name: str) -> "Chain":
        """
        Resolve a network name, accepting the "main" and "test" aliases. Raises UnknownNetworkError otherwise.
        """
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownNetworkError(
                f"Unknown network {name!r}. Expected one of: {', '.join(c.value for c in cls)}") from None

    # --- CONSENSUS --- #

    @property
    def network(self) -> str:
        """The consensus rules identity used by the codec"""
        match self:
            case Chain.MAINNET:
                return "bitcoin"
            case Chain.TESTNET:
                return "testnet"
            case Chain.SIGNET:
                return "signet"
            case Chain.REGTEST:
                return "regtest"

    @property
    def magic_bytes(self) -> bytes:
        match self:
            case Chain.MAINNET:
                return bytes.fromhex("f9beb4d9")
            case Chain.TESTNET:
                return bytes.fromhex("0b110907")
            case Chain.SIGNET:
                return bytes.fromhex("0a03cf40")
            case Chain.REGTEST:
                return bytes.fromhex("fabfb5da")

    @property
    def default_rpc_port(self) -> int:
        match self:
            case Chain.MAINNET:
                return 8332
            case Chain.TESTNET:
                return 18332
            case Chain.SIGNET:
                return 38332
            case Chain.REGTEST:
                return 18443

    @property
    def genesis_block(self) -> Block:
        """
        Decoded once per process and shared afterwards
        """
        return _decode_genesis(self)

    # --- INSCRIPTIONS --- #

    @property
    def inscription_content_size_limit(self) -> Optional[int]:
        match self:
            case Chain.MAINNET | Chain.TESTNET | Chain.SIGNET | Chain.REGTEST:
                return None

    @property
    def first_inscription_height(self) -> int:
        match self:
            case Chain.MAINNET:
                return 0
            case Chain.TESTNET:
                return 0
            case Chain.SIGNET:
                return 0
            case Chain.REGTEST:
                return 0

    @property
    def first_dune_height(self) -> int:
        match self:
            case Chain.MAINNET:
                return 0
            case Chain.TESTNET:
                return 0
            case Chain.SIGNET:
                return 0
            case Chain.REGTEST:
                return 0

    @property
    def inscription_explorer(self) -> str:
        """Base url; the inscription id is appended as is"""
        match self:
            case Chain.MAINNET:
                return "http://localhost/inscription/"
            case Chain.TESTNET:
                return "http://localhost/inscription/"
            case Chain.SIGNET:
                return "https://localhost/inscription/"
            case Chain.REGTEST:
                return "http://localhost/inscription/"

    # --- ADDRESSES --- #

    @property
    def p2pkh_prefix(self) -> bytes:
        match self:
            case Chain.MAINNET:
                return b'\x00'
            case Chain.TESTNET | Chain.SIGNET | Chain.REGTEST:
                return b'\x6f'

    @property
    def p2sh_prefix(self) -> bytes:
        match self:
            case Chain.MAINNET:
                return b'\x05'
            case Chain.TESTNET | Chain.SIGNET | Chain.REGTEST:
                return b'\xc4'

    @property
    def bech32_hrp(self) -> str:
        match self:
            case Chain.MAINNET:
                return "bc"
            case Chain.TESTNET | Chain.SIGNET:
                return "tb"
            case Chain.REGTEST:
                return "bcrt"

    def address_from_script(self, script: bytes) -> Address:
        """
        Raises AddressError for scripts without an address (P2PK, bare multisig, OP_RETURN, ...)
        """
        return Address.from_script(script, self)

    # --- DATA DIRECTORY --- #

    @property
    def data_dir_suffix(self) -> str:
        match self:
            case Chain.MAINNET:
                return ""
            case Chain.TESTNET:
                return "testnet3"
            case Chain.SIGNET:
                return "signet"
            case Chain.REGTEST:
                return "regtest"

    def join_with_data_dir(self, data_dir: Path | str) -> Path:
        """
        Pure path computation, nothing is touched on disk
        """
        data_dir = Path(data_dir)
        if self is Chain.MAINNET:
            return data_dir
        return data_dir / self.data_dir_suffix

    # --- DISPLAY --- #

    def to_dict(self) -> dict:
        return {
            "chain": self.value,
            "network": self.network,
            "magic_bytes": self.magic_bytes.hex(),
            "default_rpc_port": self.default_rpc_port,
            "genesis_hash": self.genesis_block.block_hash,
            "inscription_content_size_limit": self.inscription_content_size_limit,
            "first_inscription_height": self.first_inscription_height,
            "first_dune_height": self.first_dune_height,
            "inscription_explorer": self.inscription_explorer,
            "bech32_hrp": self.bech32_hrp,
            "data_dir_suffix": self.data_dir_suffix
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self):
        return self.value


@lru_cache(maxsize=None)
def _decode_genesis(chain: Chain) -> Block:
    match chain:
        case Chain.MAINNET:
            genesis_hex = MAINNET_GENESIS
        case Chain.TESTNET:
            genesis_hex = TESTNET_GENESIS
        case Chain.SIGNET:
            genesis_hex = SIGNET_GENESIS
        case Chain.REGTEST:
            genesis_hex = REGTEST_GENESIS

    try:
        genesis_bytes = bytes.fromhex(genesis_hex)
    except ValueError as e:
        raise GenesisBlockError(f"Invalid hex string for {chain} genesis block") from e

    stream = get_stream(genesis_bytes)
    try:
        block = Block.from_bytes(stream)
    except StreamError as e:
        raise GenesisBlockError(f"Failed to deserialize {chain} genesis block") from e

    if not is_exhausted(stream):
        raise GenesisBlockError(f"Trailing data after {chain} genesis block")
    if not block.check_merkle_root():
        raise GenesisBlockError(f"{chain} genesis block merkle root mismatch")

    logger.debug(f"Decoded {chain} genesis block {block.block_hash}")
    return block
