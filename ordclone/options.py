"""
The Options class - runtime configuration shared by the index, wallet and report
"""
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from ordclone.chain import Chain

__all__ = ["Options", "DEFAULT_DATA_DIR"]

DEFAULT_DATA_DIR = Path.home() / ".ordclone"


@dataclass
class Options:
    chain: Chain = Chain.MAINNET
    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    wallet: str = "ord"
    log_level: str = "INFO"
    rpc_port: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.chain, str):
            self.chain = Chain.from_str(self.chain)
        self.data_dir = Path(self.data_dir).expanduser()

    @classmethod
    def from_dict(cls, options: dict) -> "Options":
        """
        Build options from a config mapping. The chain may be given by name (aliases included).
        """
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        return cls(**options)

    def chain_data_dir(self) -> Path:
        """Where every network specific file for the selected chain lives"""
        return self.chain.join_with_data_dir(self.data_dir)

    def rpc_port_or_default(self) -> int:
        return self.rpc_port if self.rpc_port is not None else self.chain.default_rpc_port

    def rpc_url(self) -> str:
        return f"127.0.0.1:{self.rpc_port_or_default()}/wallet/{self.wallet}"

    def to_dict(self) -> dict:
        return {
            "chain": str(self.chain),
            "data_dir": str(self.data_dir),
            "wallet": self.wallet,
            "log_level": self.log_level,
            "rpc_port": self.rpc_port
        }
