"""
The collaborators consumed by the owned inscriptions report

Index and Wallet are implemented elsewhere (block indexing, key management and RPC are out of scope here). These
base classes pin down the surface the report relies on, and the errors each step is expected to raise.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ordclone.inscriptions.inscription_id import InscriptionId
from ordclone.tx import OutPoint, SatPoint, TxOutput

if TYPE_CHECKING:
    from ordclone.options import Options

__all__ = ["Index", "Wallet"]


class Wallet(ABC):
    """
    A loaded wallet
    """

    @classmethod
    @abstractmethod
    def load(cls, options: Options) -> Wallet:
        """
        Open the wallet named in options. Raises WalletLoadError on failure.
        """
        raise NotImplementedError(f"{cls.__name__} must implement load()")

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError


class Index(ABC):
    """
    The inscription index
    """

    @abstractmethod
    def update(self) -> None:
        """
        Bring the index up to date with the chain. Raises IndexSyncError on failure.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement update()")

    @abstractmethod
    def get_inscriptions(self, height: Optional[int] = None) -> dict[SatPoint, InscriptionId]:
        """
        Every known inscription keyed by the location of its sat, optionally only up to the given height.
        Iteration order of the returned mapping is the order rows are reported in.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement get_inscriptions()")

    @abstractmethod
    def get_unspent_outputs(self, wallet: Wallet) -> dict[OutPoint, TxOutput]:
        """
        The wallet's unspent outputs. Raises UnspentOutputError on failure.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement get_unspent_outputs()")
