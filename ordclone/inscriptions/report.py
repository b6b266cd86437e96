"""
The owned inscriptions report

Joins every indexed inscription against the wallet's unspent outputs: an inscription is owned when the outpoint
holding its sat is one of the wallet's UTXOs.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ordclone.chain import Chain
from ordclone.core import CollaboratorError, get_logger, set_log_level
from ordclone.inscriptions.index import Index, Wallet
from ordclone.inscriptions.inscription_id import InscriptionId
from ordclone.tx import SatPoint

if TYPE_CHECKING:
    from ordclone.options import Options

__all__ = ["OwnedInscriptionOutput", "get_owned_inscriptions", "run", "to_json"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class OwnedInscriptionOutput:
    """
    One report row
    """
    inscription: InscriptionId
    location: SatPoint
    explorer: str

    @classmethod
    def from_location(cls, location: SatPoint, inscription: InscriptionId, chain: Chain) -> OwnedInscriptionOutput:
        return cls(inscription=inscription, location=location, explorer=f"{chain.inscription_explorer}{inscription}")

    def to_dict(self) -> dict:
        return {
            "inscription": str(self.inscription),
            "location": str(self.location),
            "explorer": self.explorer
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def get_owned_inscriptions(index: Index, wallet: Wallet, chain: Chain) -> list[OwnedInscriptionOutput]:
    """
    Update the index, then return the inscriptions sitting on the wallet's unspent outputs, in the index's order.
    Collaborator failures are re-raised as is; no partial report is ever returned.
    """
    try:
        logger.debug("Updating index")
        index.update()

        logger.debug("Fetching inscriptions")
        inscriptions = index.get_inscriptions(None)

        logger.debug(f"Fetching unspent outputs for wallet {wallet.name}")
        unspent_outputs = index.get_unspent_outputs(wallet)
    except CollaboratorError as e:
        logger.error(str(e))
        raise

    output = [
        OwnedInscriptionOutput.from_location(location, inscription, chain)
        for location, inscription in inscriptions.items()
        if location.outpoint in unspent_outputs
    ]

    logger.debug(f"{len(output)} of {len(inscriptions)} inscriptions owned by wallet {wallet.name} on {chain}")
    return output


def run(options: Options, index: Index, wallet_cls: type[Wallet]) -> list[dict]:
    """
    Load the wallet named in options and return the serialized report for options.chain
    """
    set_log_level(options.log_level)

    try:
        wallet = wallet_cls.load(options)
    except CollaboratorError as e:
        logger.error(str(e))
        raise

    return [row.to_dict() for row in get_owned_inscriptions(index, wallet, options.chain)]


def to_json(rows: list[dict]) -> str:
    return json.dumps(rows, indent=2)
