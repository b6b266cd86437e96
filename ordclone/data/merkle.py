"""
Merkle root computation
"""
from ordclone.core import MerkleError
from ordclone.cryptography import hash256

__all__ = ["get_merkle_root"]


def get_merkle_root(id_list: list[bytes]) -> bytes:
    """
    Returns the merkle root of the given natural byte order txids. Odd levels duplicate their last element.
    """
    if not id_list:
        raise MerkleError("ID list cannot be empty. A Merkle tree requires at least one transaction ID.")

    level = list(id_list)
    while len(level) > 1:
        if len(level) % 2 != 0:
            level.append(level[-1])
        level = [hash256(level[i] + level[i + 1]) for i in range(0, len(level), 2)]
    return level[0]
