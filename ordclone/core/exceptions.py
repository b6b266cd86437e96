"""
The custom exceptions used throughout OrdClone
"""
__all__ = ["StreamError", "ReadError", "WriteError", "DataEncodingError", "MerkleError", "ScriptPubKeyError",
           "AddressError", "UnknownNetworkError", "GenesisBlockError", "CollaboratorError", "IndexSyncError",
           "WalletLoadError", "UnspentOutputError"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class DataEncodingError(Exception):
    """
    For use in encoding/decoding algorithms and canonical text forms
    """
    pass


class MerkleError(Exception):
    """
    For use when computing merkle roots
    """
    pass


class ScriptPubKeyError(Exception):
    """
    For use in ScriptPubKey class and its children
    """
    pass


class AddressError(Exception):
    """
    Raised when a script has no address on the given chain, or an address string can't be decoded for it
    """
    pass


class UnknownNetworkError(ValueError):
    """
    Raised when a network name can't be resolved to a Chain
    """
    pass


class GenesisBlockError(RuntimeError):
    """
    The embedded genesis block failed to decode. This is a broken build, never a user error, and is not meant to be
    caught.
    """
    pass


class CollaboratorError(Exception):
    """
    Parent class for failures raised by the index and wallet collaborators
    """
    step = "collaborator"

    def __str__(self):
        return f"{self.step} failed: {super().__str__()}"


class IndexSyncError(CollaboratorError):
    """
    The index could not be brought up to date with the chain
    """
    step = "index sync"


class WalletLoadError(CollaboratorError):
    """
    The wallet could not be loaded
    """
    step = "wallet load"


class UnspentOutputError(CollaboratorError):
    """
    The wallet's unspent outputs could not be fetched
    """
    step = "utxo fetch"
