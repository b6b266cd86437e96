"""
OrdClone - inscription tracking on top of a pure python Bitcoin codec

Packages:
    -core: protocol, formats, exceptions and logging shared by every element
    -cryptography: hash functions
    -data: base58check/bech32 encoding and merkle roots
    -tx: transactions, outpoints and satpoints
    -blockchain: block headers and blocks
    -script: scriptpubkey templates and addresses
    -chain: per-network parameters
    -inscriptions: inscription ids and the owned inscriptions report
"""
__version__ = "0.1.0"
