"""
Tests for the Chain enum: name resolution, per-network parameters, genesis blocks and data directories
"""
from pathlib import Path

import pytest

import ordclone.chain.chain as chain_module
from ordclone.blockchain import Block
from ordclone.chain import Chain
from ordclone.chain.genesis import GENESIS_HASHES, MAINNET_GENESIS
from ordclone.core import UnknownNetworkError, AddressError, GenesisBlockError
from ordclone.tx import txid_to_display

ALL_CHAINS = list(Chain)


def test_chain_members():
    assert [str(c) for c in Chain] == ["mainnet", "testnet", "signet", "regtest"]
    assert Chain.default() is Chain.MAINNET


@pytest.mark.parametrize("name, expected", [
    ("mainnet", Chain.MAINNET),
    ("main", Chain.MAINNET),
    ("testnet", Chain.TESTNET),
    ("test", Chain.TESTNET),
    ("signet", Chain.SIGNET),
    ("regtest", Chain.REGTEST),
    (" Regtest ", Chain.REGTEST),
    ("MAIN", Chain.MAINNET),
])
def test_from_str(name, expected):
    assert Chain.from_str(name) is expected


@pytest.mark.parametrize("name", ["bogus", "", "testnet3", "bitcoin", "mainnet2"])
def test_from_str_unknown(name):
    with pytest.raises(UnknownNetworkError):
        Chain.from_str(name)


def test_unknown_network_is_value_error():
    with pytest.raises(ValueError):
        Chain.from_str("bogus")


@pytest.mark.parametrize("chain", ALL_CHAINS)
def test_display_round_trip(chain):
    assert Chain.from_str(str(chain)) is chain


@pytest.mark.parametrize("chain", ALL_CHAINS)
def test_genesis_block(chain):
    genesis = chain.genesis_block

    assert isinstance(genesis, Block)
    assert genesis.block_hash == GENESIS_HASHES[str(chain)]
    assert genesis.header.prev_block == b'\x00' * 32
    assert len(genesis.txs) == 1
    assert genesis.txs[0].is_coinbase
    assert genesis.check_merkle_root()
    assert txid_to_display(genesis.txs[0].txid) == \
           "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"


def test_genesis_block_is_cached():
    assert Chain.SIGNET.genesis_block is Chain.SIGNET.genesis_block


def test_genesis_blocks_differ():
    hashes = {chain.genesis_block.block_hash for chain in Chain}
    assert len(hashes) == len(ALL_CHAINS)


@pytest.mark.parametrize("chain", ALL_CHAINS)
def test_parameters_are_total(chain):
    """
    Every accessor answers for every member
    """
    chain_dict = chain.to_dict()

    assert chain_dict["chain"] == str(chain)
    assert chain.network
    assert len(chain.magic_bytes) == 4
    assert chain.default_rpc_port > 0
    assert chain.inscription_content_size_limit is None
    assert chain.first_inscription_height == 0
    assert chain.first_dune_height == 0
    assert chain.inscription_explorer.endswith("/inscription/")
    assert chain.bech32_hrp
    assert isinstance(chain.data_dir_suffix, str)


def test_default_rpc_ports():
    ports = {chain: chain.default_rpc_port for chain in Chain}

    assert ports == {
        Chain.MAINNET: 8332,
        Chain.TESTNET: 18332,
        Chain.SIGNET: 38332,
        Chain.REGTEST: 18443,
    }
    assert len(set(ports.values())) == len(ALL_CHAINS)


def test_explorer_scheme():
    assert Chain.SIGNET.inscription_explorer.startswith("https://")
    for chain in (Chain.MAINNET, Chain.TESTNET, Chain.REGTEST):
        assert chain.inscription_explorer.startswith("http://")


@pytest.mark.parametrize("chain, expected", [
    (Chain.MAINNET, Path("/x")),
    (Chain.TESTNET, Path("/x/testnet3")),
    (Chain.SIGNET, Path("/x/signet")),
    (Chain.REGTEST, Path("/x/regtest")),
])
def test_join_with_data_dir(chain, expected):
    assert chain.join_with_data_dir(Path("/x")) == expected
    assert chain.join_with_data_dir("/x") == expected


def test_join_with_data_dir_touches_nothing(tmp_path):
    base = tmp_path / "missing"
    Chain.REGTEST.join_with_data_dir(base)
    assert not base.exists()


def test_address_from_script():
    p2wpkh = bytes.fromhex("0014751e76e8199196d454941c45d1b3a323f1433bd6")

    assert str(Chain.MAINNET.address_from_script(p2wpkh)) == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
    assert str(Chain.TESTNET.address_from_script(p2wpkh)) == "tb1qw508d6qejxtdg4y5r3zarvary0c5xw7kxpjzsx"
    assert str(Chain.REGTEST.address_from_script(p2wpkh)).startswith("bcrt1q")


@pytest.mark.parametrize("chain", ALL_CHAINS)
def test_genesis_output_has_no_address(chain):
    """
    The genesis coinbase pays to a bare pubkey (P2PK), which has no address
    """
    genesis_script = chain.genesis_block.txs[0].outputs[0].scriptpubkey
    with pytest.raises(AddressError):
        chain.address_from_script(genesis_script)


@pytest.fixture()
def fresh_genesis_cache():
    chain_module._decode_genesis.cache_clear()
    yield
    chain_module._decode_genesis.cache_clear()


# Merkle root sits after the 4 byte version and 32 byte prev_block
MERKLE_ROOT_HEX = slice(72, 136)

BROKEN_GENESIS = {
    "bad_hex": "zz" + MAINNET_GENESIS[2:],
    "truncated": MAINNET_GENESIS[:100],
    "truncated_tx": MAINNET_GENESIS[:-8],
    "trailing_data": MAINNET_GENESIS + "00",
    "merkle_mismatch": MAINNET_GENESIS[:MERKLE_ROOT_HEX.start] + "00" * 32 + MAINNET_GENESIS[MERKLE_ROOT_HEX.stop:],
}


@pytest.mark.parametrize("case", list(BROKEN_GENESIS))
def test_broken_genesis_is_fatal(case, monkeypatch, fresh_genesis_cache):
    monkeypatch.setattr(chain_module, "MAINNET_GENESIS", BROKEN_GENESIS[case])

    with pytest.raises(GenesisBlockError):
        Chain.MAINNET.genesis_block


def test_genesis_error_is_not_a_value_error(monkeypatch, fresh_genesis_cache):
    monkeypatch.setattr(chain_module, "MAINNET_GENESIS", MAINNET_GENESIS + "00")

    with pytest.raises(RuntimeError) as exc_info:
        Chain.MAINNET.genesis_block
    assert not isinstance(exc_info.value, ValueError)
