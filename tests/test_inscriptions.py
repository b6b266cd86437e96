"""
Tests for the owned inscriptions report
"""
import json
from unittest.mock import MagicMock

import pytest

import ordclone.inscriptions.report as report_module
from ordclone.chain import Chain
from ordclone.core import IndexSyncError, UnspentOutputError, WalletLoadError, CollaboratorError
from ordclone.inscriptions import get_owned_inscriptions, OwnedInscriptionOutput, run, to_json, Wallet
from ordclone.options import Options
from ordclone.tx import SatPoint
from tests.random_generators import getrand_outpoint, getrand_inscription_id, getrand_txoutput, getrand_satpoint


def test_join_on_outpoint(index, wallet):
    """
    Only the inscription whose sat sits on a wallet utxo is reported
    """
    outpoint_a = getrand_outpoint()
    outpoint_b = getrand_outpoint()
    i1 = getrand_inscription_id()
    i2 = getrand_inscription_id()
    index.get_inscriptions.return_value = {SatPoint(outpoint_a, 0): i1, SatPoint(outpoint_b, 0): i2}
    index.get_unspent_outputs.return_value = {outpoint_a: getrand_txoutput()}

    output = get_owned_inscriptions(index, wallet, Chain.MAINNET)

    assert len(output) == 1
    assert output[0].inscription == i1
    assert output[0].location == SatPoint(outpoint_a, 0)
    index.get_inscriptions.assert_called_once_with(None)
    index.get_unspent_outputs.assert_called_once_with(wallet)


@pytest.mark.parametrize("chain", list(Chain))
def test_explorer_url(index, wallet, chain):
    satpoints = [getrand_satpoint() for _ in range(5)]
    inscriptions = {satpoint: getrand_inscription_id() for satpoint in satpoints}
    index.get_inscriptions.return_value = inscriptions
    index.get_unspent_outputs.return_value = {satpoint.outpoint: getrand_txoutput() for satpoint in satpoints}

    output = get_owned_inscriptions(index, wallet, chain)

    assert len(output) == 5
    for row in output:
        assert row.explorer == chain.inscription_explorer + str(row.inscription)


def test_mainnet_explorer_url(index, wallet):
    satpoint = getrand_satpoint()
    inscription = getrand_inscription_id()
    index.get_inscriptions.return_value = {satpoint: inscription}
    index.get_unspent_outputs.return_value = {satpoint.outpoint: getrand_txoutput()}

    row = get_owned_inscriptions(index, wallet, Chain.MAINNET)[0]

    assert row.explorer == f"http://localhost/inscription/{inscription}"


def test_order_follows_index(index, wallet):
    outpoint = getrand_outpoint()
    satpoints = [SatPoint(outpoint, offset) for offset in (900, 10, 500)]
    ids = [getrand_inscription_id() for _ in satpoints]
    index.get_inscriptions.return_value = dict(zip(satpoints, ids))
    index.get_unspent_outputs.return_value = {outpoint: getrand_txoutput()}

    output = get_owned_inscriptions(index, wallet, Chain.SIGNET)

    assert [row.inscription for row in output] == ids
    assert [row.location.offset for row in output] == [900, 10, 500]


def test_empty_inscriptions(index, wallet):
    index.get_unspent_outputs.return_value = {getrand_outpoint(): getrand_txoutput()}
    assert get_owned_inscriptions(index, wallet, Chain.MAINNET) == []


def test_empty_utxos(index, wallet):
    index.get_inscriptions.return_value = {getrand_satpoint(): getrand_inscription_id()}
    assert get_owned_inscriptions(index, wallet, Chain.MAINNET) == []


def test_utxo_without_inscription_is_ignored(index, wallet):
    satpoint = getrand_satpoint()
    index.get_inscriptions.return_value = {satpoint: getrand_inscription_id()}
    index.get_unspent_outputs.return_value = {
        satpoint.outpoint: getrand_txoutput(),
        getrand_outpoint(): getrand_txoutput(),
    }

    assert len(get_owned_inscriptions(index, wallet, Chain.MAINNET)) == 1


def test_same_inscription_on_two_sats_not_deduplicated(index, wallet):
    outpoint = getrand_outpoint()
    inscription = getrand_inscription_id()
    index.get_inscriptions.return_value = {SatPoint(outpoint, 0): inscription, SatPoint(outpoint, 1): inscription}
    index.get_unspent_outputs.return_value = {outpoint: getrand_txoutput()}

    output = get_owned_inscriptions(index, wallet, Chain.MAINNET)

    assert [row.inscription for row in output] == [inscription, inscription]


def test_update_failure_stops_report(index, wallet):
    error = IndexSyncError("node unreachable")
    index.update.side_effect = error

    with pytest.raises(IndexSyncError) as exc_info:
        get_owned_inscriptions(index, wallet, Chain.MAINNET)

    assert exc_info.value is error
    index.get_inscriptions.assert_not_called()
    index.get_unspent_outputs.assert_not_called()


def test_any_update_exception_propagates(index, wallet):
    index.update.side_effect = OSError("disk full")

    with pytest.raises(OSError):
        get_owned_inscriptions(index, wallet, Chain.MAINNET)
    index.get_inscriptions.assert_not_called()


def test_utxo_fetch_failure(index, wallet):
    index.get_inscriptions.return_value = {getrand_satpoint(): getrand_inscription_id()}
    index.get_unspent_outputs.side_effect = UnspentOutputError("rpc error")

    with pytest.raises(UnspentOutputError) as exc_info:
        get_owned_inscriptions(index, wallet, Chain.MAINNET)

    assert exc_info.value.step == "utxo fetch"
    assert str(exc_info.value) == "utxo fetch failed: rpc error"


def test_row_serialization():
    satpoint = getrand_satpoint()
    inscription = getrand_inscription_id()
    row = OwnedInscriptionOutput.from_location(satpoint, inscription, Chain.SIGNET)

    assert row.to_dict() == {
        "inscription": str(inscription),
        "location": str(satpoint),
        "explorer": f"https://localhost/inscription/{inscription}",
    }
    assert json.loads(row.to_json()) == row.to_dict()


def test_row_is_immutable():
    row = OwnedInscriptionOutput.from_location(getrand_satpoint(), getrand_inscription_id(), Chain.MAINNET)
    with pytest.raises(AttributeError):
        row.explorer = "http://elsewhere/"


def test_run(index, wallet):
    wallet_cls = MagicMock(spec=Wallet)
    wallet_cls.load.return_value = wallet
    satpoint = getrand_satpoint()
    inscription = getrand_inscription_id()
    index.get_inscriptions.return_value = {satpoint: inscription}
    index.get_unspent_outputs.return_value = {satpoint.outpoint: getrand_txoutput()}
    options = Options(chain=Chain.REGTEST, log_level="WARNING")

    rows = run(options, index, wallet_cls)

    wallet_cls.load.assert_called_once_with(options)
    assert rows == [{
        "inscription": str(inscription),
        "location": str(satpoint),
        "explorer": f"http://localhost/inscription/{inscription}",
    }]
    assert json.loads(to_json(rows)) == rows


def test_run_wallet_load_failure(index):
    wallet_cls = MagicMock(spec=Wallet)
    wallet_cls.load.side_effect = WalletLoadError("no such wallet")

    with pytest.raises(CollaboratorError) as exc_info:
        run(Options(), index, wallet_cls)

    assert exc_info.value.step == "wallet load"
    index.update.assert_not_called()


def test_run_empty_report(index, wallet):
    wallet_cls = MagicMock(spec=Wallet)
    wallet_cls.load.return_value = wallet

    rows = run(Options(), index, wallet_cls)

    assert rows == []
    assert to_json(rows) == "[]"


def test_report_logs_nothing_at_info(index, wallet, monkeypatch):
    """
    The report only logs at DEBUG on success, so INFO level output never lands beside the JSON rows
    """
    mock_logger = MagicMock()
    monkeypatch.setattr(report_module, "logger", mock_logger)
    satpoint = getrand_satpoint()
    index.get_inscriptions.return_value = {satpoint: getrand_inscription_id()}
    index.get_unspent_outputs.return_value = {satpoint.outpoint: getrand_txoutput()}

    get_owned_inscriptions(index, wallet, Chain.MAINNET)

    mock_logger.info.assert_not_called()
    mock_logger.error.assert_not_called()
    assert mock_logger.debug.call_args.args[0].startswith("1 of 1 inscriptions owned")
