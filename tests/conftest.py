"""
Fixtures used in the tests
"""
from unittest.mock import MagicMock

import pytest

from ordclone.inscriptions import Index, Wallet


@pytest.fixture()
def wallet():
    mock_wallet = MagicMock(spec=Wallet)
    mock_wallet.name = "ord"
    return mock_wallet


@pytest.fixture()
def index():
    """
    An index with no inscriptions and no unspent outputs. Tests set the return values they need.
    """
    mock_index = MagicMock(spec=Index)
    mock_index.update.return_value = None
    mock_index.get_inscriptions.return_value = {}
    mock_index.get_unspent_outputs.return_value = {}
    return mock_index
