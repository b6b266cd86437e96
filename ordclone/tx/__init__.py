"""
Transactions and the references into them
"""
# tx/__init__.py
from ordclone.tx.outpoint import *
from ordclone.tx.tx import *
