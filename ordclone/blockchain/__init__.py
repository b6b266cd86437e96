"""
Block headers and blocks
"""
# blockchain/__init__.py
from ordclone.blockchain.block import *
