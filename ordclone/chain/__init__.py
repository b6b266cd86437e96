"""
Per-network parameters
"""
# chain/__init__.py
from ordclone.chain.chain import *
