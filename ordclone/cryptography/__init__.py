"""
Hash functions used by the codec
"""
# cryptography/__init__.py
from ordclone.cryptography.hash_functions import *
