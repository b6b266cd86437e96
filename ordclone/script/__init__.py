"""
Standard scriptpubkey templates and the addresses they map to
"""
# script/__init__.py
from ordclone.script.address import *
from ordclone.script.scriptpubkey import *
