"""
All methods for manipulating and representing data in OrdClone
"""

# data/__init__.py
from ordclone.data.encoding import *
from ordclone.data.merkle import *
