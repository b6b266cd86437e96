"""
Contains the core elements that are used within OrdClone

Core:
    -Provides the standard protocol for OrdClone elements
    -Provides the reference formats for OrdClone formatting
    -Provides custom exceptions for various OrdClone elements
    -Provides the logger factory
"""
# core/__init__.py
from ordclone.core.byte_stream import *
from ordclone.core.exceptions import *
from ordclone.core.formats import *
from ordclone.core.logging import *
from ordclone.core.serializable import *
