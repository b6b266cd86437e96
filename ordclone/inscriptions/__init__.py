"""
Inscription ids, the index/wallet collaborators and the owned inscriptions report
"""
# inscriptions/__init__.py
from ordclone.inscriptions.index import *
from ordclone.inscriptions.inscription_id import *
from ordclone.inscriptions.report import *
