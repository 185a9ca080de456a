"""Make ``aervix_club`` importable when pytest runs from a plain checkout."""

import os
import sys

# Same effect as ``python -m pytest``: the repository root goes on the import
# path so the package resolves without being installed first.
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
