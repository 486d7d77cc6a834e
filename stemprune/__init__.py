"""
StemPrune

Keeps one file per stem according to an ordered extension preference and
interactively deletes or moves the other variants.

Author: StemPrune Project
License: MIT
"""

__version__ = "0.1.0"
