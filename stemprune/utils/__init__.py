"""
Utility Module

Logging setup and file operations.

Author: StemPrune Project
License: MIT
"""
