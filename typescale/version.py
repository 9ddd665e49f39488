"""
version.py — typescale
======================
Single source of the package version.
"""

APP_NAME = "typescale"
VERSION = "1.0.0"
