"""
Minebot - a Minesweeper bot that deduces flags and reveals from board snapshots.
"""
__version__ = "0.1.0"
