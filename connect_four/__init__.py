"""
connect_four - Two-player Connect Four session core

This package provides the game state and win/tie detection for a hot-seat
Connect Four game, plus a terminal front end that drives it.
"""

# Version number
__version__ = '0.1.0'
