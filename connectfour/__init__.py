"""
connectfour - Two-player Connect Four played in the terminal

This package provides the board and turn engine for Connect Four, a console
interface for two people sharing a keyboard, and a Gymnasium environment
for scripted play.
"""

# Version number
__version__ = '0.1.0'
