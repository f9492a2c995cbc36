"""
connect_four.interfaces - User interfaces for Connect Four

Front ends render game state and forward column choices to the engine.
They hold no game logic.
"""

# Don't import anything here to avoid circular imports
__all__ = []
