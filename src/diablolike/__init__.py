"""
diablolike
----------
Top-down action RPG prototype: melee combat, enemy spawners and a
drag-and-drop inventory on pygame.

Run with `python -m diablolike`.
"""

__version__ = "0.1.0"
