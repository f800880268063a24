"""
Flappy Bird: a single-player arcade game on pygame.
"""

__version__ = "1.0.0"
