"""Line-oriented scanning of component classes.

Components:
- braces: Presence-based brace depth automaton and its walks
- Scanner: Class header, base class, method and block queries
"""

from .parser import Scanner

__all__ = ["Scanner"]
