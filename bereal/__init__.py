"""
BeReal - Gaussian Integer Puzzle Engine

A deterministic, rules-driven engine for a single-player card puzzle:
the board holds complex numbers a + bi, the hand holds operator and
constant cards, and a board card disappears once an operation makes it
real. The engine provides:
- Card generation with a seedable random source
- The selection state machine and board mutation rules
- Hand redraws and the one-card stock
- Sessions, a REST API and a text CLI
"""

__version__ = "0.1.0"
