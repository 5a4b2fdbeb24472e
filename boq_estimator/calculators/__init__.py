"""
Deterministic quantity engine.

Pure Python math. No I/O.
Given a construction type and its dimensions, produce a frozen
requirement result with every discrete count rounded up.
"""
