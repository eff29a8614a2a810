"""
Reversi engine package.
"""
