"""
Arena module for running games between automated players.
"""
from .arena import Arena, RandomPlayer

__all__ = ['Arena', 'RandomPlayer']
