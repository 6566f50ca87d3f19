"""
UCI Protocol Interface

This module exposes the computer opponent through a subset of the
Universal Chess Interface (UCI) protocol, so it can be played from a
terminal or attached to a chess GUI.

Protocol Flow:
    GUI → "uci"
    Engine → "id name ArcadeChess 0.1"
    Engine → "option name Difficulty type combo default normal ..."
    Engine → "uciok"
    GUI → "setoption name Difficulty value hard"
    GUI → "isready"
    Engine → "readyok"
    GUI → "position startpos moves e2e4"
    GUI → "go"
    Engine → "info depth 3 score cp 25 nodes 12345 time 210"
    Engine → "bestmove e7e5"

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

from arcade_chess.uci.interface import UCIEngine, setup_logger

__all__ = ['UCIEngine', 'setup_logger']
