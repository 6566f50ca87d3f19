"""
Main entry point for running the arcade chess opponent as a UCI engine.

Usage:
    python -m arcade_chess.uci
"""

from arcade_chess.uci.interface import main

if __name__ == "__main__":
    main()
