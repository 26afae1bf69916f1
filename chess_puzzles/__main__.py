"""
Main entry point for the puzzle data builder.

Usage:
    python -m chess_puzzles build --puzzles puzzles --output data
"""

from chess_puzzles.cli import main

if __name__ == "__main__":
    main()
