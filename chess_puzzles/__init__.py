"""
Chess Puzzles Data Builder

Converts curated chess puzzle collections (PGN files grouped in folders)
into the static JSON data set consumed by the browser trainer.

## Architecture

The builder is organized around a single data pipeline:

1. **pgn_parser**: PGN segmentation
   - Split loosely structured PGN text into one record per puzzle
   - Repair FEN strings with a zero fullmove counter

2. **move_decoder**: Move replay
   - Replay algebraic move text through python-chess
   - Permissive: unparseable tokens are dropped, not fatal

3. **assembler**: Puzzle records
   - Board orientation from side to move and puzzle type

4. **chunker**: Output files
   - Split per-file puzzle lists into bounded chunks
   - Deterministic puzzle IDs and file names

5. **pipeline**: Collection orchestration
   - Walk collection folders, write puzzle files and index.json

6. **validator**: Post-build checks on a generated data tree

## Quick Start

```bash
python -m chess_puzzles build --puzzles puzzles --output data
python -m chess_puzzles validate data
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_puzzles.data.pipeline import BuildConfig, BuildSummary, PuzzleBuilder

__all__ = [
    "BuildConfig",
    "BuildSummary",
    "PuzzleBuilder",
]
