"""Sample positions and PGN snippets used across tests."""

PIN_FEN = "6k1/5pp1/7p/3p4/b7/6P1/5PKP/3R4 w - - 0 1"
PIN_MOVES = "1. Rd1-d5 Ba4-c6 *"

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
AFTER_E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def make_segment(fen, moves, original_id=None):
    """Render one puzzle segment as PGN text."""
    lines = ['[Event "?"]']
    if original_id is not None:
        lines.append(f'[OriginalID "{original_id}"]')
    lines.extend([f'[FEN "{fen}"]', '[SetUp "1"]', "", moves, ""])
    return "\n".join(lines)
