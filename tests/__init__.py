"""
Unit Tests for the Puzzle Data Builder

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_move_decoder.py

    # Run with coverage
    pytest tests/ --cov=chess_puzzles --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
