"""
Unit Tests for Arcade Chess

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_legality.py

    # Run with coverage
    pytest tests/ --cov=arcade_chess --cov-report=html

    # Run specific test
    pytest tests/test_game.py::TestCheckmate::test_fools_mate

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
    - chess (python-chess): reference move generator for cross-checks
"""
