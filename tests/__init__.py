"""
Test suite for PyParallax package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for colours, blending, noise, layers, configuration and CLI
- Integration tests for complete generation workflows

Run with: pytest
"""
