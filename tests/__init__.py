"""Test suite for html-component-compiler.

Test organization:
- fixtures/: Sample markup modules and project tree builders
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/
    pytest tests/ -v --tb=short
"""
