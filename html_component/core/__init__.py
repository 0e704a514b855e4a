"""Core transformation modules."""
