"""Command line interface for objectcraft."""
