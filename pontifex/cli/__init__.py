"""Command line interface for the Pontifex cipher."""
