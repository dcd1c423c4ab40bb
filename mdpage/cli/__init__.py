"""Command line interface for mdpage."""
