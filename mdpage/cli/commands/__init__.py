"""Command modules for the mdpage CLI."""

from mdpage.cli.commands import render, show

__all__ = ["render", "show"]
