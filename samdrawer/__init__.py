"""Suffix automaton construction and drawing as DOT or SVG, with a command line entry point."""

__version__ = "0.1.0"

__all__ = ["automaton", "render", "cli"]