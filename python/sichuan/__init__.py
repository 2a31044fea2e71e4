"""Solver for Shisen-Sho (Sichuan) style tile-matching boards."""

__version__ = "0.1.0"
