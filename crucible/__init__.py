"""
Crucible - Minimal-cost routing over a digit grid with run-length limits.
"""

__version__ = "1.0.0"
