"""Classic array algorithms: sums, searching, in-place edits, combinatorics, ranking, terrain and grids."""

__version__ = "0.1.0"