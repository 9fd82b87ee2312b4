"""
disclosure-sorter: converts conflict-of-interest disclosure records into
procedure-specific structures and sorts them into category buckets.
"""

__version__ = "1.0.0"
