"""
zpool-summary

Reports ZFS pool health and free space as a single status bar line.
"""

__version__ = "1.0.0"
