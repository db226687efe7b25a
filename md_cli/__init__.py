"""
md - an interactive front-end for yt-dlp.
"""

__version__ = "0.1.0"
