"""
Reelsmith - script to short vertical video generation service
"""

__version__ = "1.0.0"
