"""Tamil-to-site generator backend"""

__version__ = "0.1.0"
