"""
hcomp-app - random phrase and version service.
"""

__version__ = "1.0.0"
