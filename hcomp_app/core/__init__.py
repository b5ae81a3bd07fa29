"""
Core phrase selection.
"""

from hcomp_app.core.phrases import random_phrase

__all__ = ["random_phrase"]
