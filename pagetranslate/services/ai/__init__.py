"""
AI services using DSPy.

DSPy provides a structured way to define AI behaviors as "signatures"
that can be optimized and tested.
"""

from pagetranslate.services.ai.client import get_lm

__all__ = [
    "get_lm",
]
