# core/utils.py
import random
from typing import Optional

def clamp(x: float, lo: float, hi: float) -> float:
    """
    Clamps x into the closed interval [lo, hi].
    """
    return max(lo, min(x, hi))

def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Returns an independent random stream. Rendering code takes this as an
    explicit argument instead of touching the module-level random state.
    """
    return random.Random(seed)
