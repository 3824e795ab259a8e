"""
Norm Inference Layer

Reference values printed beside each measured result.

Usage:
    from fce.core.norms import infer_norms

    norms = infer_norms("Grip Strength")
    norms.comparison_text()     # "110.5 (L) | 120.8 (R) lb"
"""
from .base import NormCategory, NormInfo
from .engine import NormInferencer, infer_norms
from .rom_table import rom_norm_degrees

__all__ = [
    "NormCategory",
    "NormInfo",
    "NormInferencer",
    "infer_norms",
    "rom_norm_degrees",
]
