"""
Конфигурация формата валютных пар.
"""

from src.currency.config.pair_format import PairFormat, load_pair_format

__all__ = [
    "PairFormat",
    "load_pair_format",
]
