"""Helpers for function secret sharing: an AES-CTR PRNG, a 128-bit integer, wrapping arithmetic, a grid setting and an expression evaluator."""

__version__ = "0.1.0"

__all__ = ["config", "expression", "prng", "uint128", "wrapping"]