"""Hessian 2 long and null codecs, list tag helpers, and Java type models."""

__version__ = "0.1.0"