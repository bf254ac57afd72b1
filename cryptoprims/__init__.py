"""Pedersen, Bowe-Hopwood and SHA-256 hashes and commitments over twisted Edwards curves."""

__version__ = "0.1.0"