"""Damgard-Fujisaki commitments, zero-knowledge proofs over them, and credential attributes."""

__version__ = "0.1.0"