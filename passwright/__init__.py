"""Passwright: constrained password generation and strength evaluation."""

__version__ = "0.1.0"
