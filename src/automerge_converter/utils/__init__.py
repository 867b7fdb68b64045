"""Utility functions for the Automerge converter."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
