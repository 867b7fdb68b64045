"""CRDT engine adapters for the Automerge converter."""

from .automerge_engine import AutomergeEngine

__all__ = ["AutomergeEngine"]
