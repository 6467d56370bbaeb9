"""Pluggable lexicon backends supplying indicator packs per practice area."""

from __future__ import annotations

from housing_hazard.lexicon.backends.file_backend import FileLexiconBackend
from housing_hazard.lexicon.backends.memory_backend import MemoryLexiconBackend
from housing_hazard.lexicon.backends.protocol import ILexiconBackend

__all__ = ["ILexiconBackend", "FileLexiconBackend", "MemoryLexiconBackend"]
