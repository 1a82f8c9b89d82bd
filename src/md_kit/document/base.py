# src/md_kit/document/base.py

from abc import ABC, abstractmethod

from .models import Document


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source_text: str) -> Document:
        """
        Parse Markdown text and return a structured, deterministic document.

        Requirements:
        - Deterministic output for same input
        - Blocks in source order
        - Raises ParseError only for malformed code fences
        """
        raise NotImplementedError
