"""Translation adapters - implementations of Translator port."""

from .google_translator import GoogleTranslateAdapter
from .mock_translator import MockTranslator

__all__ = ['GoogleTranslateAdapter', 'MockTranslator']
