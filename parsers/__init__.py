"""Fountain screenplay normalizer, tokenizer and live classifier."""

from parsers.fountain import parse
from parsers.live_classifier import classify_line, cycle_element_type, next_element_type
from parsers.normalizer import normalize

__all__ = ["classify_line", "cycle_element_type", "next_element_type", "normalize", "parse"]
