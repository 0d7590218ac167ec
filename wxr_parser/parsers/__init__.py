"""
Parsers turning raw export bytes into the typed document model.
"""

from .xml_decoder import CONTENT_NS, DC_NS, EXCERPT_NS, WP_NS, decode_document

__all__ = ["CONTENT_NS", "DC_NS", "EXCERPT_NS", "WP_NS", "decode_document"]
