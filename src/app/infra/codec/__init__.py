"""Codec estrutural entre árvores de campos e o XML do sistema legado."""

from .xml_tree import XML_DECLARATION, OrderedFieldTree, decode, encode

__all__ = ["XML_DECLARATION", "OrderedFieldTree", "decode", "encode"]
