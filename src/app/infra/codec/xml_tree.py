"""Conversão bidirecional árvore de campos ↔ XML legado.

Convenções (compatíveis com o codec do sistema legado):
- Cada chave vira um elemento; escalares viram texto; listas repetem o elemento
- Chave "$" guarda atributos do elemento
- No decode, todo valor filho vem embrulhado em lista de um elemento
  (explicit_array) e atributos são mesclados aos campos filhos (merge_attrs)
- Texto não-vazio misturado com filhos fica na chave "_"
- CR em texto sai como &#13; para sobreviver à normalização de fim de linha

Quem consome o decode é responsável por desembrulhar os valores.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

from utils.errors import CodecError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DEFAULT_ROOT_NAME = "root"
ATTRS_KEY = "$"
TEXT_KEY = "_"
INDENT = "  "
CR_REFERENCE = "&#13;"

# Caracteres proibidos em XML 1.0 (controle, surrogates, U+FFFE/U+FFFF)
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
_VALID_NAME = re.compile(r"^[A-Za-z_][\w.\-]*$")

OrderedFieldTree = dict[str, Any]


def encode(tree: Mapping[str, Any], *, pretty: bool = True) -> str:
    """Serializa árvore de campos para XML UTF-8.

    Args:
        tree: Mapeamento campo → escalar | árvore | lista de árvores.
        pretty: Indenta com dois espaços quando True.

    Returns:
        Documento XML com declaração de encoding.

    Raises:
        CodecError: Nome de campo inválido, caractere ilegal ou lista vazia.
    """
    if not isinstance(tree, Mapping) or not tree:
        raise CodecError("Tree must be a non-empty mapping")

    if len(tree) == 1:
        root_name, root_value = next(iter(tree.items()))
        if not isinstance(root_value, Mapping):
            root_name, root_value = DEFAULT_ROOT_NAME, tree
    else:
        root_name, root_value = DEFAULT_ROOT_NAME, tree

    root = _new_element(root_name)
    _fill_element(root, root_value)

    if pretty:
        ET.indent(root, space=INDENT)
    # ET não escapa CR em texto e o parser o normalizaria para LF
    body = ET.tostring(root, encoding="unicode").replace("\r", CR_REFERENCE)
    separator = "\n" if pretty else ""
    return f"{XML_DECLARATION}{separator}{body}"


def decode(
    text: str | bytes,
    *,
    explicit_array: bool = True,
    merge_attrs: bool = True,
) -> OrderedFieldTree:
    """Converte XML em árvore de campos.

    Args:
        text: Documento XML.
        explicit_array: Embrulha cada valor filho em lista de um elemento.
        merge_attrs: Mescla atributos aos campos filhos; se False, usa "$".

    Returns:
        {nome_da_raiz: conteúdo}, sem embrulhar a raiz.

    Raises:
        CodecError: XML malformado.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise CodecError(f"Malformed XML: {exc}") from exc
    return {root.tag: _element_value(root, explicit_array, merge_attrs)}


def _new_element(name: str) -> ET.Element:
    if not isinstance(name, str) or not _VALID_NAME.match(name) or name.lower().startswith("xml"):
        raise CodecError(f"Invalid element name: {name!r}")
    return ET.Element(name)


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    if _ILLEGAL_XML_CHARS.search(text):
        raise CodecError("Value contains characters not allowed in XML")
    return text


def _fill_element(element: ET.Element, value: Any) -> None:
    if not isinstance(value, Mapping):
        element.text = _scalar_text(value)
        return

    for key, child in value.items():
        if key == ATTRS_KEY:
            _set_attributes(element, child)
        elif key == TEXT_KEY:
            element.text = _scalar_text(child)
        elif isinstance(child, list):
            if not child:
                raise CodecError(f"Empty sequence for field {key!r}")
            for item in child:
                _fill_element(_append_child(element, key), item)
        else:
            _fill_element(_append_child(element, key), child)


def _append_child(parent: ET.Element, name: str) -> ET.Element:
    child = _new_element(name)
    parent.append(child)
    return child


def _set_attributes(element: ET.Element, attrs: Any) -> None:
    if not isinstance(attrs, Mapping):
        raise CodecError("Attributes must be a mapping")
    for name, value in attrs.items():
        _new_element(name)
        element.set(name, _scalar_text(value))


def _element_value(element: ET.Element, explicit_array: bool, merge_attrs: bool) -> Any:
    children = list(element)
    text = element.text or ""

    if not children and not element.attrib:
        return text

    node: OrderedFieldTree = {}
    if element.attrib:
        if merge_attrs:
            for name, value in element.attrib.items():
                _assign(node, name, value, explicit_array)
        else:
            node[ATTRS_KEY] = dict(element.attrib)

    if text.strip():
        node[TEXT_KEY] = text

    for child in children:
        _assign(node, child.tag, _element_value(child, explicit_array, merge_attrs), explicit_array)
    return node


def _assign(node: OrderedFieldTree, key: str, value: Any, explicit_array: bool) -> None:
    if key not in node:
        node[key] = [value] if explicit_array else value
        return
    current = node[key]
    if isinstance(current, list):
        current.append(value)
    else:
        node[key] = [current, value]
