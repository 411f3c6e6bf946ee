#!/usr/bin/env python3
"""
DECLSORT REPRESENTATION CODEC
-----------------------------
Decodes the token stream and parse tree that an external front end wrote
out as YAML or JSON, into Token objects and parse-tree node variants.

    tokens:
      - [at_op, 2, 3, "@"]
      - {type: identifier, line: 2, column: 4, value: type}
    ast:
      node: module
      name: Sample
      body:
        - {node: import, line: 2, target: {node: alias, segments: [Apple]}}

Unknown node tags are kept as Opaque nodes so extraction can still look
inside them. Structurally broken documents raise RepresentationError.

Author: DeclSort Team
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ruamel.yaml import YAML, YAMLError

from declsort.core.errors import RepresentationError
from declsort.core.models import SourceDocument, Token
from declsort.core.nodes import (
    AliasRef, Atom, Block, Call, FunctionDef, Import, ListLiteral, Literal,
    Module, MultiAlias, Node, Opaque, Pair, TupleLiteral,
)

logger = logging.getLogger("declsort.codec")

REPRESENTATION_SUFFIXES = (".yaml", ".yml", ".json")


def _required(data: Dict[str, Any], key: str, tag: str) -> Any:
    if key not in data:
        raise RepresentationError(f"'{tag}' node is missing required field '{key}'")
    return data[key]


def _position(data: Dict[str, Any], key: str) -> Optional[int]:
    """Line and column fields are optional, but must be plain integers when present."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise RepresentationError(f"Field '{key}' must be an integer, got {value!r}")
    return value


def _nodes(value: Any, tag: str, key: str) -> Tuple[Node, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise RepresentationError(f"Field '{key}' of '{tag}' node must be a list")
    return tuple(decode_node(item) for item in value)


def _alias(value: Any) -> AliasRef:
    """Aliases may be written in full or shortened to a dotted string."""
    if isinstance(value, str):
        return AliasRef(tuple(value.split(".")))
    node = decode_node(value)
    if not isinstance(node, AliasRef):
        raise RepresentationError(f"Expected an alias, got {type(node).__name__}")
    return node


def _decode_alias(data: Dict[str, Any]) -> AliasRef:
    segments = _required(data, "segments", "alias")
    if isinstance(segments, str):
        segments = segments.split(".")
    if not isinstance(segments, list) or not all(isinstance(s, str) for s in segments):
        raise RepresentationError("Alias 'segments' must be a list of strings")
    return AliasRef(tuple(segments), line=_position(data, "line"), column=_position(data, "column"))


def _decode_multi_alias(data: Dict[str, Any]) -> MultiAlias:
    suffixes = data.get("suffixes") or []
    if not isinstance(suffixes, list):
        raise RepresentationError("Field 'suffixes' of 'multi_alias' node must be a list")
    return MultiAlias(
        prefix=_alias(_required(data, "prefix", "multi_alias")),
        suffixes=tuple(_alias(s) for s in suffixes),
        line=_position(data, "line"),
    )


def _decode_function(private: bool) -> Callable[[Dict[str, Any]], FunctionDef]:
    tag = "defp" if private else "def"

    def decode(data: Dict[str, Any]) -> FunctionDef:
        body = data.get("body")
        return FunctionDef(
            name=str(_required(data, "name", tag)),
            params=_nodes(data.get("params"), tag, "params"),
            body=decode_node(body) if body is not None else None,
            private=private,
            line=_position(data, "line"),
        )
    return decode


NODE_DECODERS: Dict[str, Callable[[Dict[str, Any]], Node]] = {
    "module": lambda d: Module(
        name=str(_required(d, "name", "module")),
        body=_nodes(d.get("body"), "module", "body"),
        line=_position(d, "line"),
    ),
    "import": lambda d: Import(
        target=decode_node(_required(d, "target", "import")),
        options=_nodes(d.get("options"), "import", "options"),
        line=_position(d, "line"),
    ),
    "alias": _decode_alias,
    "multi_alias": _decode_multi_alias,
    "def": _decode_function(private=False),
    "defp": _decode_function(private=True),
    "block": lambda d: Block(_nodes(d.get("exprs"), "block", "exprs"), line=_position(d, "line")),
    "list": lambda d: ListLiteral(_nodes(d.get("items"), "list", "items"), line=_position(d, "line")),
    "tuple": lambda d: TupleLiteral(_nodes(d.get("elements"), "tuple", "elements"), line=_position(d, "line")),
    "pair": lambda d: Pair(
        key=decode_node(_required(d, "key", "pair")),
        value=decode_node(d.get("value")),
        line=_position(d, "line"),
    ),
    "atom": lambda d: Atom(str(_required(d, "name", "atom")).lstrip(":"), line=_position(d, "line")),
    "literal": lambda d: Literal(d.get("value"), line=_position(d, "line")),
    "call": lambda d: Call(
        name=str(_required(d, "name", "call")),
        args=_nodes(d.get("args"), "call", "args"),
        line=_position(d, "line"),
    ),
}


def _decode_opaque(tag: str, data: Dict[str, Any]) -> Opaque:
    children: List[Node] = []
    for key, value in data.items():
        if key in ("node", "line"):
            continue
        if isinstance(value, dict) and "node" in value:
            children.append(decode_node(value))
        elif isinstance(value, list):
            children.extend(decode_node(item) for item in value)
    return Opaque(tag, tuple(children), line=_position(data, "line"))


def decode_node(value: Any) -> Node:
    """Decodes one serialized node. Bare lists become list literals, scalars literals."""
    if isinstance(value, list):
        return ListLiteral(tuple(decode_node(item) for item in value))
    if not isinstance(value, dict) or "node" not in value:
        return Literal(value)

    tag = str(value["node"])
    decoder = NODE_DECODERS.get(tag)
    if decoder is None:
        logger.debug(f"Unknown node tag '{tag}' kept as opaque")
        return _decode_opaque(tag, value)
    return decoder(value)


def decode_token(row: Any) -> Token:
    if isinstance(row, dict):
        return Token(
            type=str(_required(row, "type", "token")),
            line=_position(row, "line"),
            column=_position(row, "column"),
            value=row.get("value"),
        )
    if isinstance(row, list) and len(row) == 4:
        token_type, line, column, value = row
        position = {"line": line, "column": column}
        return Token(
            type=str(token_type),
            line=_position(position, "line"),
            column=_position(position, "column"),
            value=value,
        )
    raise RepresentationError(f"Token must be a mapping or a [type, line, column, value] row, got {row!r}")


def decode_document(data: Any, filename: str = "<memory>") -> SourceDocument:
    if data is None:
        return SourceDocument(filename=filename)
    if not isinstance(data, dict):
        raise RepresentationError(f"{filename}: representation root must be a mapping")

    tokens = data.get("tokens") or []
    if not isinstance(tokens, list):
        raise RepresentationError(f"{filename}: 'tokens' must be a list")

    ast = data.get("ast")
    return SourceDocument(
        filename=str(data.get("filename") or filename),
        tokens=tuple(decode_token(row) for row in tokens),
        ast=decode_node(ast) if ast is not None else None,
    )


def loads_document(text: str, filename: str = "<memory>") -> SourceDocument:
    try:
        data = YAML(typ="safe").load(text)
    except YAMLError as e:
        raise RepresentationError(f"{filename}: unreadable representation: {e}")
    return decode_document(data, filename)


def load_document(path: Union[str, Path]) -> SourceDocument:
    source = Path(path)
    try:
        # BOM-aware
        text = source.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise RepresentationError(f"Unable to read {source}: {e}")
    return loads_document(text, filename=str(source))


def is_representation_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in REPRESENTATION_SUFFIXES


def discover(path: Union[str, Path]) -> List[Path]:
    """A file stands for itself; a directory yields its own representation files (non-recursive)."""
    target = Path(path)
    if target.is_dir():
        return sorted(p for p in target.iterdir() if is_representation_file(p))
    return [target]
