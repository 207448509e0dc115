"""Load raw content documents from JSON or YAML files.

The loader returns plain mappings in the external content schema; turning
them into a render tree is the job of
:func:`termdocs.pipeline.build_document_ast`.
"""

from __future__ import annotations

import logging
import typing as typ

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ContentLoadError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _decode(path: Path, text: str) -> object:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return msgspec_json.decode(text)
    if suffix in YAML_SUFFIXES:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        return loader.load(text)
    msg = f"Unsupported content format '{path.suffix}' for '{path}'."
    raise ContentLoadError(msg)


def load_document(path: Path) -> tuple[str, dict[str, typ.Any]]:
    """Read one content document.

    Parameters
    ----------
    path : Path
        A ``.json``, ``.yaml`` or ``.yml`` file holding a single document.

    Returns
    -------
    tuple[str, dict[str, Any]]
        The document slug (its ``slug`` key, or the file stem) and the raw
        mapping.

    Raises
    ------
    ContentLoadError
        If the file is missing, cannot be decoded, or is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Content file '{path}' could not be read: {exc}"
        raise ContentLoadError(msg) from exc
    try:
        loaded = _decode(path, text)
    except (msgspec.DecodeError, YAMLError) as exc:
        msg = f"Content file '{path}' is not valid: {exc}"
        raise ContentLoadError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Content file '{path}' must contain a mapping at the top level."
        raise ContentLoadError(msg)
    slug = loaded.get("slug")
    if not isinstance(slug, str) or not slug.strip():
        slug = path.stem
    logger.debug("loaded document %r from %s", slug, path)
    return slug, loaded


def dump_document(path: Path, document: typ.Mapping[str, typ.Any]) -> None:
    """Write ``document`` as indented JSON."""
    payload = msgspec_json.format(msgspec_json.encode(document), indent=2)
    path.write_bytes(payload + b"\n")


__all__ = ["dump_document", "load_document"]
