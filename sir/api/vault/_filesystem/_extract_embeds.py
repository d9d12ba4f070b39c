"""Embed extraction for markdown notes, canvases and drawings."""

import json
import logging
from urllib.parse import unquote

from ...link.parse_bare_embed_links import parse_bare_embed_links
from ...link.parse_inline_links import parse_inline_links
from ..VaultFile import VaultFile
from ._constants import DRAWING_MARKER, PLAIN_WIKILINK_PATTERN
from ._is_external import _is_external

logger = logging.getLogger(__name__)


def _extract_embeds(document: VaultFile, text: str) -> list[str]:
    """List the embed targets of one document, without duplicates, in order of appearance.

    Canvases contribute the ``file`` of every file node. Notes contribute
    ``![[...]]`` targets and local ``![...](...)`` paths (decoded). Drawings also
    contribute the plain ``[[...]]`` links of their embedded-files section.
    """
    if document.extension.lower() == "canvas":
        try:
            data = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError as exc:
            logger.warning(f"Skipping unreadable canvas {document.path}: {exc}")
            return []
        nodes = data.get("nodes", []) if isinstance(data, dict) else []
        targets = [
            node["file"]
            for node in nodes
            if isinstance(node, dict) and node.get("type") == "file" and isinstance(node.get("file"), str)
        ]
        return list(dict.fromkeys(targets))

    targets = [link.file_path for link in parse_bare_embed_links(text)]
    targets.extend(unquote(link.file_path) for link in parse_inline_links(text) if not _is_external(link.file_path))
    if DRAWING_MARKER in document.name.lower():
        targets.extend(match.group(1).strip() for match in PLAIN_WIKILINK_PATTERN.finditer(text))
    return list(dict.fromkeys(targets))
