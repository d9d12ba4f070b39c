"""Constants for the directory-backed vault."""

import re

# Folders never scanned for images or documents
SKIP_DIRS = frozenset({".obsidian", ".trash", ".git"})

TRASH_DIR = ".trash"

DOCUMENT_EXTENSIONS = frozenset({"md", "canvas"})

# Name fragment marking drawing files (Drawing.excalidraw.md, Drawing.excalidraw)
DRAWING_MARKER = ".excalidraw"

# [[target]] and ![[target]]; group 2 stops before alias, subpath or size
WIKI_TARGET_PATTERN = re.compile(r"(!?\[\[)([^\]|#\n]+)")

# [text](target) and ![alt](target)
MARKDOWN_TARGET_PATTERN = re.compile(r"(!?\[(?:\\.|[^\\\]\n])*\]\()([^)\s]+)")

# Plain wiki links, used for the embedded-files section of drawings
PLAIN_WIKILINK_PATTERN = re.compile(r"(?<!!)\[\[([^\]|\n]+)(?:\|[^\]\n]*)?\]\]")
