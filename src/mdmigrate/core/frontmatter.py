"""Front-matter detection and additive normalization

Edits are textual: an existing block is never parsed into a mapping, so keys that are
already present keep their exact lines, order and formatting. Only missing keys are
appended.
"""

import json
import re

from mdmigrate.core.infer import format_date
from mdmigrate.core.models import InferredMetadata


MARKER = '---'
FRONTMATTER_RE = re.compile(r'^---\n(.*?)\n---\n?', re.DOTALL)

# (key, value) lines appended to a synthesized block after the inferred fields
DEFAULT_FIELDS: list[tuple[str, str]] = [
    ('draft', 'false'),
    ('categories', '[]'),
    ('series', '[]'),
    ('contributors', '[]'),
    ('images', '[]'),
    ('canonicalURL', '""'),
    ('toc', 'true'),
]

# keys back-filled into an existing block, in append order
REQUIRED_KEYS = ('title', 'date', 'description', 'tags', 'contributors')


def quote(value: str) -> str:
    """Double-quoted scalar; JSON string escaping is also valid YAML."""
    return json.dumps(value, ensure_ascii=False)


def inline_list(values: list[str]) -> str:
    """Single-line list, e.g. ["a","b"]."""
    return json.dumps(values, ensure_ascii=False, separators=(',', ':'))


def _inferred_lines(fallback: InferredMetadata) -> dict[str, str]:
    return {
        'title':        f"title: {quote(fallback.title)}",
        'date':         f"date: {format_date(fallback.date)}",
        'description':  f"description: {quote(fallback.description)}",
        'tags':         f"tags: {inline_list(fallback.tags)}",
        'contributors': "contributors: []",
    }


def has_front_matter(content: str) -> bool:
    return FRONTMATTER_RE.match(content) is not None


def has_key(block: str, key: str) -> bool:
    """True if a line in block starts with `key:`, leading whitespace allowed."""
    return re.search(rf'^\s*{re.escape(key)}:', block, re.MULTILINE) is not None


def synthesize(content: str, fallback: InferredMetadata) -> str:
    """Prepend a complete default block to content that has none."""
    lines = _inferred_lines(fallback)
    header = [MARKER, lines['title'], lines['date'], lines['description'], lines['tags']]
    header += [f"{key}: {value}" for key, value in DEFAULT_FIELDS]
    header += [MARKER, '']
    return '\n'.join(header) + content.lstrip()


def backfill(content: str, fallback: InferredMetadata) -> str:
    """Append missing required keys to the existing block; the rest is kept verbatim."""
    m = FRONTMATTER_RE.match(content)
    block = m.group(1)
    lines = _inferred_lines(fallback)
    additions = [lines[key] for key in REQUIRED_KEYS if not has_key(block, key)]
    if additions:
        block = block.strip() + '\n' + '\n'.join(additions)
    return f"{MARKER}\n{block}\n{MARKER}\n" + content[m.end():]


def ensure_front_matter(content: str, fallback: InferredMetadata) -> str:
    """Return content guaranteed to begin with a well-formed front-matter block."""
    if has_front_matter(content):
        return backfill(content, fallback)
    return synthesize(content, fallback)
