"""Slug generation for destination directory names"""

import re


_DISALLOWED_RE = re.compile(r'[^a-z0-9\s-]')
_SEPARATOR_RE = re.compile(r'[\s-]+')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated slug.

    Characters outside [a-z0-9], whitespace and '-' are dropped; whitespace and
    hyphen runs collapse to a single hyphen. Idempotent.
    """
    text = _DISALLOWED_RE.sub('', text.lower()).strip()
    return _SEPARATOR_RE.sub('-', text)
