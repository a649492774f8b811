"""Metadata inference from file names, locations, content and timestamps"""

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from mdmigrate.core.models import InferredMetadata, SourceDocument
from mdmigrate.core.utils.slug import slugify


Clock = Callable[[], datetime]

DATE_PREFIX_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})[-_]')
MARKDOWN_PUNCT_RE = re.compile(r'[`*_>#-]')
WORD_START_RE = re.compile(r'\b\w')
ELLIPSIS = '...'
PUBLISH_HOUR = 9


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def date_from_name(name: str) -> Optional[datetime]:
    """Return 09:00 UTC on the YYYY-MM-DD prefix day, or None without a valid prefix."""
    m = DATE_PREFIX_RE.match(name)
    if not m:
        return None
    year, month, day = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, PUBLISH_HOUR, tzinfo=timezone.utc)
    except ValueError:
        return None     # e.g. 2023-13-40: not a calendar day


def strip_date_prefix(name: str) -> str:
    return DATE_PREFIX_RE.sub('', name, count=1)


def title_case(text: str) -> str:
    """Upper-case the first letter of every word; no small-word or acronym rules."""
    return WORD_START_RE.sub(lambda m: m.group().upper(), text)


def title_from_name(name: str) -> str:
    return title_case(re.sub(r'[-_]', ' ', strip_date_prefix(name)))


def describe(content: str, limit: int = 160) -> str:
    """First line that is not blank, a heading or a '---' marker, de-marked and truncated.

    Front-matter lines are not skipped as such; only their '---' markers are. Lines
    longer than limit keep limit - 3 characters followed by '...'.
    """
    for line in re.split(r'\r?\n', content):
        line = line.strip()
        if not line or line.startswith('#') or line.startswith('---'):
            continue
        first = MARKDOWN_PUNCT_RE.sub('', line).strip()
        if len(first) > limit:
            return first[:limit - len(ELLIPSIS)] + ELLIPSIS
        return first
    return ''


def tags_from_dir(relative_dir: Path) -> list[str]:
    """Directory segments between the source root and the file, '-'/'_' read as spaces."""
    return [re.sub(r'[-_]', ' ', part) for part in relative_dir.parts if part != '.']


def slug_from_name(name: str) -> str:
    return slugify(strip_date_prefix(name) or name)


def resolve_date(
    name: str,
    created: Optional[datetime],
    modified: Optional[datetime],
    clock: Clock = utc_now,
    ) -> datetime:
    """Filename prefix, else creation time, else modification time, else clock()."""
    for candidate in (date_from_name(name), created, modified):
        if candidate is not None:
            return candidate.astimezone(timezone.utc)
    return clock().astimezone(timezone.utc)


def format_date(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2023-05-01T09:00:00.000Z."""
    value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f"{value.microsecond // 1000:03d}Z"


def infer_metadata(
    doc: SourceDocument,
    clock: Clock = utc_now,
    description_length: int = 160,
    ) -> InferredMetadata:
    """Derive title, date, description, tags and slug for a source document."""
    name = doc.base_name
    return InferredMetadata(
        title=title_from_name(name),
        date=resolve_date(name, doc.created, doc.modified, clock),
        description=describe(doc.raw, description_length),
        tags=tags_from_dir(doc.relative_dir),
        slug=slug_from_name(name),
    )
