"""Data models for the discover, infer and migrate pipeline"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class InferredMetadata(BaseModel):
    """Metadata derived from a post's file name, location, content and timestamps."""
    title:       str
    date:        datetime           # always timezone-aware UTC
    description: str
    tags:        list[str] = []
    slug:        str


@dataclass
class SourceDocument:
    """A markdown file under the source root; read once, never mutated."""
    path:        Path
    relative:    Path               # path relative to the source root
    raw:         str
    created:     Optional[datetime] # None where the platform has no birth time
    modified:    Optional[datetime]

    @property
    def base_name(self) -> str:
        return self.path.stem

    @property
    def relative_dir(self) -> Path:
        return self.relative.parent


@dataclass
class MigrationResult:
    """Outcome of migrating one document."""
    source:      Path               # relative to the source root
    destination: Path
    slug:        str
    written:     bool               # False for dry runs
    overwrote:   Optional[Path] = None  # earlier source in this run with the same slug
