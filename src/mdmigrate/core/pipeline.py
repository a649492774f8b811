"""Pipeline step functions: read sources and migrate them into slug directories"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from mdmigrate.config import Settings
from mdmigrate.core.discover import discover_files
from mdmigrate.core.frontmatter import ensure_front_matter
from mdmigrate.core.infer import Clock, infer_metadata, utc_now
from mdmigrate.core.models import MigrationResult, SourceDocument


def _timestamp(value: Optional[float]) -> Optional[datetime]:
    """Convert an st_* time to aware UTC; 0 and missing values mean unavailable."""
    if not value:
        return None
    return datetime.fromtimestamp(value, timezone.utc)


def read_source(path: Path, root: Path) -> SourceDocument:
    """Read a markdown file and its filesystem timestamps."""
    st = path.stat()
    return SourceDocument(
        path=path.absolute(),
        relative=path.absolute().relative_to(root.absolute()),
        raw=path.read_text(encoding='utf-8'),
        created=_timestamp(getattr(st, 'st_birthtime', None)),
        modified=_timestamp(st.st_mtime),
    )


def discover_sources(settings: Settings) -> list[Path]:
    """Return all markdown files under settings.source_dir; raise if the root is missing."""
    root = Path(settings.source_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Source folder not found: {root.resolve()}")
    return discover_files(root)


def migrate_file(
    path: Path,
    settings: Settings,
    clock: Clock = utc_now,
    dry_run: bool = False,
    ) -> MigrationResult:
    """Infer metadata for one file, normalize its front matter and write <dest>/<slug>/<index>."""
    doc = read_source(path, Path(settings.source_dir))
    meta = infer_metadata(doc, clock, settings.description_length)
    content = ensure_front_matter(doc.raw, meta)

    dest_dir = Path(settings.dest_dir) / meta.slug
    destination = dest_dir / settings.index_name
    if not dry_run:
        dest_dir.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding='utf-8')
    return MigrationResult(source=doc.relative, destination=destination, slug=meta.slug, written=not dry_run)


def iter_migrate(
    settings: Settings,
    files: list[Path],
    clock: Clock = utc_now,
    dry_run: bool = False,
    ) -> Iterator[MigrationResult]:
    """Migrate files in order, yielding each result as soon as it is written.

    The first failure raises RuntimeError and stops the run; files already written stay.
    Results whose slug was already used earlier in the run carry the earlier source in
    `overwrote`.
    """
    seen: dict[str, Path] = {}
    for p in files:
        try:
            result = migrate_file(p, settings, clock, dry_run)
        except Exception as e:
            raise RuntimeError(f"Failed to migrate {p}: {e}") from e
        result.overwrote = seen.get(result.slug)
        seen[result.slug] = result.source
        yield result


def run_migrate(
    settings: Settings,
    clock: Clock = utc_now,
    dry_run: bool = False,
    ) -> list[MigrationResult]:
    """Discover and migrate every source file. Returns one result per file."""
    return list(iter_migrate(settings, discover_sources(settings), clock, dry_run))
