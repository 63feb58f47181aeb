from pathlib import Path
from typing import Dict, List, Optional

from podinstaller.details.glob_filter import glob_with_exclusions
from podinstaller.details.specification import Consumer, Specification
from podinstaller.project.constants import HEADER_EXTENSIONS


LICENSE_PRIORITY: tuple[str, ...] = (
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
    "LICENSE.rst",
    "COPYING",
    "COPYING.txt",
    "COPYING.md",
    "COPYING.rst",
)


LICENSE_PRIORITY_MAP: Dict[str, int] = {
    name.lower(): index for index, name in enumerate(LICENSE_PRIORITY)
}


def _license_sort_key(path: Path) -> tuple[int, str]:
    name_lower = path.name.lower()
    rank = LICENSE_PRIORITY_MAP.get(name_lower, len(LICENSE_PRIORITY))
    return rank, name_lower


def _collect_license_files(root: Path) -> List[Path]:
    if not root.is_dir():
        return []
    candidates = [
        child
        for child in root.iterdir()
        if child.is_file() and child.name.lower().startswith(("license", "copying"))
    ]
    candidates.sort(key=_license_sort_key)
    return candidates


def read_text_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


class FileAccessor:
    """
    Resolves the file patterns of one specification against the directory the
    pod was downloaded to.
    """

    def __init__(self, root: Path, spec_consumer: Consumer):
        self.root = Path(root)
        self.spec_consumer = spec_consumer

    @property
    def spec(self) -> Specification:
        return self.spec_consumer.spec

    def _glob(self, patterns: List[str]) -> List[Path]:
        excludes = [f"!{pattern}" for pattern in self.spec_consumer.exclude_files]
        return glob_with_exclusions(self.root, [*patterns, *excludes])

    @property
    def source_files(self) -> List[Path]:
        return [p for p in self._glob(self.spec_consumer.source_files) if p.is_file()]

    @property
    def headers(self) -> List[Path]:
        return [p for p in self.source_files if p.suffix.lower() in HEADER_EXTENSIONS]

    # Resources may be directories, e.g. bundles
    @property
    def resources(self) -> List[Path]:
        return self._glob(self.spec_consumer.resources)

    @property
    def prefix_header(self) -> Optional[Path]:
        if self.spec_consumer.prefix_header_file:
            return self.root / self.spec_consumer.prefix_header_file
        return None

    @property
    def license(self) -> Optional[Path]:
        if self.spec.license_file:
            return self.root / self.spec.license_file
        candidates = _collect_license_files(self.root)
        return candidates[0] if candidates else None

    def license_text(self) -> Optional[str]:
        if self.spec.license_text:
            return self.spec.license_text
        path = self.license
        if path is not None and path.is_file():
            return read_text_file(path)
        return None

    def __repr__(self) -> str:
        return f"FileAccessor({self.spec.name!r}, {self.spec_consumer.platform_name!r})"
