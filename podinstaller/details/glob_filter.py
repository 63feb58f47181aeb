import fnmatch
from pathlib import Path
from typing import List, Sequence


def split_patterns(patterns: Sequence[str]) -> tuple[list[str], list[str]]:
    includes = [p for p in patterns if not p.startswith("!")]
    excludes = [p[1:] for p in patterns if p.startswith("!")]
    return includes, excludes


# Glob relative to root, "!pattern" entries remove matches. Results keep the
# order of the include patterns, sorted within each pattern, without duplicates.
def glob_with_exclusions(root: Path, patterns: Sequence[str]) -> List[Path]:
    includes, excludes = split_patterns(patterns)
    if not includes or not root.is_dir():
        return []
    matched: List[Path] = []
    for pattern in includes:
        for src in sorted(root.glob(pattern)):
            if src not in matched:
                matched.append(src)
    if not excludes:
        return matched
    # Exclusions match against paths relative to root
    return [
        src
        for src in matched
        if not any(
            fnmatch.fnmatch(src.relative_to(root).as_posix(), exclude)
            for exclude in excludes
        )
    ]
