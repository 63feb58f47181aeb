from typing import List, Any, Set
from podinstaller.project.model import (
    XcodeProject,
    Reference,
    XcodeObject,
    XcodeID,
    SourceTree,
    FileType,
    ProductType,
    YesNo,
)
from dataclasses import fields, is_dataclass
from collections import Counter


def collect_ids(obj: Any, all_ids: Set[str]) -> None:
    if isinstance(obj, XcodeObject):
        all_ids.add(obj.id)
    elif isinstance(obj, list):
        for item in obj:
            collect_ids(item, all_ids)
    elif is_dataclass(obj) and not isinstance(obj, Reference):
        for field in fields(obj):
            collect_ids(getattr(obj, field.name), all_ids)


def validate_references(project: XcodeProject) -> List[str]:
    errors = []
    all_ids: Set[str] = set()
    collect_ids(project, all_ids)

    def check_references(obj: Any, context: str):
        if isinstance(obj, Reference):
            if obj.id not in all_ids:
                errors.append(f"Invalid reference in {context}: {obj.id}")
        elif isinstance(obj, list):
            for index, item in enumerate(obj):
                check_references(item, f"{context}[{index}]")
        elif isinstance(obj, dict):
            for key, value in obj.items():
                check_references(value, f"{context}.{key}")
        elif is_dataclass(obj):
            for field in fields(obj):
                check_references(getattr(obj, field.name), f"{context}.{field.name}")
        elif isinstance(
            obj,
            (
                str,
                int,
                float,
                XcodeID,
                SourceTree,
                FileType,
                ProductType,
                YesNo,
                type(None),
            ),
        ):
            pass  # These are valid types and do not need further checking
        else:
            errors.append(f"Unknown type in {context}: {type(obj).__name__}")

    check_references(project, "project")

    return errors


# Distinct objects must never share an identifier, the file format is keyed by it
def validate_unique_ids(project: XcodeProject) -> List[str]:
    seen = {}
    for field in fields(project):
        value = getattr(project, field.name)
        for obj in value if isinstance(value, list) else [value]:
            seen.setdefault(id(obj), obj)
    counts = Counter(obj.id for obj in seen.values())
    return [f"Duplicate object id: {object_id}" for object_id, n in counts.items() if n > 1]
