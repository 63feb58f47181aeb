"""
Xcode project file formatter.

Turns an XcodeProject into the text of a .pbxproj file. Formatting is driven
by the types of the values found on the model dataclasses, so new object
types only need a dataclass in model.py to be written out.
"""

import dataclasses
import enum
from typing import Dict, List, Set, Union, Type

from podinstaller.project.model import (
    XcodeObject,
    XcodeProject,
    Reference,
    XcodeID,
)


ObjectProperties = Dict[str, Union[str, int, list, dict, XcodeObject, Reference, enum.Enum, Type]]
FormattableValue = Union[None, XcodeObject, Reference, dict, list, enum.Enum, int, float, bool, str, XcodeID, Type]
ObjectsDict = Dict[str, ObjectProperties]


def format_xcode_project(project: XcodeProject) -> str:
    """
    Convert an XcodeProject object to its string representation.

    Args:
        project: The XcodeProject object to format.

    Returns:
        A string containing the formatted Xcode project file content.
    """
    result = "// !$*UTF8*$!\n"

    project_dict: Dict[str, Union[int, dict, str, Reference]] = {
        "archiveVersion": 1,
        "classes": {},
        "objectVersion": 46,
        "objects": collect_objects(project),
        "rootObject": project.project.reference(),
    }

    result += format_value(project_dict, 0)
    result += "\n"
    return result


def serialized_fields(obj: XcodeObject) -> List[dataclasses.Field]:
    return [
        f
        for f in dataclasses.fields(obj)
        if f.name != "id" and not f.metadata.get("internal", False)
    ]


def collect_objects(project: XcodeProject) -> ObjectsDict:
    """
    Collect all objects of the project into a dictionary keyed by object ID.
    """
    objects: ObjectsDict = {}
    visited: Set[int] = set()

    for field in dataclasses.fields(project):
        field_value = getattr(project, field.name)
        if isinstance(field_value, XcodeObject):
            collect_object(field_value, objects, visited)
        elif isinstance(field_value, list):
            for item in field_value:
                if isinstance(item, XcodeObject):
                    collect_object(item, objects, visited)

    return objects


def collect_object(value: XcodeObject, objects: ObjectsDict, visited: Set[int]) -> None:
    # The same configuration object can be listed by a target and the project
    if id(value) in visited:
        return
    visited.add(id(value))

    props: ObjectProperties = {"isa": value.__class__}
    for field in serialized_fields(value):
        field_value = getattr(value, field.name)
        if field_value is None:
            continue
        props[field.name] = field_value
    objects[value.id] = props


def quote(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def format_value(value: FormattableValue, indent_level: int) -> str:
    """
    Format a value based on its type.

    Args:
        value: The value to format.
        indent_level: The current indentation level.

    Returns:
        A string representing the formatted value.
    """
    if value is None:
        return "(null)"

    # Object identifiers are never quoted
    elif isinstance(value, XcodeID):
        return value

    # isa values: class name without quotes
    elif isinstance(value, type):
        return value.__name__

    elif isinstance(value, XcodeObject):
        return format_value(value.reference(), indent_level)

    elif isinstance(value, Reference):
        if value.comment:
            return f"{value.id} /* {value.comment} */"
        return value.id

    elif isinstance(value, enum.Enum):
        return format_enum(value)

    elif isinstance(value, list):
        return format_list(value, indent_level)

    elif isinstance(value, dict):
        return format_dict(value, indent_level)

    elif isinstance(value, (int, float, bool)):
        # Xcode represents booleans as 0/1
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)

    elif isinstance(value, str):
        return quote(value)

    else:
        raise TypeError(f"Unsupported type: {type(value).__name__} for value: {value}")


def format_dict(value_dict: Dict[str, FormattableValue], indent_level: int) -> str:
    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    # Empty dictionaries should have braces on separate lines for Xcode compatibility
    if not value_dict:
        return "{\n" + indent + "}"

    result = "{\n"

    # isa first, the remaining keys sorted for stable output
    keys = sorted(value_dict.keys(), key=lambda k: (k != "isa", k))
    for key in keys:
        value = value_dict[key]
        if value is None:
            continue
        formatted_value = format_value(value, indent_level + 1)
        result += f"{inner_indent}{format_key(key)} = {formatted_value};\n"

    result += f"{indent}}}"
    return result


def format_key(key: str) -> str:
    if isinstance(key, XcodeID) or key.replace("_", "").replace(".", "").isalnum():
        return key
    return quote(key)


def format_list(value_list: List[FormattableValue], indent_level: int) -> str:
    if not value_list:
        return "(\n" + "\t" * indent_level + ")"

    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    result = "(\n"
    for item in value_list:
        result += f"{inner_indent}{format_value(item, indent_level + 1)},\n"
    result += f"{indent})"
    return result


def format_enum(value_enum: enum.Enum) -> str:
    if isinstance(value_enum.value, str):
        return quote(value_enum.value)
    return str(value_enum.value)
