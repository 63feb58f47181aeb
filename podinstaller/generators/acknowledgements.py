# Acknowledgement documents listing the license of every installed pod.

import plistlib

from pathlib import Path
from typing import List, Optional, Type

from podinstaller.details.file_accessor import FileAccessor
from podinstaller.generators.base import Generator


HEADER_TITLE = "Acknowledgements"
HEADER_TEXT = "This application makes use of the following third party libraries:"
FOOTER_TEXT = "Generated by the pods installer"


class Acknowledgements(Generator):
    EXTENSION = ""

    def __init__(self, file_accessors: List[FileAccessor]):
        self.file_accessors = file_accessors

    @classmethod
    def generators(cls) -> List[Type["Acknowledgements"]]:
        return [Markdown, Plist]

    @classmethod
    def path_from_basepath(cls, basepath: Path) -> Path:
        basepath = Path(basepath)
        return basepath.with_name(basepath.name + cls.EXTENSION)

    # (pod name, license type, license text) of every root spec
    def licenses(self) -> List[tuple[str, Optional[str], Optional[str]]]:
        seen = set()
        result = []
        for accessor in self.file_accessors:
            name = accessor.spec.root_name
            if name in seen:
                continue
            seen.add(name)
            result.append((name, accessor.spec.license_type, accessor.license_text()))
        return result


class Markdown(Acknowledgements):
    EXTENSION = ".markdown"

    def generate(self) -> str:
        result = f"# {HEADER_TITLE}\n{HEADER_TEXT}\n"
        for name, _, text in self.licenses():
            result += f"\n## {name}\n\n"
            if text:
                result += text.rstrip() + "\n"
        result += f"{FOOTER_TEXT}\n"
        return result


class Plist(Acknowledgements):
    EXTENSION = ".plist"

    def specifiers(self) -> List[dict]:
        specifiers = [
            {"Title": HEADER_TITLE, "FooterText": HEADER_TEXT, "Type": "PSGroupSpecifier"}
        ]
        for name, license_type, text in self.licenses():
            specifier = {"Title": name, "FooterText": text or "", "Type": "PSGroupSpecifier"}
            if license_type:
                specifier["License"] = license_type
            specifiers.append(specifier)
        specifiers.append({"Title": "", "FooterText": FOOTER_TEXT, "Type": "PSGroupSpecifier"})
        return specifiers

    def generate(self) -> str:
        document = {
            "Title": HEADER_TITLE,
            "StringsTable": HEADER_TITLE,
            "PreferenceSpecifiers": self.specifiers(),
        }
        return plistlib.dumps(document).decode("utf-8")
