from pathlib import Path
from typing import Union

from podinstaller.details.library import Library
from podinstaller.details.sandbox import Sandbox
from podinstaller.project.model import PBXFileReference, PBXGroup


class SupportGroupRegistry:
    def __init__(self, sandbox: Sandbox):
        self.sandbox = sandbox

    @property
    def project(self):
        return self.sandbox.project

    def open(self, library: Library) -> PBXGroup:
        name = library.target_definition.label
        return self.project.new_group(name, self.project.support_files_group)

    # Every call adds a new reference, callers register each file once
    def register(self, group: PBXGroup, path: Union[str, Path]) -> PBXFileReference:
        relative_path = self.sandbox.relativize(path)
        return self.project.new_file(group, relative_path)
