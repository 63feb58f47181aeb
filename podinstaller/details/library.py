from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

from podinstaller.details.file_accessor import FileAccessor
from podinstaller.details.platform import Platform
from podinstaller.details.specification import Consumer, Specification
from podinstaller.errors import ConfigurationConflict

if TYPE_CHECKING:
    from podinstaller.generators.xcconfig import XCConfig
    from podinstaller.project import NativeTarget


class TargetDefinition:
    def __init__(self, name: str = "default", inhibit_all_warnings: bool = False):
        self.name = name
        self.inhibit_all_warnings = inhibit_all_warnings

    @property
    def label(self) -> str:
        if self.name == "default":
            return "Pods"
        return f"Pods-{self.name}"


class Library:
    """
    The pods of one target definition resolved for one platform. Each library
    is installed as one static library target of the Pods project.
    """

    def __init__(
        self,
        *,
        target_definition: TargetDefinition,
        platform: Platform,
        file_accessors: List[FileAccessor],
        support_files_root: Path,
        user_build_configurations: Optional[Dict[str, str]] = None,
        relative_pods_root: str = "${SRCROOT}/Pods",
    ):
        self.target_definition = target_definition
        self.platform = platform
        self.file_accessors = file_accessors
        self.support_files_root = Path(support_files_root)
        self.user_build_configurations = dict(user_build_configurations or {})
        self.relative_pods_root = relative_pods_root
        self.xcconfig: Optional["XCConfig"] = None
        self._target: Optional["NativeTarget"] = None

    @property
    def label(self) -> str:
        return self.target_definition.label

    @property
    def name(self) -> str:
        return self.label

    @property
    def target(self) -> Optional["NativeTarget"]:
        return self._target

    @target.setter
    def target(self, value: "NativeTarget") -> None:
        if self._target is not None:
            raise ConfigurationConflict(f"library {self.label} has already been installed")
        self._target = value

    @property
    def specs(self) -> List[Specification]:
        return [accessor.spec for accessor in self.file_accessors]

    @property
    def spec_consumers(self) -> List[Consumer]:
        return [accessor.spec_consumer for accessor in self.file_accessors]

    # Support files...

    def _support_file(self, suffix: str) -> Path:
        return self.support_files_root / f"{self.label}{suffix}"

    @property
    def xcconfig_path(self) -> Path:
        return self._support_file(".xcconfig")

    @property
    def target_header_path(self) -> Path:
        return self._support_file("-environment.h")

    @property
    def prefix_header_path(self) -> Path:
        return self._support_file("-prefix.pch")

    @property
    def bridge_support_path(self) -> Path:
        return self._support_file(".bridgesupport")

    @property
    def copy_resources_script_path(self) -> Path:
        return self._support_file("-resources.sh")

    @property
    def acknowledgements_basepath(self) -> Path:
        return self._support_file("-acknowledgements")

    @property
    def dummy_source_path(self) -> Path:
        return self._support_file("-dummy.m")

    def __repr__(self) -> str:
        return f"Library({self.label!r}, {self.platform!r})"
