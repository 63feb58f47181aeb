# Xcode project file model.
#
# Dataclasses for the subset of the .pbxproj object graph the installer
# produces: file references and groups, the build phases of a static library
# target, build configurations and their lists, and the root project object.
# Objects point at each other through Reference values holding the target ID.

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union, TypeVar, Generic
from abc import ABC, abstractmethod

import uuid


# Type definition for Xcode object identifiers
class XcodeID(str):
    pass


def generate_id(key: str) -> XcodeID:
    return XcodeID(uuid.uuid5(uuid.NAMESPACE_X500, key).hex.upper()[:24])


# Fields flagged as internal only disambiguate object keys, the formatter
# never writes them.
def internal(default=None):
    return field(default=default, metadata={"internal": True})


class SourceTree(Enum):
    # GROUP - project-level groups and references inside them
    GROUP = "<group>"
    # SOURCE_ROOT - paths relative to the sandbox root
    SOURCE_ROOT = "SOURCE_ROOT"
    # BUILT_PRODUCTS_DIR - product references only
    BUILT_PRODUCTS_DIR = "BUILT_PRODUCTS_DIR"
    # SDKROOT - system frameworks
    SDKROOT = "SDKROOT"


class FileType(Enum):
    C = "sourcecode.c.c"
    CPP = "sourcecode.cpp.cpp"
    C_HEADER = "sourcecode.c.h"
    CPP_HEADER = "sourcecode.cpp.h"
    SWIFT = "sourcecode.swift"
    OBJC = "sourcecode.c.objc"
    OBJCPP = "sourcecode.cpp.objcpp"
    ASSEMBLY = "sourcecode.asm"
    XIB = "file.xib"
    STORYBOARD = "file.storyboard"
    PLIST = "text.plist.xml"
    XCCONFIG = "text.xcconfig"
    STRINGS = "text.plist.strings"
    SCRIPT = "text.script.sh"
    ASSET_CATALOG = "folder.assetcatalog"
    FRAMEWORK = "wrapper.framework"
    BUNDLE = "wrapper.bundle"
    DYLIB = "compiled.mach-o.dylib"
    PNG = "image.png"
    TEXT = "text"
    ARCHIVE = "archive.ar"

    @staticmethod
    def from_extension(ext: str) -> "FileType":
        if ext.startswith("."):
            ext = ext[1:]

        ext_to_type = {
            "c": FileType.C,
            "cc": FileType.CPP,
            "cpp": FileType.CPP,
            "cxx": FileType.CPP,
            "h": FileType.C_HEADER,
            "pch": FileType.C_HEADER,
            "hpp": FileType.CPP_HEADER,
            "swift": FileType.SWIFT,
            "m": FileType.OBJC,
            "mm": FileType.OBJCPP,
            "s": FileType.ASSEMBLY,
            "xib": FileType.XIB,
            "storyboard": FileType.STORYBOARD,
            "plist": FileType.PLIST,
            "xcconfig": FileType.XCCONFIG,
            "strings": FileType.STRINGS,
            "sh": FileType.SCRIPT,
            "xcassets": FileType.ASSET_CATALOG,
            "framework": FileType.FRAMEWORK,
            "bundle": FileType.BUNDLE,
            "dylib": FileType.DYLIB,
            "png": FileType.PNG,
            "a": FileType.ARCHIVE,
        }

        return ext_to_type.get(ext.lower(), FileType.TEXT)


class ProductType(Enum):
    STATIC_LIBRARY = "com.apple.product-type.library.static"


# Boolean-like values used in build settings
class YesNo(Enum):
    YES = "YES"
    NO = "NO"


SettingValue = Union[YesNo, str, List[str]]
BuildSettings = Dict[str, SettingValue]


ReferenceT = TypeVar("ReferenceT", bound="XcodeObject")


@dataclass
class Reference(Generic[ReferenceT]):
    id: XcodeID
    comment: Optional[str] = None


# Base class for all Xcode objects
@dataclass
class XcodeObject(ABC):
    # ID will be generated in __post_init__
    id: XcodeID = field(init=False)

    def __post_init__(self) -> None:
        self.id = generate_id(self.key())

    @abstractmethod
    def key(self) -> str:
        pass

    def display_name(self) -> Optional[str]:
        return getattr(self, "name", None)

    def reference(self) -> "Reference":
        return Reference(self.id, self.display_name())


@dataclass
class PBXFileReference(XcodeObject):
    path: str
    sourceTree: SourceTree
    lastKnownFileType: Optional[FileType] = None
    name: Optional[str] = None
    includeInIndex: Optional[int] = None
    owner: Optional[str] = internal()

    def key(self) -> str:
        return f"PBXFileReference:{self.owner or 'GLOBAL'}:{self.sourceTree.name}:{self.path}"

    def display_name(self) -> Optional[str]:
        return self.name or self.path.rsplit("/", 1)[-1]


@dataclass
class PBXBuildFile(XcodeObject):
    fileRef: Reference[PBXFileReference]
    settings: Optional[Dict[str, str]] = None
    owner: Optional[str] = internal()

    def key(self) -> str:
        return f"PBXBuildFile:{self.owner or 'GLOBAL'}:{self.fileRef.id}"

    def display_name(self) -> Optional[str]:
        return self.fileRef.comment


@dataclass
class BuildPhase(XcodeObject):
    files: List[Reference[PBXBuildFile]]
    buildActionMask: int = 2147483647
    runOnlyForDeploymentPostprocessing: int = 0
    owner: Optional[str] = internal()

    def key(self) -> str:
        return f"{self.__class__.__name__}:{self.owner or 'GLOBAL'}"


@dataclass
class PBXSourcesBuildPhase(BuildPhase):
    def display_name(self) -> Optional[str]:
        return "Sources"


@dataclass
class PBXHeadersBuildPhase(BuildPhase):
    def display_name(self) -> Optional[str]:
        return "Headers"


@dataclass
class PBXFrameworksBuildPhase(BuildPhase):
    def display_name(self) -> Optional[str]:
        return "Frameworks"


@dataclass
class PBXGroup(XcodeObject):
    children: List[Reference[Union["PBXGroup", PBXFileReference]]]
    sourceTree: SourceTree = SourceTree.GROUP
    name: Optional[str] = None
    path: Optional[str] = None
    owner: Optional[str] = internal()

    def key(self) -> str:
        return f"PBXGroup:{self.owner or 'GLOBAL'}:{self.name}:{self.path}"


@dataclass
class XCBuildConfiguration(XcodeObject):
    name: str
    buildSettings: BuildSettings
    baseConfigurationReference: Optional[Reference[PBXFileReference]] = None
    owner: Optional[str] = internal()  # disambiguate configs across project/targets

    def key(self) -> str:
        return f"XCBuildConfiguration:{self.owner or 'GLOBAL'}:{self.name}"


@dataclass
class XCConfigurationList(XcodeObject):
    buildConfigurations: List[Reference[XCBuildConfiguration]]
    defaultConfigurationIsVisible: int = 0
    defaultConfigurationName: str = "Release"
    owner: Optional[str] = internal()  # disambiguate lists across project/targets

    def key(self) -> str:
        return f"XCConfigurationList:{self.owner or 'GLOBAL'}"

    def display_name(self) -> Optional[str]:
        return f"Build configuration list for {self.owner or 'PBXProject'}"


@dataclass
class PBXNativeTarget(XcodeObject):
    name: str
    buildConfigurationList: Reference[XCConfigurationList]
    buildPhases: List[Reference[BuildPhase]]
    productName: str
    productReference: Reference[PBXFileReference]
    productType: ProductType = ProductType.STATIC_LIBRARY
    buildRules: List[Reference[XcodeObject]] = field(default_factory=list)
    dependencies: List[Reference[XcodeObject]] = field(default_factory=list)

    def key(self) -> str:
        return f"PBXNativeTarget:{self.name}"


@dataclass
class PBXProject(XcodeObject):
    name: str
    buildConfigurationList: Reference[XCConfigurationList]
    mainGroup: Reference[PBXGroup]
    productRefGroup: Reference[PBXGroup]
    targets: List[Reference[PBXNativeTarget]]
    attributes: Dict[str, str] = field(
        default_factory=lambda: {"LastUpgradeCheck": "0450"}
    )
    compatibilityVersion: str = "Xcode 3.2"
    developmentRegion: str = "English"
    hasScannedForEncodings: int = 0
    knownRegions: List[str] = field(default_factory=lambda: ["en"])
    projectDirPath: str = ""
    projectRoot: str = ""

    def key(self) -> str:
        return f"PBXProject:{self.name}"

    def display_name(self) -> Optional[str]:
        return "Project object"


# Complete project representation
@dataclass
class XcodeProject:
    project: PBXProject
    fileReferences: List[PBXFileReference] = field(default_factory=list)
    groups: List[PBXGroup] = field(default_factory=list)
    buildFiles: List[PBXBuildFile] = field(default_factory=list)
    buildPhases: List[BuildPhase] = field(default_factory=list)
    nativeTargets: List[PBXNativeTarget] = field(default_factory=list)
    buildConfigurations: List[XCBuildConfiguration] = field(default_factory=list)
    configurationLists: List[XCConfigurationList] = field(default_factory=list)
