from typing import Any, Dict, List, Optional

from podinstaller.details.as_iterator import str_iter
from podinstaller.details.platform import PLATFORM_NAMES

# Attributes that accumulate: the platform specific value extends the shared one
LIST_ATTRIBUTES = (
    "compiler_flags",
    "frameworks",
    "weak_frameworks",
    "libraries",
    "source_files",
    "exclude_files",
    "resources",
)

# Attributes where the platform specific value replaces the shared one
SCALAR_ATTRIBUTES = (
    "requires_arc",
    "prefix_header_contents",
    "prefix_header_file",
    "xcconfig",
)


class Specification:
    def __init__(
        self,
        *,
        name: str,
        version: str,
        platforms: Optional[Dict[str, Optional[str]]] = None,
        license: Optional[Any] = None,
        authors: Optional[Any] = None,
        summary: str = "",
        homepage: Optional[str] = None,
        **attributes,
    ):
        self.name = name
        self.version = version
        self.platforms = dict(platforms) if platforms is not None else None
        self.license = license
        self.authors = authors
        self.summary = summary
        self.homepage = homepage
        self.platform_attributes: Dict[str, Dict[str, Any]] = {
            platform: attributes.pop(platform, None) or {} for platform in PLATFORM_NAMES
        }
        unknown = set(attributes) - set(LIST_ATTRIBUTES) - set(SCALAR_ATTRIBUTES)
        if unknown:
            raise ValueError(f"spec {name} has unknown attributes {sorted(unknown)}")
        self.attributes = attributes

    @property
    def root_name(self) -> str:
        return self.name.split("/")[0]

    def deployment_target(self, platform_name: str) -> Optional[str]:
        if not self.platforms:
            return None
        return self.platforms.get(platform_name)

    def supported_on(self, platform_name: str) -> bool:
        return self.platforms is None or platform_name in self.platforms

    def consumer(self, platform_name: str) -> "Consumer":
        return Consumer(self, platform_name)

    @property
    def license_type(self) -> Optional[str]:
        if isinstance(self.license, dict):
            return self.license.get("type")
        return self.license

    @property
    def license_text(self) -> Optional[str]:
        if isinstance(self.license, dict):
            return self.license.get("text")
        return None

    @property
    def license_file(self) -> Optional[str]:
        if isinstance(self.license, dict):
            return self.license.get("file")
        return None

    def __repr__(self) -> str:
        return f"Specification({self.name!r}, {self.version!r})"


class Consumer:
    """Platform specific view over the attributes of a specification."""

    def __init__(self, spec: Specification, platform_name: str):
        if platform_name not in PLATFORM_NAMES:
            raise ValueError(f"unsupported platform {platform_name}")
        self.spec = spec
        self.platform_name = platform_name

    def _list(self, name: str) -> List[str]:
        shared = self.spec.attributes.get(name)
        specific = self.spec.platform_attributes[self.platform_name].get(name)
        return [*str_iter(shared), *str_iter(specific)]

    def _scalar(self, name: str, default=None):
        platform_values = self.spec.platform_attributes[self.platform_name]
        if name in platform_values:
            return platform_values[name]
        return self.spec.attributes.get(name, default)

    @property
    def compiler_flags(self) -> List[str]:
        return self._list("compiler_flags")

    @property
    def frameworks(self) -> List[str]:
        return self._list("frameworks")

    @property
    def weak_frameworks(self) -> List[str]:
        return self._list("weak_frameworks")

    @property
    def libraries(self) -> List[str]:
        return self._list("libraries")

    @property
    def source_files(self) -> List[str]:
        return self._list("source_files")

    @property
    def exclude_files(self) -> List[str]:
        return self._list("exclude_files")

    @property
    def resources(self) -> List[str]:
        return self._list("resources")

    @property
    def requires_arc(self) -> bool:
        return bool(self._scalar("requires_arc", False))

    @property
    def prefix_header_contents(self) -> Optional[str]:
        return self._scalar("prefix_header_contents")

    @property
    def prefix_header_file(self) -> Optional[str]:
        return self._scalar("prefix_header_file")

    @property
    def xcconfig(self) -> Dict[str, str]:
        return dict(self._scalar("xcconfig") or {})

    def __repr__(self) -> str:
        return f"Consumer({self.spec.name!r}, {self.platform_name!r})"
