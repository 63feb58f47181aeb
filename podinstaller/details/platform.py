from typing import Dict, Optional, Union

from packaging.version import Version

from podinstaller.errors import ConfigurationConflict


PLATFORM_NAMES: Dict[str, str] = {
    "ios": "iOS",
    "osx": "OS X",
}

DEFAULT_DEPLOYMENT_TARGETS: Dict[str, Version] = {
    "ios": Version("4.3"),
    "osx": Version("10.6"),
}

# iOS releases before 4.3 still ran on armv6 devices
LEGACY_IOS_ARCHS_BEFORE = Version("4.3")


class Platform:
    def __init__(self, name: str, deployment_target: Optional[Union[str, Version]] = None):
        if name not in PLATFORM_NAMES:
            raise ConfigurationConflict(f"unsupported platform {name}")
        self.name = name
        if deployment_target is None:
            self.deployment_target = DEFAULT_DEPLOYMENT_TARGETS[name]
        else:
            self.deployment_target = Version(str(deployment_target))

    def requires_legacy_ios_archs(self) -> bool:
        return self.name == "ios" and self.deployment_target < LEGACY_IOS_ARCHS_BEFORE

    def __eq__(self, other) -> bool:
        if not isinstance(other, Platform):
            return NotImplemented
        return (self.name, self.deployment_target) == (other.name, other.deployment_target)

    def __hash__(self) -> int:
        return hash((self.name, self.deployment_target))

    def __str__(self) -> str:
        return f"{PLATFORM_NAMES[self.name]} {self.deployment_target}"

    def __repr__(self) -> str:
        return f"Platform({self.name!r}, {str(self.deployment_target)!r})"
