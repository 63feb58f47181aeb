# Build settings file shared by the library target and the client project.

from typing import Dict, Iterable, List

from podinstaller.details.specification import Consumer
from podinstaller.generators.base import Generator


# Settings the Pods project itself needs, they take precedence over anything
# the generated file defines because they are set on the target directly.
PODS_PROJECT_SETTINGS: Dict[str, str] = {
    "PODS_ROOT": "${SRCROOT}",
    "PODS_HEADERS_SEARCH_PATHS": "${PODS_BUILD_HEADERS_SEARCH_PATHS}",
}


def quote(paths: Iterable[str]) -> str:
    return " ".join(f'"{p}"' for p in paths)


class XCConfig(Generator):
    def __init__(self, spec_consumers: List[Consumer], relative_pods_root: str):
        self.spec_consumers = spec_consumers
        self.relative_pods_root = relative_pods_root
        self.set_arc_compatibility_flag = False
        self.settings: Dict[str, str] = {}

    @staticmethod
    def pods_project_settings() -> Dict[str, str]:
        return dict(PODS_PROJECT_SETTINGS)

    def _search_paths(self, folder: str) -> List[str]:
        names = sorted({c.spec.root_name for c in self.spec_consumers})
        return [f"${{PODS_ROOT}}/{folder}", *(f"${{PODS_ROOT}}/{folder}/{n}" for n in names)]

    # Values of keys already present are appended, not replaced
    def merge(self, settings: Dict[str, str]) -> None:
        for key, value in settings.items():
            value = str(value).strip()
            if not value:
                continue
            if self.settings.get(key):
                self.settings[key] = f"{self.settings[key]} {value}"
            else:
                self.settings[key] = value

    def compute(self) -> Dict[str, str]:
        ldflags = ["-ObjC"]
        if self.set_arc_compatibility_flag and any(c.requires_arc for c in self.spec_consumers):
            ldflags.append("-fobjc-arc")
        for consumer in self.spec_consumers:
            flags = [f"-l{lib}" for lib in consumer.libraries]
            flags += [f"-framework {fw}" for fw in consumer.frameworks]
            flags += [f"-weak_framework {fw}" for fw in consumer.weak_frameworks]
            ldflags += [f for f in flags if f not in ldflags]
        self.settings = {
            "ALWAYS_SEARCH_USER_PATHS": "YES",
            "OTHER_LDFLAGS": " ".join(ldflags),
            "HEADER_SEARCH_PATHS": "${PODS_HEADERS_SEARCH_PATHS}",
            "PODS_ROOT": self.relative_pods_root,
            "PODS_HEADERS_SEARCH_PATHS": "${PODS_PUBLIC_HEADERS_SEARCH_PATHS}",
            "PODS_BUILD_HEADERS_SEARCH_PATHS": quote(self._search_paths("BuildHeaders")),
            "PODS_PUBLIC_HEADERS_SEARCH_PATHS": quote(self._search_paths("Headers")),
            "GCC_PREPROCESSOR_DEFINITIONS": "$(inherited) PODS=1",
        }
        for consumer in self.spec_consumers:
            self.merge(consumer.xcconfig)
        return self.settings

    def generate(self) -> str:
        settings = self.compute()
        return "".join(f"{key} = {settings[key]}\n" for key in sorted(settings))
