from pathlib import Path
from typing import Any, Dict, List, Optional

from podinstaller.config import Config
from podinstaller.details.specification import Specification


class InstallContext:
    FILENAME = "INSTALL.podinstaller"
    MODULENAME = "install"

    def __init__(self, root: Path):
        self.root = root
        self.configs: Dict[str, Config] = {}
        self.specs: Dict[str, Specification] = {}
        self.libraries: Dict[str, Dict[str, Any]] = {}

    def add_config(self, name: str, **kwargs):
        if name in self.configs:
            raise RuntimeError(f"config {name} has already been registered")
        self.configs[name] = Config(**kwargs)

    def add_spec(self, name: str, version: str, **attributes) -> Specification:
        if name in self.specs:
            raise ValueError(f"spec with name='{name}' already exists")
        self.specs[name] = Specification(name=name, version=version, **attributes)
        return self.specs[name]

    def add_library(
        self,
        name: str = "default",
        *,
        platform: str,
        specs: List[str],
        deployment_target: Optional[str] = None,
        inhibit_all_warnings: bool = False,
        build_configurations: Optional[Dict[str, str]] = None,
    ):
        if name in self.libraries:
            raise ValueError(f"library with name='{name}' already exists")
        self.libraries[name] = {
            "platform": platform,
            "specs": list(specs),
            "deployment_target": deployment_target,
            "inhibit_all_warnings": inhibit_all_warnings,
            "build_configurations": dict(build_configurations or {}),
        }
