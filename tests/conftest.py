from pathlib import Path
from typing import Dict, List, Optional

import pytest

from podinstaller import Config
from podinstaller.details.file_accessor import FileAccessor
from podinstaller.details.library import Library, TargetDefinition
from podinstaller.details.platform import Platform
from podinstaller.details.sandbox import Sandbox
from podinstaller.details.specification import Specification


def write_file(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def sandbox(tmp_path: Path) -> Sandbox:
    sandbox = Sandbox(tmp_path / "Pods")
    sandbox.root.mkdir(parents=True)
    return sandbox


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def make_library(sandbox: Sandbox):
    def factory(
        specs: List[Specification],
        platform: Optional[Platform] = None,
        name: str = "default",
        inhibit_all_warnings: bool = False,
        build_configurations: Optional[Dict[str, str]] = None,
    ) -> Library:
        platform = platform or Platform("ios", "5.0")
        return Library(
            target_definition=TargetDefinition(name, inhibit_all_warnings),
            platform=platform,
            file_accessors=[
                FileAccessor(sandbox.pod_dir(spec.root_name), spec.consumer(platform.name))
                for spec in specs
            ],
            support_files_root=sandbox.root,
            user_build_configurations=build_configurations,
        )

    return factory
