from pathlib import Path
from typing import Union

from podinstaller.project import Project


# The directory all pods are installed into, it also holds the Pods project
# and the support files generated for every library.
class Sandbox:
    PROJECT_NAME = "Pods.xcodeproj"

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()
        self.project = Project(self.root / self.PROJECT_NAME)

    def pod_dir(self, name: str) -> Path:
        return self.root / name

    def relativize(self, path: Union[str, Path]) -> Path:
        return Path(path).relative_to(self.root)
