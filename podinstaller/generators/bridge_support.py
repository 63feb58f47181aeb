# BridgeSupport metadata, needed by environments that bind to Objective-C at
# runtime. The metadata is produced by an external tool.

import subprocess

from pathlib import Path
from typing import List

from podinstaller import ui
from podinstaller.generators.base import Generator

SEARCH_PATHS = ["-I '/'"]


class BridgeSupport(Generator):
    def __init__(self, headers: List[Path], tool: str = "gen_bridge_metadata"):
        self.headers = headers
        self.tool = tool

    def command(self, path: Path) -> List[str]:
        return [
            self.tool,
            "-c",
            " ".join(SEARCH_PATHS),
            "-o",
            str(path),
            *[str(h) for h in self.headers],
        ]

    def generate(self) -> str:
        raise RuntimeError(f"{type(self).__name__} writes its output with save_as()")

    def save_as(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        ui.puts(f"$ {' '.join(self.command(path))}")
        subprocess.check_call(self.command(path))
