from dataclasses import dataclass, field
from typing import List, Optional

from podinstaller.config import Config
from podinstaller.details.library import Library
from podinstaller.details.sandbox import Sandbox
from podinstaller.project import NativeTarget
from podinstaller.project.model import PBXGroup


# State shared by the installation steps of one library. Steps receive the plan
# by reference and document which fields they read and write.
@dataclass
class InstallationPlan:
    sandbox: Sandbox
    library: Library
    config: Config
    target: Optional[NativeTarget] = None
    support_group: Optional[PBXGroup] = None
    # Sandbox relative path of the BridgeSupport metadata, set only when generated
    bridge_support_file: Optional[str] = None
    # Sandbox relative paths registered in the support group, in order
    registered: List[str] = field(default_factory=list)

    @property
    def project(self):
        return self.sandbox.project
