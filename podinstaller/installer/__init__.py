from podinstaller import ui
from podinstaller.config import Config
from podinstaller.details.library import Library
from podinstaller.details.sandbox import Sandbox
from podinstaller.installer.plan import InstallationPlan
from podinstaller.installer.source_files import SourceFileRegistrar
from podinstaller.installer.support_artifacts import SupportArtifactPipeline
from podinstaller.installer.support_group import SupportGroupRegistry
from podinstaller.installer.target_builder import TargetBuilder


class TargetInstaller:
    """
    Creates the static library target of a library in the Pods project and
    generates the support files the target and the client project need.
    """

    def __init__(self, sandbox: Sandbox, library: Library, config: Config):
        self.sandbox = sandbox
        self.library = library
        self.config = config
        self.registry = SupportGroupRegistry(sandbox)
        self.pipeline = SupportArtifactPipeline(self.registry)

    def install(self) -> InstallationPlan:
        library = self.library
        plan = InstallationPlan(sandbox=self.sandbox, library=library, config=self.config)
        with ui.message(f"- Installing target `{library.name}` {library.platform}"):
            plan.target = TargetBuilder(self.sandbox.project).create(library)
            plan.support_group = self.registry.open(library)
            SourceFileRegistrar(self.sandbox.project).attach(library, plan.target)
            self.pipeline.run(plan)
        return plan
