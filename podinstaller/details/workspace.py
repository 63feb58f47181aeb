from importlib.machinery import SourceFileLoader
from importlib.util import spec_from_loader, module_from_spec
from pathlib import Path
from typing import Dict, Iterator, List

from podinstaller.config import Config
from podinstaller.details.context import InstallContext
from podinstaller.details.file_accessor import FileAccessor
from podinstaller.details.library import Library, TargetDefinition
from podinstaller.details.platform import Platform
from podinstaller.details.sandbox import Sandbox


def load_user_module(ctx: InstallContext):
    module_name = ".".join(["podinstaller", "workspace", ctx.MODULENAME])
    module_path = ctx.root.joinpath(ctx.FILENAME)
    if not module_path.is_file():
        raise RuntimeError(f"no {ctx.FILENAME} found in {ctx.root}")
    spec = spec_from_loader(
        module_name, SourceFileLoader(module_name, str(module_path))
    )
    if not spec or not spec.loader:
        raise RuntimeError(f"failed to load module spec {module_path}")
    install_module = module_from_spec(spec)
    setattr(install_module, "CTX", ctx)
    spec.loader.exec_module(install_module)


class Workspace:
    def __init__(self, workspace_root: Path = Path(".")):
        self.root = Path(workspace_root).resolve()
        ctx = InstallContext(self.root)
        load_user_module(ctx)
        self.configs: Dict[str, Config] = ctx.configs
        self.specs = ctx.specs
        self.library_declarations = ctx.libraries

    def sandbox(self, config: Config) -> Sandbox:
        return Sandbox(self.root / config.sandbox_root)

    def library(self, name: str, sandbox: Sandbox) -> Library:
        if name not in self.library_declarations:
            raise RuntimeError(f"unable to locate library {name}")
        declaration = self.library_declarations[name]
        platform = Platform(declaration["platform"], declaration["deployment_target"])
        file_accessors = []
        for spec_name in declaration["specs"]:
            spec = self.specs[spec_name]
            if not spec.supported_on(platform.name):
                raise ValueError(f"spec {spec.name} does not support platform {platform.name}")
            file_accessors.append(
                FileAccessor(sandbox.pod_dir(spec.root_name), spec.consumer(platform.name))
            )
        return Library(
            target_definition=TargetDefinition(
                name=name, inhibit_all_warnings=declaration["inhibit_all_warnings"]
            ),
            platform=platform,
            file_accessors=file_accessors,
            support_files_root=sandbox.root,
            user_build_configurations=declaration["build_configurations"],
        )

    def libraries(self, sandbox: Sandbox, names: List[str] = []) -> Iterator[Library]:
        for name in names or self.library_declarations:
            yield self.library(name, sandbox)
