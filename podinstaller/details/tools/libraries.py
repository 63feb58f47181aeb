from podinstaller import Config
from podinstaller.details.workspace import Workspace


def libraries_main(
    workspace: Workspace,
    config: Config,
    libraries: list[str],
):
    sandbox = workspace.sandbox(config)
    for library in workspace.libraries(sandbox, libraries):
        print(f"{library.label} ({library.platform})")
        for spec in library.specs:
            print(f"  {spec.name} {spec.version}")
