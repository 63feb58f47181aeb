from podinstaller import Config, ui
from podinstaller.details.workspace import Workspace
from podinstaller.installer import TargetInstaller


def install_main(
    workspace: Workspace,
    config: Config,
    libraries: list[str],
):
    sandbox = workspace.sandbox(config)
    for library in workspace.libraries(sandbox, libraries):
        TargetInstaller(sandbox, library, config).install()
    with ui.message(f"- Writing Xcode project at {ui.path(sandbox.project.path)}"):
        sandbox.project.save()
