from argparse import ArgumentParser
from contextlib import nullcontext

from podinstaller import ui
from podinstaller.details.tools.install import install_main
from podinstaller.details.tools.libraries import libraries_main
from podinstaller.details.workspace import Workspace


def main(argv=None):
    COMMANDS = {
        "install": install_main,
        "libraries": libraries_main,
    }
    parser = ArgumentParser(prog="podinstaller")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--config", type=str, required=True)
    parser.add_argument("--silent", action="store_true")
    parser.add_argument("libraries", default=[], nargs="*")
    # library names may follow the options
    args = parser.parse_intermixed_args(argv)
    # load the Installfile of the current directory...
    workspace = Workspace()
    if args.config not in workspace.configs:
        parser.error(f"unknown config {args.config}")
    config = workspace.configs[args.config]
    with ui.silent() if args.silent else nullcontext():
        COMMANDS[args.command](
            workspace=workspace,
            config=config,
            libraries=args.libraries,
        )


if __name__ == "__main__":
    main()
