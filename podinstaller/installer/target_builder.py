from copy import deepcopy

from podinstaller import ui
from podinstaller.details.library import Library
from podinstaller.errors import ConfigurationConflict
from podinstaller.project import NativeTarget, Project
from podinstaller.project.constants import DEFAULT_CONFIGURATIONS
from podinstaller.project.model import BuildSettings, XCBuildConfiguration, YesNo

LEGACY_IOS_ARCHS = "armv6 armv7"


def base_settings_overlay(library: Library) -> BuildSettings:
    settings: BuildSettings = {}
    if library.platform.requires_legacy_ios_archs():
        settings["ARCHS"] = LEGACY_IOS_ARCHS
    if library.target_definition.inhibit_all_warnings:
        settings["GCC_WARN_INHIBIT_ALL_WARNINGS"] = YesNo.YES
    return settings


def base_configuration_name(library: Library, config_name: str, base_type: str) -> str:
    name = str(base_type).capitalize()
    if name not in DEFAULT_CONFIGURATIONS:
        raise ConfigurationConflict(
            f"build configuration '{config_name}' of {library.label} has unknown type "
            f"'{base_type}', expected one of {', '.join(t.lower() for t in DEFAULT_CONFIGURATIONS)}"
        )
    return name


class TargetBuilder:
    """
    Adds the static library target of a library to the project with the
    build configurations the client project expects.
    """

    def __init__(self, project: Project):
        self.project = project

    def create(self, library: Library) -> NativeTarget:
        if library.target is not None:
            raise ConfigurationConflict(f"library {library.label} has already been installed")
        # Validate the types of the configurations to create before the project
        # is touched, a new target only has the default configurations
        custom_configurations = {
            config_name: base_configuration_name(library, config_name, base_type)
            for config_name, base_type in library.user_build_configurations.items()
            if config_name not in DEFAULT_CONFIGURATIONS
        }

        target = self.project.new_target(
            library.label,
            library.platform.name,
            str(library.platform.deployment_target),
        )

        overlay = base_settings_overlay(library)
        for config_name in DEFAULT_CONFIGURATIONS:
            target.build_settings(config_name).update(overlay)

        for config_name, base_name in custom_configurations.items():
            ui.puts(f"- Adding build configuration `{config_name}` based on `{base_name}`")
            target.add_build_configuration(
                XCBuildConfiguration(
                    name=config_name,
                    buildSettings=deepcopy(target.build_settings(base_name)),
                    owner=target.name,
                )
            )
            self._add_project_configuration(config_name, base_name)

        library.target = target
        return target

    # The project gets its own copy of its base type configuration, once per name
    def _add_project_configuration(self, config_name: str, base_name: str) -> None:
        if self.project.build_configuration(config_name) is not None:
            return
        base = self.project.build_configuration(base_name)
        self.project.add_build_configuration(
            XCBuildConfiguration(
                name=config_name,
                buildSettings=deepcopy(base.buildSettings) if base else {},
                owner="PROJECT",
            )
        )
