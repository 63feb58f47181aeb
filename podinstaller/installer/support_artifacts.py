# Generation of the support files of a library target.
#
# The pipeline is an ordered list of steps. Each step writes its files in
# produce() and wires them into the target in mutate(); between the two the
# pipeline registers every produced file in the support group. Steps run in
# list order and later steps may read what earlier steps stored on the plan.

import subprocess

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from podinstaller import ui
from podinstaller.errors import ArtifactGenerationFailure
from podinstaller.generators import (
    Acknowledgements,
    BridgeSupport,
    CopyResourcesScript,
    DummySource,
    PrefixHeader,
    TargetHeader,
    XCConfig,
)
from podinstaller.installer.plan import InstallationPlan
from podinstaller.installer.support_group import SupportGroupRegistry
from podinstaller.project.model import PBXFileReference

# Errors of a generator that abort the installation as an artifact failure
GENERATION_ERRORS = (OSError, subprocess.CalledProcessError, ValueError)


@dataclass
class Artifact:
    path: Path
    file_ref: PBXFileReference
    relative_path: str


class SupportArtifactStep:
    name = "support file"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        raise RuntimeError(f"{type(self)} must implement produce()")

    def mutate(self, plan: InstallationPlan, artifacts: List[Artifact]) -> None:
        pass


class XCConfigStep(SupportArtifactStep):
    """
    Reads: library, config. Writes: library.xcconfig and, on every target
    configuration, the base configuration reference and the Pods project
    settings.
    """

    name = "xcconfig"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        library = plan.library
        path = library.xcconfig_path
        with ui.message(f"- Generating xcconfig file at {ui.path(path)}"):
            generator = XCConfig(library.spec_consumers, library.relative_pods_root)
            generator.set_arc_compatibility_flag = plan.config.set_arc_compatibility_flag
            generator.save_as(path)
            library.xcconfig = generator
        return [path]

    def mutate(self, plan: InstallationPlan, artifacts: List[Artifact]) -> None:
        (xcconfig,) = artifacts
        for config in plan.target.build_configurations:
            config.baseConfigurationReference = xcconfig.file_ref.reference()
            config.buildSettings.update(XCConfig.pods_project_settings())


class TargetHeaderStep(SupportArtifactStep):
    """Reads: library specs. Writes nothing on the target."""

    name = "target header"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        path = plan.library.target_header_path
        with ui.message(f"- Generating target header at {ui.path(path)}"):
            TargetHeader(plan.library.specs).save_as(path)
        return [path]


class PrefixHeaderStep(SupportArtifactStep):
    """Reads: library. Writes: GCC_PREFIX_HEADER on every target configuration."""

    name = "prefix header"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        library = plan.library
        path = library.prefix_header_path
        with ui.message(f"- Generating prefix header at {ui.path(path)}"):
            generator = PrefixHeader(library.file_accessors, library.platform)
            generator.imports.append(library.target_header_path.name)
            generator.save_as(path)
        return [path]

    def mutate(self, plan: InstallationPlan, artifacts: List[Artifact]) -> None:
        (prefix_header,) = artifacts
        for config in plan.target.build_configurations:
            config.buildSettings["GCC_PREFIX_HEADER"] = prefix_header.relative_path


class BridgeSupportStep(SupportArtifactStep):
    """
    Reads: config, target headers. Writes: plan.bridge_support_file.

    Must run after the prefix header step and before the copy resources
    script step, which ships the metadata as a resource.
    """

    name = "bridge support"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        if not plan.config.generate_bridge_support:
            return []
        path = plan.library.bridge_support_path
        with ui.message(f"- Generating BridgeSupport metadata at {ui.path(path)}"):
            headers = [plan.sandbox.root / ref.path for ref in plan.target.headers]
            BridgeSupport(headers, plan.config.bridge_support_tool).save_as(path)
        return [path]

    def mutate(self, plan: InstallationPlan, artifacts: List[Artifact]) -> None:
        for artifact in artifacts:
            plan.bridge_support_file = artifact.relative_path


class CopyResourcesScriptStep(SupportArtifactStep):
    """Reads: library resources, plan.bridge_support_file. Writes nothing on the target."""

    name = "copy resources script"

    @staticmethod
    def resources(plan: InstallationPlan) -> List[str]:
        resources = [
            plan.project.relativize(resource)
            for file_accessor in plan.library.file_accessors
            for resource in file_accessor.resources
        ]
        if plan.bridge_support_file:
            resources.append(plan.bridge_support_file)
        return resources

    def produce(self, plan: InstallationPlan) -> List[Path]:
        path = plan.library.copy_resources_script_path
        with ui.message(f"- Generating copy resources script at {ui.path(path)}"):
            CopyResourcesScript(self.resources(plan)).save_as(path)
        return [path]


class AcknowledgementsStep(SupportArtifactStep):
    """Reads: library file accessors. Writes nothing on the target."""

    name = "acknowledgements"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        basepath = plan.library.acknowledgements_basepath
        paths = []
        for generator_class in Acknowledgements.generators():
            path = generator_class.path_from_basepath(basepath)
            with ui.message(f"- Generating acknowledgements at {ui.path(path)}"):
                generator_class(plan.library.file_accessors).save_as(path)
            paths.append(path)
        return paths


class DummySourceStep(SupportArtifactStep):
    """Reads: library label. Writes: the target's compiled sources."""

    name = "dummy source"

    def produce(self, plan: InstallationPlan) -> List[Path]:
        path = plan.library.dummy_source_path
        with ui.message(f"- Generating dummy source file at {ui.path(path)}"):
            DummySource(plan.library.label).save_as(path)
        return [path]

    def mutate(self, plan: InstallationPlan, artifacts: List[Artifact]) -> None:
        (dummy_source,) = artifacts
        plan.target.add_file_reference(dummy_source.file_ref)


def default_steps() -> List[SupportArtifactStep]:
    return [
        XCConfigStep(),
        TargetHeaderStep(),
        PrefixHeaderStep(),
        BridgeSupportStep(),
        CopyResourcesScriptStep(),
        AcknowledgementsStep(),
        DummySourceStep(),
    ]


class SupportArtifactPipeline:
    def __init__(self, registry: SupportGroupRegistry, steps: Optional[Sequence[SupportArtifactStep]] = None):
        self.registry = registry
        self.steps = list(steps) if steps is not None else default_steps()

    def run(self, plan: InstallationPlan) -> None:
        assert plan.target is not None and plan.support_group is not None
        for step in self.steps:
            self.run_step(step, plan)

    def run_step(self, step: SupportArtifactStep, plan: InstallationPlan) -> List[Artifact]:
        try:
            paths = step.produce(plan)
        except GENERATION_ERRORS as err:
            raise ArtifactGenerationFailure(step.name, f"failed to generate: {err}") from err
        artifacts = []
        for path in paths:
            relative_path = plan.sandbox.relativize(path).as_posix()
            if relative_path in plan.registered:
                raise ArtifactGenerationFailure(step.name, f"{relative_path} has already been registered")
            file_ref = self.registry.register(plan.support_group, path)
            plan.registered.append(relative_path)
            artifacts.append(Artifact(path=Path(path), file_ref=file_ref, relative_path=relative_path))
        step.mutate(plan, artifacts)
        return artifacts
