# Mutable Xcode project document.
#
# Project wraps an XcodeProject model and offers the editing primitives the
# installer needs: groups and file references, static library targets with
# their build phases and configurations, and system framework links. Every
# object created here is tracked by ID so references can be resolved back to
# objects.

import os
from copy import deepcopy
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from podinstaller.errors import ConfigurationConflict
from podinstaller.project.constants import (
    COMMON_TARGET_SETTINGS,
    CONFIGURATION_TARGET_SETTINGS,
    DEFAULT_CONFIGURATIONS,
    DEPLOYMENT_TARGET_SETTINGS,
    HEADER_EXTENSIONS,
    PLATFORM_TARGET_SETTINGS,
    PROJECT_SETTINGS,
    SYSTEM_FRAMEWORKS_DIR,
)
from podinstaller.project.formatter import format_xcode_project
from podinstaller.project.model import (
    BuildPhase,
    BuildSettings,
    FileType,
    PBXBuildFile,
    PBXFileReference,
    PBXFrameworksBuildPhase,
    PBXGroup,
    PBXHeadersBuildPhase,
    PBXNativeTarget,
    PBXProject,
    PBXSourcesBuildPhase,
    Reference,
    SourceTree,
    XCBuildConfiguration,
    XCConfigurationList,
    XcodeID,
    XcodeObject,
    XcodeProject,
    generate_id,
)
from podinstaller.project.validator import validate_references, validate_unique_ids


class NativeTarget:
    def __init__(
        self,
        project: "Project",
        target: PBXNativeTarget,
        configuration_list: XCConfigurationList,
        platform_name: str,
        deployment_target: str,
    ):
        self.project = project
        self.pbx_target = target
        self.configuration_list = configuration_list
        self.platform_name = platform_name
        self.deployment_target = deployment_target

    @property
    def name(self) -> str:
        return self.pbx_target.name

    # Build configurations...

    @property
    def build_configurations(self) -> List[XCBuildConfiguration]:
        return [self.project.resolve(ref) for ref in self.configuration_list.buildConfigurations]

    def build_configuration(self, name: str) -> Optional[XCBuildConfiguration]:
        for config in self.build_configurations:
            if config.name == name:
                return config
        return None

    def build_settings(self, name: str) -> BuildSettings:
        config = self.build_configuration(name)
        if config is None:
            raise KeyError(f"target {self.name} has no build configuration {name}")
        return config.buildSettings

    def add_build_configuration(self, config: XCBuildConfiguration) -> None:
        self.project.track(config)
        self.configuration_list.buildConfigurations.append(config.reference())

    # Build phases...

    def _phase(self, phase_type: type) -> BuildPhase:
        for ref in self.pbx_target.buildPhases:
            phase = self.project.resolve(ref)
            if isinstance(phase, phase_type):
                return phase
        raise KeyError(f"target {self.name} has no {phase_type.__name__}")

    @property
    def source_build_phase(self) -> PBXSourcesBuildPhase:
        return self._phase(PBXSourcesBuildPhase)

    @property
    def headers_build_phase(self) -> PBXHeadersBuildPhase:
        return self._phase(PBXHeadersBuildPhase)

    @property
    def frameworks_build_phase(self) -> PBXFrameworksBuildPhase:
        return self._phase(PBXFrameworksBuildPhase)

    def _phase_file_references(self, phase: BuildPhase) -> List[PBXFileReference]:
        build_files = [self.project.resolve(ref) for ref in phase.files]
        return [self.project.resolve(bf.fileRef) for bf in build_files]

    @property
    def source_files(self) -> List[PBXFileReference]:
        return self._phase_file_references(self.source_build_phase)

    @property
    def headers(self) -> List[PBXFileReference]:
        return self._phase_file_references(self.headers_build_phase)

    @property
    def frameworks(self) -> List[PBXFileReference]:
        return self._phase_file_references(self.frameworks_build_phase)

    def _add_build_file(
        self,
        phase: BuildPhase,
        file_ref: PBXFileReference,
        settings: Optional[Dict[str, str]] = None,
    ) -> PBXBuildFile:
        build_file = self.project.track(
            PBXBuildFile(
                fileRef=file_ref.reference(),
                settings=settings,
                owner=f"{self.name}:{phase.display_name()}",
            )
        )
        phase.files.append(build_file.reference())
        return build_file

    def add_file_reference(
        self, file_ref: PBXFileReference, compiler_flags: str = ""
    ) -> PBXBuildFile:
        # Headers are not compiled, they never carry compiler flags
        if os.path.splitext(file_ref.path)[1].lower() in HEADER_EXTENSIONS:
            return self._add_build_file(self.headers_build_phase, file_ref)
        settings = {"COMPILER_FLAGS": compiler_flags} if compiler_flags else None
        return self._add_build_file(self.source_build_phase, file_ref, settings)

    def add_file_references(
        self, file_refs: Iterable[PBXFileReference], compiler_flags: str = ""
    ) -> List[PBXBuildFile]:
        return [self.add_file_reference(ref, compiler_flags) for ref in file_refs]

    def link_framework(self, file_ref: PBXFileReference) -> Optional[PBXBuildFile]:
        phase = self.frameworks_build_phase
        if any(ref.id == file_ref.id for ref in self.frameworks):
            return None
        return self._add_build_file(phase, file_ref)


class Project:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.root = self.path.parent
        self._objects: Dict[XcodeID, XcodeObject] = {}
        self._file_refs_by_path: Dict[str, PBXFileReference] = {}
        self.targets: Dict[str, NativeTarget] = {}

        main_group = PBXGroup(children=[], owner="main")
        configs = [
            XCBuildConfiguration(
                name=name, buildSettings=deepcopy(PROJECT_SETTINGS[name]), owner="PROJECT"
            )
            for name in DEFAULT_CONFIGURATIONS
        ]
        config_list = XCConfigurationList(
            buildConfigurations=[c.reference() for c in configs], owner="PROJECT"
        )
        self.model = XcodeProject(
            project=PBXProject(
                name=self.path.stem,
                buildConfigurationList=config_list.reference(),
                mainGroup=main_group.reference(),
                productRefGroup=Reference(main_group.id),  # replaced below
                targets=[],
            )
        )
        self._objects[self.model.project.id] = self.model.project
        self.track(main_group)
        for config in configs:
            self.track(config)
        self.track(config_list)
        self.configuration_list = config_list
        self.main_group = main_group

        self.pods_group = self.new_group("Pods")
        self.support_files_group = self.new_group("Targets Support Files")
        self.frameworks_group = self.new_group("Frameworks")
        self.products_group = self.new_group("Products")
        self.model.project.productRefGroup = self.products_group.reference()

    # Object tracking...

    def track(self, obj: XcodeObject) -> XcodeObject:
        if obj.id in self._objects:
            if self._objects[obj.id] is obj:
                return obj
            # Same key, different object: derive the next free identifier
            counter = 1
            while obj.id in self._objects:
                obj.id = generate_id(f"{obj.key()}#{counter}")
                counter += 1
        self._objects[obj.id] = obj
        collections = {
            PBXFileReference: self.model.fileReferences,
            PBXGroup: self.model.groups,
            PBXBuildFile: self.model.buildFiles,
            PBXNativeTarget: self.model.nativeTargets,
            XCBuildConfiguration: self.model.buildConfigurations,
            XCConfigurationList: self.model.configurationLists,
        }
        for obj_type, collection in collections.items():
            if isinstance(obj, obj_type):
                collection.append(obj)
                break
        else:
            if isinstance(obj, BuildPhase):
                self.model.buildPhases.append(obj)
        return obj

    def resolve(self, ref: Reference) -> XcodeObject:
        return self._objects[ref.id]

    @property
    def objects(self) -> List[XcodeObject]:
        return list(self._objects.values())

    # Groups and files...

    def relativize(self, path: Union[str, Path]) -> str:
        return Path(os.path.relpath(str(path), str(self.root))).as_posix()

    def new_group(self, name: str, parent: Optional[PBXGroup] = None) -> PBXGroup:
        parent = parent or self.main_group
        group = self.track(PBXGroup(children=[], name=name, owner=parent.id))
        parent.children.append(group.reference())
        return group

    def new_file(
        self,
        group: PBXGroup,
        relative_path: Union[str, Path],
        source_tree: SourceTree = SourceTree.SOURCE_ROOT,
    ) -> PBXFileReference:
        path = Path(relative_path).as_posix()
        file_ref = self.track(
            PBXFileReference(
                path=path,
                sourceTree=source_tree,
                lastKnownFileType=FileType.from_extension(os.path.splitext(path)[1]),
                name=os.path.basename(path),
                includeInIndex=1,
                owner=group.id,
            )
        )
        group.children.append(file_ref.reference())
        return file_ref

    def file_reference(self, path: Union[str, Path]) -> PBXFileReference:
        relative_path = self.relativize(path)
        if relative_path not in self._file_refs_by_path:
            self._file_refs_by_path[relative_path] = self.new_file(self.pods_group, relative_path)
        return self._file_refs_by_path[relative_path]

    def file_references(self, group: PBXGroup) -> List[PBXFileReference]:
        return [
            obj
            for obj in (self.resolve(ref) for ref in group.children)
            if isinstance(obj, PBXFileReference)
        ]

    # Build configurations...

    @property
    def build_configurations(self) -> List[XCBuildConfiguration]:
        return [self.resolve(ref) for ref in self.configuration_list.buildConfigurations]

    def build_configuration(self, name: str) -> Optional[XCBuildConfiguration]:
        for config in self.build_configurations:
            if config.name == name:
                return config
        return None

    def add_build_configuration(self, config: XCBuildConfiguration) -> None:
        self.track(config)
        self.configuration_list.buildConfigurations.append(config.reference())

    # Targets...

    def new_target(self, name: str, platform_name: str, deployment_target: str) -> NativeTarget:
        if name in self.targets:
            raise ConfigurationConflict(f"target with name='{name}' already exists in project")
        if platform_name not in PLATFORM_TARGET_SETTINGS:
            raise ConfigurationConflict(f"unsupported platform {platform_name}")

        product_ref = self.new_file(
            self.products_group, f"lib{name}.a", SourceTree.BUILT_PRODUCTS_DIR
        )
        product_ref.includeInIndex = 0

        configs = []
        for config_name in DEFAULT_CONFIGURATIONS:
            settings: BuildSettings = {}
            settings.update(deepcopy(COMMON_TARGET_SETTINGS))
            settings.update(deepcopy(PLATFORM_TARGET_SETTINGS[platform_name]))
            settings.update(deepcopy(CONFIGURATION_TARGET_SETTINGS[config_name]))
            settings[DEPLOYMENT_TARGET_SETTINGS[platform_name]] = deployment_target
            configs.append(
                self.track(XCBuildConfiguration(name=config_name, buildSettings=settings, owner=name))
            )
        config_list = self.track(
            XCConfigurationList(
                buildConfigurations=[c.reference() for c in configs], owner=name
            )
        )

        phases = [
            self.track(PBXHeadersBuildPhase(files=[], owner=name)),
            self.track(PBXSourcesBuildPhase(files=[], owner=name)),
            self.track(PBXFrameworksBuildPhase(files=[], owner=name)),
        ]
        pbx_target = self.track(
            PBXNativeTarget(
                name=name,
                buildConfigurationList=config_list.reference(),
                buildPhases=[p.reference() for p in phases],
                productName=name,
                productReference=product_ref.reference(),
            )
        )
        self.model.project.targets.append(pbx_target.reference())

        target = NativeTarget(self, pbx_target, config_list, platform_name, deployment_target)
        self.targets[name] = target
        return target

    def add_system_framework(self, name: str, target: NativeTarget) -> PBXFileReference:
        path = f"{SYSTEM_FRAMEWORKS_DIR}/{name}.framework"
        existing = [
            ref
            for ref in self.file_references(self.frameworks_group)
            if ref.path == path
        ]
        if existing:
            file_ref = existing[0]
        else:
            file_ref = self.new_file(self.frameworks_group, path, SourceTree.SDKROOT)
        target.link_framework(file_ref)
        return file_ref

    # Persistence...

    def save(self) -> Path:
        if errors := validate_references(self.model):
            raise ValueError(f"Invalid project: {errors}")
        if errors := validate_unique_ids(self.model):
            raise ValueError(f"Invalid project: {errors}")
        self.path.mkdir(parents=True, exist_ok=True)
        project_file = self.path / "project.pbxproj"
        with open(project_file, "w") as f:
            f.write(format_xcode_project(self.model))
        return project_file
