import pytest

from podinstaller.details.platform import Platform
from podinstaller.details.specification import Specification
from podinstaller.errors import ConfigurationConflict
from podinstaller.installer.target_builder import TargetBuilder
from podinstaller.project.model import YesNo


def _spec():
    return Specification(name="JSONKit", version="1.4", source_files=["*.m"])


def test_target_takes_name_platform_and_deployment_target(sandbox, make_library):
    library = make_library([_spec()], platform=Platform("ios", "5.0"))
    target = TargetBuilder(sandbox.project).create(library)

    assert target.name == "Pods"
    assert target.platform_name == "ios"
    assert target.deployment_target == "5.0"
    assert library.target is target
    for name in ("Debug", "Release"):
        settings = target.build_settings(name)
        assert settings["IPHONEOS_DEPLOYMENT_TARGET"] == "5.0"
        assert settings["SDKROOT"] == "iphoneos"


def test_osx_target_settings(sandbox, make_library):
    library = make_library([_spec()], platform=Platform("osx", "10.7"))
    target = TargetBuilder(sandbox.project).create(library)
    assert target.build_settings("Release")["MACOSX_DEPLOYMENT_TARGET"] == "10.7"
    assert target.build_settings("Release")["SDKROOT"] == "macosx"


def test_legacy_ios_archs_are_added_to_default_configurations(sandbox, make_library):
    library = make_library([_spec()], platform=Platform("ios", "4.0"))
    target = TargetBuilder(sandbox.project).create(library)
    assert target.build_settings("Debug")["ARCHS"] == "armv6 armv7"
    assert target.build_settings("Release")["ARCHS"] == "armv6 armv7"


def test_modern_ios_keeps_default_archs(sandbox, make_library):
    library = make_library([_spec()], platform=Platform("ios", "4.3"))
    target = TargetBuilder(sandbox.project).create(library)
    assert "ARCHS" not in target.build_settings("Debug")
    assert "ARCHS" not in target.build_settings("Release")


def test_inhibit_all_warnings_overlay_keeps_inherited_settings(sandbox, make_library):
    library = make_library([_spec()], inhibit_all_warnings=True)
    target = TargetBuilder(sandbox.project).create(library)
    for name in ("Debug", "Release"):
        settings = target.build_settings(name)
        assert settings["GCC_WARN_INHIBIT_ALL_WARNINGS"] == YesNo.YES
        assert settings["SKIP_INSTALL"] == YesNo.YES
        assert settings["PRODUCT_NAME"] == "$(TARGET_NAME)"
    assert target.build_settings("Debug")["GCC_OPTIMIZATION_LEVEL"] == "0"


def test_custom_configurations_copy_their_base_type(sandbox, make_library):
    library = make_library([_spec()], build_configurations={"Beta": "release", "QA": "DEBUG"})
    target = TargetBuilder(sandbox.project).create(library)

    assert [c.name for c in target.build_configurations] == ["Debug", "Release", "Beta", "QA"]
    assert target.build_settings("Beta") == target.build_settings("Release")
    assert target.build_settings("QA") == target.build_settings("Debug")
    # Copies, not shared dictionaries
    target.build_settings("Beta")["ONLY_IN_BETA"] = "1"
    assert "ONLY_IN_BETA" not in target.build_settings("Release")

    project_configs = [c.name for c in sandbox.project.build_configurations]
    assert project_configs == ["Debug", "Release", "Beta", "QA"]


def test_custom_configuration_already_present_is_not_duplicated(sandbox, make_library):
    library = make_library([_spec()], build_configurations={"Debug": "debug"})
    target = TargetBuilder(sandbox.project).create(library)
    assert [c.name for c in target.build_configurations] == ["Debug", "Release"]
    assert [c.name for c in sandbox.project.build_configurations] == ["Debug", "Release"]


def test_custom_configurations_are_added_to_project_once(sandbox, make_library):
    builder = TargetBuilder(sandbox.project)
    builder.create(make_library([_spec()], name="App", build_configurations={"Beta": "release"}))
    builder.create(make_library([_spec()], name="Tests", build_configurations={"Beta": "release"}))
    assert [c.name for c in sandbox.project.build_configurations] == ["Debug", "Release", "Beta"]


def test_unknown_base_type_is_a_configuration_conflict(sandbox, make_library):
    library = make_library([_spec()], build_configurations={"Beta": "profile"})
    with pytest.raises(ConfigurationConflict) as excinfo:
        TargetBuilder(sandbox.project).create(library)
    assert "profile" in str(excinfo.value)
    assert sandbox.project.targets == {}
    assert library.target is None


def test_duplicate_target_name_is_a_configuration_conflict(sandbox, make_library):
    builder = TargetBuilder(sandbox.project)
    builder.create(make_library([_spec()]))
    with pytest.raises(ConfigurationConflict):
        builder.create(make_library([_spec()]))


def test_library_cannot_be_installed_twice(sandbox, make_library):
    library = make_library([_spec()])
    TargetBuilder(sandbox.project).create(library)
    with pytest.raises(ConfigurationConflict):
        TargetBuilder(sandbox.project).create(library)
    assert list(sandbox.project.targets) == ["Pods"]


def test_existing_configuration_type_is_not_checked(sandbox, make_library):
    library = make_library([_spec()], build_configurations={"Debug": "profile"})
    target = TargetBuilder(sandbox.project).create(library)
    assert [c.name for c in target.build_configurations] == ["Debug", "Release"]
    assert library.target is target
