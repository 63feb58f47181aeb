import pytest

from podinstaller.errors import ConfigurationConflict
from podinstaller.project import Project
from podinstaller.project.formatter import format_key, format_xcode_project, quote
from podinstaller.project.model import PBXBuildFile, Reference, SourceTree, XcodeID
from podinstaller.project.validator import validate_references, validate_unique_ids


@pytest.fixture
def project(tmp_path):
    return Project(tmp_path / "Pods.xcodeproj")


def test_new_project_layout(project):
    groups = [project.resolve(ref).name for ref in project.main_group.children]
    assert groups == ["Pods", "Targets Support Files", "Frameworks", "Products"]
    assert [c.name for c in project.build_configurations] == ["Debug", "Release"]
    assert project.model.project.productRefGroup.id == project.products_group.id


def test_new_target_has_product_and_phases(project):
    target = project.new_target("Pods", "ios", "6.0")
    product = project.resolve(target.pbx_target.productReference)
    assert product.path == "libPods.a"
    assert product.sourceTree == SourceTree.BUILT_PRODUCTS_DIR
    phases = [project.resolve(ref).display_name() for ref in target.pbx_target.buildPhases]
    assert phases == ["Headers", "Sources", "Frameworks"]
    assert target.build_settings("Debug")["IPHONEOS_DEPLOYMENT_TARGET"] == "6.0"
    with pytest.raises(KeyError):
        target.build_settings("Beta")


def test_new_target_rejects_unknown_platform(project):
    with pytest.raises(ConfigurationConflict):
        project.new_target("Pods", "watchos", "2.0")


def test_file_reference_is_shared_by_path(project):
    first = project.file_reference(project.root / "Pod" / "A.m")
    second = project.file_reference(project.root / "Pod" / "A.m")
    assert first is second
    assert first.path == "Pod/A.m"
    assert project.file_references(project.pods_group) == [first]


def test_objects_with_the_same_key_get_distinct_ids(project):
    target = project.new_target("Pods", "ios", "6.0")
    file_ref = project.file_reference(project.root / "Pod" / "A.m")
    first = target.add_file_reference(file_ref)
    second = target.add_file_reference(file_ref)
    assert first.id != second.id
    assert validate_unique_ids(project.model) == []


def test_validator_reports_dangling_references(project):
    target = project.new_target("Pods", "ios", "6.0")
    dangling = PBXBuildFile(fileRef=Reference(XcodeID("0" * 24)), owner="test")
    project.track(dangling)
    target.source_build_phase.files.append(dangling.reference())
    errors = validate_references(project.model)
    assert len(errors) == 1
    assert "0" * 24 in errors[0]
    with pytest.raises(ValueError):
        project.save()


def test_save_writes_the_project_file(project):
    target = project.new_target("Pods", "ios", "6.0")
    target.add_file_reference(project.file_reference(project.root / "Pod" / "A.m"), "-fobjc-arc")
    project.add_system_framework("Foundation", target)

    path = project.save()

    assert path == project.path / "project.pbxproj"
    text = path.read_text()
    assert text.startswith("// !$*UTF8*$!\n{\n")
    assert "objectVersion = 46;" in text
    assert "isa = PBXNativeTarget;" in text
    assert 'COMPILER_FLAGS = "-fobjc-arc";' in text
    assert 'path = "System/Library/Frameworks/Foundation.framework";' in text
    # Internal bookkeeping never reaches the file
    assert "owner" not in text


def test_format_is_deterministic(tmp_path):
    def build():
        project = Project(tmp_path / "Pods.xcodeproj")
        target = project.new_target("Pods", "osx", "10.8")
        target.add_file_reference(project.file_reference(project.root / "Pod" / "A.m"))
        return format_xcode_project(project.model)

    assert build() == build()


def test_quoting():
    assert quote('say "hi"\n') == '"say \\"hi\\"\\n"'
    assert format_key("GCC_PREFIX_HEADER") == "GCC_PREFIX_HEADER"
    assert format_key("OTHER_LDFLAGS[arch=armv6]") == '"OTHER_LDFLAGS[arch=armv6]"'
