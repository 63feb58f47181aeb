import plistlib

from conftest import write_file

from podinstaller.details.file_accessor import FileAccessor
from podinstaller.details.platform import Platform
from podinstaller.details.specification import Specification
from podinstaller.generators import (
    BridgeSupport,
    CopyResourcesScript,
    DummySource,
    Markdown,
    Plist,
    PrefixHeader,
    TargetHeader,
    XCConfig,
)


def _accessor(tmp_path, spec, platform_name="ios"):
    return FileAccessor(tmp_path / spec.root_name, spec.consumer(platform_name))


# XCConfig...


def test_xcconfig_links_libraries_and_frameworks():
    specs = [
        Specification(name="A", version="1.0", libraries="z", frameworks=["CoreData"]),
        Specification(
            name="B",
            version="1.0",
            frameworks="CoreData",
            weak_frameworks="Twitter",
            ios={"libraries": "xml2"},
        ),
    ]
    xcconfig = XCConfig([s.consumer("ios") for s in specs], "${SRCROOT}/Pods")
    settings = xcconfig.compute()
    assert settings["OTHER_LDFLAGS"] == (
        "-ObjC -lz -framework CoreData -lxml2 -weak_framework Twitter"
    )
    assert settings["PODS_ROOT"] == "${SRCROOT}/Pods"
    assert settings["GCC_PREPROCESSOR_DEFINITIONS"] == "$(inherited) PODS=1"
    assert settings["PODS_PUBLIC_HEADERS_SEARCH_PATHS"] == (
        '"${PODS_ROOT}/Headers" "${PODS_ROOT}/Headers/A" "${PODS_ROOT}/Headers/B"'
    )


def test_xcconfig_merges_spec_settings():
    spec = Specification(
        name="A",
        version="1.0",
        xcconfig={"OTHER_LDFLAGS": "-lstdc++", "CLANG_CXX_LIBRARY": "libc++"},
    )
    settings = XCConfig([spec.consumer("ios")], "${SRCROOT}/Pods").compute()
    assert settings["OTHER_LDFLAGS"] == "-ObjC -lstdc++"
    assert settings["CLANG_CXX_LIBRARY"] == "libc++"


def test_xcconfig_arc_compatibility_flag():
    spec = Specification(name="A", version="1.0", requires_arc=True)
    xcconfig = XCConfig([spec.consumer("ios")], "${SRCROOT}/Pods")
    assert xcconfig.compute()["OTHER_LDFLAGS"] == "-ObjC"
    xcconfig.set_arc_compatibility_flag = True
    assert xcconfig.compute()["OTHER_LDFLAGS"] == "-ObjC -fobjc-arc"


def test_xcconfig_file_is_sorted(tmp_path):
    spec = Specification(name="A", version="1.0")
    path = tmp_path / "Pods.xcconfig"
    XCConfig([spec.consumer("ios")], "${SRCROOT}/Pods").save_as(path)
    lines = path.read_text().splitlines()
    assert lines == sorted(lines)
    assert "ALWAYS_SEARCH_USER_PATHS = YES" in lines


def test_pods_project_settings_are_a_copy():
    settings = XCConfig.pods_project_settings()
    settings["PODS_ROOT"] = "changed"
    assert XCConfig.pods_project_settings()["PODS_ROOT"] == "${SRCROOT}"


# Target header...


def test_target_header_defines_version_macros():
    header = TargetHeader([Specification(name="Reachability/Core-Lib", version="3.1.2")]).generate()
    assert "#define PODS_POD_AVAILABLE_Reachability_Core_Lib\n" in header
    assert "#define PODS_VERSION_MAJOR_Reachability_Core_Lib 3\n" in header
    assert "#define PODS_VERSION_MINOR_Reachability_Core_Lib 1\n" in header
    assert "#define PODS_VERSION_PATCH_Reachability_Core_Lib 2\n" in header


def test_target_header_skips_macros_of_prerelease_versions():
    header = TargetHeader([Specification(name="Beta", version="2.0.0-beta")]).generate()
    assert "#define PODS_POD_AVAILABLE_Beta\n" in header
    assert "PODS_VERSION_MAJOR_Beta" not in header
    assert "// Version: 2.0.0-beta." in header


# Prefix header...


def test_prefix_header_imports_platform_framework(tmp_path):
    spec = Specification(name="A", version="1.0")
    ios = PrefixHeader([_accessor(tmp_path, spec)], Platform("ios", "6.0")).generate()
    osx = PrefixHeader([_accessor(tmp_path, spec, "osx")], Platform("osx", "10.8")).generate()
    assert "#import <UIKit/UIKit.h>" in ios
    assert "#import <Cocoa/Cocoa.h>" in osx


def test_prefix_header_includes_spec_contents_and_files(tmp_path):
    write_file(tmp_path / "B" / "B-Prefix.pch", "#define FROM_FILE 1\n")
    specs = [
        Specification(name="A", version="1.0", prefix_header_contents="#define FROM_CONTENTS 1"),
        Specification(name="B", version="1.0", prefix_header_file="B-Prefix.pch"),
    ]
    generator = PrefixHeader([_accessor(tmp_path, s) for s in specs], Platform("ios"))
    generator.imports.append("Pods-environment.h")
    header = generator.generate()
    assert '#import "Pods-environment.h"' in header
    assert header.index("FROM_CONTENTS") < header.index("FROM_FILE")


# Acknowledgements...


def test_acknowledgements_list_each_pod_once(tmp_path):
    write_file(tmp_path / "A" / "LICENSE", "A license text\n")
    specs = [
        Specification(name="A/Core", version="1.0"),
        Specification(name="A/Extras", version="1.0"),
        Specification(name="B", version="1.0", license={"type": "MIT", "text": "B license text"}),
    ]
    accessors = [_accessor(tmp_path, s) for s in specs]

    markdown = Markdown(accessors).generate()
    assert markdown.count("## A\n") == 1
    assert "A license text" in markdown
    assert "## B\n\nB license text\n" in markdown

    plist = plistlib.loads(Plist(accessors).generate().encode("utf-8"))
    titles = [s["Title"] for s in plist["PreferenceSpecifiers"]]
    assert titles == ["Acknowledgements", "A", "B", ""]
    assert plist["PreferenceSpecifiers"][2]["FooterText"] == "B license text"
    assert plist["PreferenceSpecifiers"][2]["License"] == "MIT"
    assert "License" not in plist["PreferenceSpecifiers"][1]


def test_acknowledgement_paths_extend_the_basepath(tmp_path):
    basepath = tmp_path / "Pods-acknowledgements"
    assert Markdown.path_from_basepath(basepath) == tmp_path / "Pods-acknowledgements.markdown"
    assert Plist.path_from_basepath(basepath) == tmp_path / "Pods-acknowledgements.plist"


# Scripts and sources...


def test_copy_resources_script_quotes_resources():
    script = CopyResourcesScript(["Pod/it's.png"]).generate()
    assert "install_resource 'Pod/it'\\''s.png'\n" in script
    assert script.rstrip().endswith('rm "$RESOURCES_TO_COPY"')


def test_dummy_source_class_name_is_sanitized():
    source = DummySource("Pods-App Tests").generate()
    assert "@interface PodsDummy_Pods_App_Tests : NSObject" in source
    assert "@implementation PodsDummy_Pods_App_Tests" in source


def test_bridge_support_command(tmp_path):
    generator = BridgeSupport([tmp_path / "A.h", tmp_path / "B.h"], "gen_bridge_metadata")
    assert generator.command(tmp_path / "Pods.bridgesupport") == [
        "gen_bridge_metadata",
        "-c",
        "-I '/'",
        "-o",
        str(tmp_path / "Pods.bridgesupport"),
        str(tmp_path / "A.h"),
        str(tmp_path / "B.h"),
    ]
