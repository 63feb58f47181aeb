# Default build settings for the project and for static library targets.
#
# Targets start from COMMON_TARGET_SETTINGS, then the platform table, then the
# configuration table, and finally the deployment target setting of their
# platform.

from typing import Dict

from podinstaller.project.model import BuildSettings, YesNo


DEFAULT_CONFIGURATIONS = ("Debug", "Release")

PROJECT_SETTINGS: Dict[str, BuildSettings] = {
    "Debug": {
        "ALWAYS_SEARCH_USER_PATHS": YesNo.NO,
        "COPY_PHASE_STRIP": YesNo.NO,
        "GCC_DYNAMIC_NO_PIC": YesNo.NO,
        "GCC_OPTIMIZATION_LEVEL": "0",
        "GCC_PREPROCESSOR_DEFINITIONS": ["DEBUG=1", "$(inherited)"],
        "GCC_SYMBOLS_PRIVATE_EXTERN": YesNo.NO,
        "ONLY_ACTIVE_ARCH": YesNo.YES,
    },
    "Release": {
        "ALWAYS_SEARCH_USER_PATHS": YesNo.NO,
        "COPY_PHASE_STRIP": YesNo.YES,
        "VALIDATE_PRODUCT": YesNo.YES,
    },
}

COMMON_TARGET_SETTINGS: BuildSettings = {
    "DSTROOT": "/tmp/xcodeproj.dst",
    "GCC_PRECOMPILE_PREFIX_HEADER": YesNo.YES,
    "OTHER_LDFLAGS": "",
    "PRODUCT_NAME": "$(TARGET_NAME)",
    "SKIP_INSTALL": YesNo.YES,
}

PLATFORM_TARGET_SETTINGS: Dict[str, BuildSettings] = {
    "ios": {
        "SDKROOT": "iphoneos",
        "PUBLIC_HEADERS_FOLDER_PATH": "$(TARGET_NAME)",
    },
    "osx": {
        "SDKROOT": "macosx",
        "COMBINE_HIDPI_IMAGES": YesNo.YES,
        "EXECUTABLE_PREFIX": "lib",
    },
}

CONFIGURATION_TARGET_SETTINGS: Dict[str, BuildSettings] = {
    "Debug": {
        "GCC_DYNAMIC_NO_PIC": YesNo.NO,
        "GCC_OPTIMIZATION_LEVEL": "0",
        "GCC_PREPROCESSOR_DEFINITIONS": ["DEBUG=1", "$(inherited)"],
        "GCC_SYMBOLS_PRIVATE_EXTERN": YesNo.NO,
    },
    "Release": {
        "OTHER_CFLAGS": ["-DNS_BLOCK_ASSERTIONS=1", "$(inherited)"],
        "OTHER_CPLUSPLUSFLAGS": ["-DNS_BLOCK_ASSERTIONS=1", "$(inherited)"],
    },
}

DEPLOYMENT_TARGET_SETTINGS: Dict[str, str] = {
    "ios": "IPHONEOS_DEPLOYMENT_TARGET",
    "osx": "MACOSX_DEPLOYMENT_TARGET",
}

# Location of system frameworks, relative to the SDK root
SYSTEM_FRAMEWORKS_DIR = "System/Library/Frameworks"

HEADER_EXTENSIONS = frozenset({".h", ".hpp", ".hh", ".hxx"})
