# Umbrella header: lets client code check at compile time which pods, and
# which versions of them, were installed.

import re
from typing import List

from packaging.version import InvalidVersion, Version

from podinstaller.details.specification import Specification
from podinstaller.generators.base import Generator


HEADER = """\
// To check if a library is compiled with the pods installer you
// can use the `PODS` macro definition which is defined in the
// xcconfigs so it is available in headers also when they are
// imported in the client project.

"""


def macro_name(spec_name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", spec_name)


class TargetHeader(Generator):
    def __init__(self, specs: List[Specification]):
        self.specs = specs

    def generate(self) -> str:
        result = HEADER
        for spec in self.specs:
            name = macro_name(spec.name)
            result += f"\n// {spec.name}\n"
            result += f"#define PODS_POD_AVAILABLE_{name}\n"
            try:
                version = Version(spec.version)
            except InvalidVersion:
                continue
            if version.is_prerelease:
                result += "// This library does not follow semantic-versioning,\n"
                result += "// so we were not able to define version macros.\n"
                result += "// Please contact the author.\n"
                result += f"// Version: {spec.version}.\n"
                continue
            result += f"#define PODS_VERSION_MAJOR_{name} {version.major}\n"
            result += f"#define PODS_VERSION_MINOR_{name} {version.minor}\n"
            result += f"#define PODS_VERSION_PATCH_{name} {version.micro}\n"
        return result
