# Compiler flags for the source files of a specification.
#
# When OS_OBJECT_USE_OBJC is 0, code may call dispatch_release() on iOS >= 6.0
# and OS X >= 10.8, where dispatch objects otherwise become Objective-C objects
# managed by ARC:
#
# * Specs that do not require ARC are not affected.
# * Specs that require ARC and declare a deployment target at or above the
#   threshold no longer call dispatch_release() and get no define.
# * Specs that require ARC and declare a lower deployment target, or none at
#   all, still call dispatch_release() and get OS_OBJECT_USE_OBJC=0.
#
# See libdispatch os/object.h.

from typing import Dict, List

from packaging.version import Version

from podinstaller.details.specification import Consumer

ARC_FLAG = "-fobjc-arc"
DISABLE_OBJECT_USE_OBJC_FLAG = "-DOS_OBJECT_USE_OBJC=0"

ENABLE_OBJECT_USE_OBJC_FROM: Dict[str, Version] = {
    "ios": Version("6"),
    "osx": Version("10.8"),
}


def requires_object_use_objc_fallback(consumer: Consumer) -> bool:
    threshold = ENABLE_OBJECT_USE_OBJC_FROM.get(consumer.platform_name)
    if threshold is None:
        return False
    deployment_target = consumer.spec.deployment_target(consumer.platform_name)
    return deployment_target is None or Version(str(deployment_target)) < threshold


def flags_for(consumer: Consumer) -> List[str]:
    flags = list(consumer.compiler_flags)
    if consumer.requires_arc:
        flags.append(ARC_FLAG)
        if requires_object_use_objc_fallback(consumer):
            flags.append(DISABLE_OBJECT_USE_OBJC_FLAG)
    return flags


def join_flags(flags: List[str]) -> str:
    return " ".join(flags)
