# Empty Objective-C class so a library made only of categories still links.

import re

from podinstaller.generators.base import Generator


class DummySource(Generator):
    def __init__(self, label: str):
        self.class_name = "PodsDummy_" + re.sub(r"[^A-Za-z0-9_]", "_", label)

    def generate(self) -> str:
        return (
            "#import <Foundation/Foundation.h>\n"
            f"@interface {self.class_name} : NSObject\n"
            "@end\n"
            f"@implementation {self.class_name}\n"
            "@end\n"
        )
