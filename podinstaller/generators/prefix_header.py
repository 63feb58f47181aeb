# Prefix header compiled into every file of the library target.

from typing import List

from podinstaller.details.file_accessor import FileAccessor, read_text_file
from podinstaller.details.platform import Platform
from podinstaller.generators.base import Generator


ROOT_FRAMEWORKS = {
    "ios": "UIKit/UIKit.h",
    "osx": "Cocoa/Cocoa.h",
}


class PrefixHeader(Generator):
    def __init__(self, file_accessors: List[FileAccessor], platform: Platform):
        self.file_accessors = file_accessors
        self.platform = platform
        self.imports: List[str] = []

    def generate(self) -> str:
        result = "#ifdef __OBJC__\n"
        result += f"#import <{ROOT_FRAMEWORKS[self.platform.name]}>\n"
        result += "#endif\n"
        for import_name in self.imports:
            result += f'\n#import "{import_name}"'
        for file_accessor in self.file_accessors:
            result += "\n"
            contents = file_accessor.spec_consumer.prefix_header_contents
            if contents:
                result += contents
                result += "\n"
            prefix_header = file_accessor.prefix_header
            if prefix_header is not None:
                result += read_text_file(prefix_header)
        return result
