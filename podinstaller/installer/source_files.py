from podinstaller import ui
from podinstaller.details.library import Library
from podinstaller.installer.compiler_flags import flags_for, join_flags
from podinstaller.project import NativeTarget, Project


class SourceFileRegistrar:
    """
    Adds the source files of every specification to the target, with the
    compiler flags of the specification, and links the system frameworks the
    specifications ask for.

    Framework links are informational only, the build settings file is what
    the client project actually links with.
    """

    def __init__(self, project: Project):
        self.project = project

    def attach(self, library: Library, target: NativeTarget) -> None:
        with ui.message("- Adding Build files"):
            for file_accessor in library.file_accessors:
                consumer = file_accessor.spec_consumer
                flags = join_flags(flags_for(consumer))
                file_refs = [self.project.file_reference(sf) for sf in file_accessor.source_files]
                target.add_file_references(file_refs, flags)

                for framework in consumer.frameworks:
                    self.project.add_system_framework(framework, target)
