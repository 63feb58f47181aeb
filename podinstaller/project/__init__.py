from podinstaller.project.project import NativeTarget, Project
