# Errors raised while installing a library target.
#
# Both types derive from the builtin exceptions the rest of the code base
# raises, so callers that only know about ValueError/RuntimeError keep working.


class ConfigurationConflict(ValueError):
    pass


class ArtifactGenerationFailure(RuntimeError):
    def __init__(self, step: str, message: str):
        super().__init__(f"{step}: {message}")
        self.step = step
