from podinstaller.config import Config
from podinstaller.errors import ArtifactGenerationFailure, ConfigurationConflict
