from podinstaller.generators.acknowledgements import Acknowledgements, Markdown, Plist
from podinstaller.generators.bridge_support import BridgeSupport
from podinstaller.generators.copy_resources_script import CopyResourcesScript
from podinstaller.generators.dummy_source import DummySource
from podinstaller.generators.prefix_header import PrefixHeader
from podinstaller.generators.target_header import TargetHeader
from podinstaller.generators.xcconfig import XCConfig
