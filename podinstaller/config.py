class Config:
    def __init__(
        self,
        sandbox_root: str = "Pods",
        generate_bridge_support: bool = False,
        set_arc_compatibility_flag: bool = False,
        bridge_support_tool: str = "gen_bridge_metadata",
        **kwargs
    ):
        self.sandbox_root = sandbox_root
        self.generate_bridge_support = generate_bridge_support
        self.set_arc_compatibility_flag = set_arc_compatibility_flag
        self.bridge_support_tool = bridge_support_tool
        self.__dict__.update(kwargs)
