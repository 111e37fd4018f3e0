# site_advisor/base_module.py


class AdvisorModule:
    """
    Base class for the pipeline stages (fetching, analysis).
    Each stage receives its own config section; the shared "Global" section
    is passed down inside it.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

    @classmethod
    def from_app_config(cls, app_config: dict | None):
        """Builds the module from a full application config (sections keyed by module name)."""
        app_config = app_config or {}
        module_cfg = dict(app_config.get(cls.__name__, {}))
        module_cfg["Global"] = app_config.get("Global", {})
        return cls(config=module_cfg)

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name
