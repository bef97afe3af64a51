from .config import (
    FactoryConfig,
    FunctionConfig,
    ProjectTomlConfig,
    load_environment_config,
    load_projecttoml_config,
)

__all__ = [
    "FactoryConfig",
    "FunctionConfig",
    "ProjectTomlConfig",
    "load_environment_config",
    "load_projecttoml_config",
]
