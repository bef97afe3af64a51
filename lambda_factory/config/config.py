import os
import tomllib
from dataclasses import dataclass, field
from typing import Literal, Optional

import yaml

DEFAULT_CONFIG_DIR = os.path.join(os.path.dirname(__file__), "environments")


@dataclass
class FunctionConfig:
    """
    One entry of the ```functions``` list in the .yml config file.
    ```depends_on``` names functions listed above this one.
    """

    name: str
    depends_on: list[str] = field(default_factory=list)


@dataclass
class FactoryConfig:
    environment: str
    log_retention: str
    functions: list[FunctionConfig]


@dataclass
class ProjectTomlConfig:
    """
    This object represents the ```pyproject.toml```.
    Only the project name is needed to build construct ids.
    """

    project_name: str


def load_projecttoml_config(path: str = "pyproject.toml") -> Optional[ProjectTomlConfig]:
    """
    Load the ```pyproject.toml``` file into ```ProjectTomlConfig``` dataclass.
    """
    try:
        with open(path, "rb") as f:
            config_dict = tomllib.load(f)
            project_section = config_dict.get("project", {})
            return ProjectTomlConfig(project_name=project_section["name"])
    except OSError:
        return None


def load_environment_config(
    environment: Literal["prod"], config_dir: Optional[str] = None
) -> Optional[FactoryConfig]:
    """
    Load configuration file based on given environment.
    Possible values: 'prod' (only this for now)
    """

    path = os.path.join(config_dir or DEFAULT_CONFIG_DIR, f"{environment}.yml")

    try:
        with open(path, "r") as f:
            _config_dict = yaml.safe_load(f) or {}
    except OSError:
        # OSError is the base class for I/O errors so this
        # catches a missing or unreadable config file
        return None

    functions = [
        _parse_function_entry(entry) for entry in _config_dict.get("functions") or []
    ]

    return FactoryConfig(
        environment=environment,
        log_retention=_config_dict.get("log_retention", "TWO_WEEKS"),
        functions=functions,
    )


def _parse_function_entry(entry) -> FunctionConfig:
    """
    Build a ```FunctionConfig``` from one ```functions``` item.
    ```depends_on``` may be a single name or a list of names.
    """
    if not isinstance(entry, dict) or not entry.get("name"):
        raise ValueError(f"Function entry {entry!r} must be a mapping with a 'name'")

    depends_on = entry.get("depends_on") or []
    if isinstance(depends_on, str):
        depends_on = [depends_on]
    elif not isinstance(depends_on, list):
        raise ValueError(
            f"Function '{entry['name']}' has depends_on {depends_on!r}, "
            "expected a name or a list of names"
        )

    return FunctionConfig(name=entry["name"], depends_on=list(depends_on))
