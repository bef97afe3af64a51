from pathlib import Path

import pytest

from lambda_factory.config import (
    FunctionConfig,
    load_environment_config,
    load_projecttoml_config,
)

REPO_ROOT = Path(__file__).parent.parent.parent
ENVIRONMENTS_DIR = REPO_ROOT / "lambda_factory" / "config" / "environments"


def test_load_environment_config_reads_functions(tmp_path):
    (tmp_path / "prod.yml").write_text(
        "log_retention: ONE_MONTH\n"
        "functions:\n"
        "  - name: checkout-worker\n"
        "  - name: checkout-api\n"
        "    depends_on: [checkout-worker]\n",
        encoding="utf-8",
    )

    config = load_environment_config("prod", config_dir=str(tmp_path))

    assert config is not None
    assert config.environment == "prod"
    assert config.log_retention == "ONE_MONTH"
    assert config.functions == [
        FunctionConfig(name="checkout-worker", depends_on=[]),
        FunctionConfig(name="checkout-api", depends_on=["checkout-worker"]),
    ]


def test_load_environment_config_defaults(tmp_path):
    (tmp_path / "prod.yml").write_text("", encoding="utf-8")

    config = load_environment_config("prod", config_dir=str(tmp_path))

    assert config is not None
    assert config.log_retention == "TWO_WEEKS"
    assert config.functions == []


def test_load_environment_config_missing_file(tmp_path):
    assert load_environment_config("prod", config_dir=str(tmp_path)) is None


def test_shipped_prod_config_loads():
    config = load_environment_config("prod", config_dir=str(ENVIRONMENTS_DIR))

    assert config is not None
    assert [f.name for f in config.functions] == ["checkout-worker", "checkout-api"]


def test_load_projecttoml_config(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "checkout"\n', encoding="utf-8")

    config = load_projecttoml_config(str(pyproject))

    assert config is not None
    assert config.project_name == "checkout"


def test_load_projecttoml_config_missing_file(tmp_path):
    assert load_projecttoml_config(str(tmp_path / "pyproject.toml")) is None


def test_repository_pyproject_names_the_project():
    config = load_projecttoml_config(str(REPO_ROOT / "pyproject.toml"))

    assert config is not None
    assert config.project_name == "container-function-factory"


def test_single_depends_on_name_is_wrapped(tmp_path):
    (tmp_path / "prod.yml").write_text(
        "functions:\n"
        "  - name: worker\n"
        "  - name: api\n"
        "    depends_on: worker\n",
        encoding="utf-8",
    )

    config = load_environment_config("prod", config_dir=str(tmp_path))

    assert config is not None
    assert config.functions[1] == FunctionConfig(name="api", depends_on=["worker"])


def test_depends_on_of_wrong_type_is_rejected(tmp_path):
    (tmp_path / "prod.yml").write_text(
        "functions:\n"
        "  - name: api\n"
        "    depends_on: {worker: true}\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="api"):
        load_environment_config("prod", config_dir=str(tmp_path))


@pytest.mark.parametrize(
    "entry", ["  - worker\n", "  - depends_on: [worker]\n", "  - name: ''\n"]
)
def test_function_entry_without_name_is_rejected(tmp_path, entry):
    (tmp_path / "prod.yml").write_text("functions:\n" + entry, encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping with a 'name'"):
        load_environment_config("prod", config_dir=str(tmp_path))


def test_default_config_dir_does_not_depend_on_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_environment_config("prod")

    assert config is not None
    assert [f.name for f in config.functions] == ["checkout-worker", "checkout-api"]
