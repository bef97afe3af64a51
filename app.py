#!/usr/bin/env python3
# For more information, see https://docs.aws.amazon.com/cdk/latest/guide/environments.html
import sys

from aws_cdk import App, Tags

from lambda_factory.config import load_environment_config, load_projecttoml_config
from lambda_factory.stacks import ContainerFunctionStack

app = App()

env_name = app.node.try_get_context("environment") or "prod"
env_config = load_environment_config(environment=env_name)
project_config = load_projecttoml_config()

if env_config is None:
    print(f"Configuration for environment '{env_name}' not found.", file=sys.stderr)
    sys.exit(1)

if project_config is None:
    print("Something went wrong while reading your pyproject.toml file.", file=sys.stderr)
    sys.exit(1)

root_construct_id = "-".join([project_config.project_name, env_config.environment])

ContainerFunctionStack(
    scope=app,
    construct_id="-".join([root_construct_id, "functions"]),
    config=env_config,
)

Tags.of(app).add("Project", project_config.project_name)
Tags.of(app).add("Environment", env_config.environment)
Tags.of(app).add("ManagedBy", "CDK")

app.synth()
