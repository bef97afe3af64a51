"""
Container image Lambda functions with their execution role and log groups.
"""

import logging

from aws_cdk import RemovalPolicy, Stack
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct

from lambda_factory.config import FactoryConfig
from lambda_factory.functions import FunctionSpec, create

logger = logging.getLogger(__name__)


class ContainerFunctionStack(Stack):
    """
    Stack declaring every function listed in the environment config.
    All functions share one execution role; each gets its own log group.
    """

    execution_role: iam.Role
    log_groups: dict[str, logs.LogGroup]
    functions: dict[str, lambda_.CfnFunction]

    def __init__(
        self, scope: Construct, construct_id: str, config: FactoryConfig, **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.execution_role = iam.Role(
            scope=self,
            id="ContainerFunctionExecutionRole",
            role_name=f"{construct_id}-execution-role",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ],
        )

        retention = logs.RetentionDays[config.log_retention]

        self.log_groups = {}
        self.functions = {}

        for function_config in config.functions:
            name = function_config.name

            # Lambda writes to /aws/lambda/<name> unless told otherwise
            log_group = logs.LogGroup(
                scope=self,
                id=f"{name}-log-group",
                log_group_name=f"/aws/lambda/{name}",
                retention=retention,
                removal_policy=RemovalPolicy.DESTROY,
            )

            upstream = []
            for dependency_name in function_config.depends_on:
                if dependency_name not in self.functions:
                    raise ValueError(
                        f"Function '{name}' depends on '{dependency_name}', "
                        "which is not declared above it"
                    )
                upstream.append(self.functions[dependency_name])

            self.log_groups[name] = log_group
            self.functions[name] = create(
                self,
                FunctionSpec(
                    name=name,
                    log_group=log_group,
                    role=self.execution_role,
                    depends_on=[log_group, *upstream],
                ),
            )

        logger.info(
            "Stack %s declares %d container functions",
            construct_id,
            len(self.functions),
        )
