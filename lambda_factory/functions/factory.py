"""
Factory for container image Lambda functions.
"""

import logging
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from aws_cdk import CfnTag
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct, IDependable

logger = logging.getLogger(__name__)

# TODO: replace with the URI of the image pushed by the build pipeline
PLACEHOLDER_IMAGE_URI = "TODO-image-uri"


@dataclass
class FunctionSpec:
    """
    Arguments for a single container function.

    ```log_group``` and ```role``` are owned by the caller and only referenced.
    ```depends_on``` is handed to the construct graph as-is.
    """

    name: str
    log_group: logs.ILogGroup
    role: iam.IRole
    depends_on: Optional[Union[IDependable, Sequence[IDependable]]] = None


def create(scope: Construct, spec: FunctionSpec) -> lambda_.CfnFunction:
    """
    Declare a container image Lambda function under ```spec.name``` in ```scope```.

    No validation happens here; CDK and CloudFormation report bad input.
    """
    # TODO: spec.log_group is not associated with the function yet
    # (would be logging_config.log_group once the log format is settled)
    function = lambda_.CfnFunction(
        scope=scope,
        id=spec.name,
        package_type="Image",
        code=lambda_.CfnFunction.CodeProperty(image_uri=PLACEHOLDER_IMAGE_URI),
        role=spec.role.role_arn,
        function_name=spec.name,
        tags=[
            CfnTag(key="env", value="production"),
            CfnTag(key="service", value=spec.name),
        ],
    )

    dependencies = _as_list(spec.depends_on)
    if dependencies:
        function.node.add_dependency(*dependencies)

    logger.debug(
        "Declared container function %s with %d dependencies",
        spec.name,
        len(dependencies),
    )

    return function


def _as_list(
    depends_on: Optional[Union[IDependable, Sequence[IDependable]]],
) -> list[IDependable]:
    if depends_on is None:
        return []
    if isinstance(depends_on, SequenceABC):
        return list(depends_on)
    return [depends_on]
