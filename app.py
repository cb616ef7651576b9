#!/usr/bin/env python3
# Standard Library
import os

# Third Party
import aws_cdk as cdk

# Local Modules
from cdk.stacks import CloudComponentsExampleStack

app = cdk.App()

stack_suffix = app.node.try_get_context("stack_suffix") or ""

CloudComponentsExampleStack(
    app,
    f"CloudComponentsExampleStack{stack_suffix}",
    stack_suffix=stack_suffix,
    # Lambda@Edge functions must be created in us-east-1
    env=cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"), region="us-east-1"
    ),
)

app.synth()
