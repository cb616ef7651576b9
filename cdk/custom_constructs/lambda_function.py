# Standard Library
import os
from typing import Optional, List, Dict

# Third Party
from aws_cdk import (
    Duration,
    aws_iam as iam,
    aws_lambda as lambda_,
    BundlingOptions,
)
from constructs import Construct

# Root of the Lambda sources, holding one folder per function and the shared
# ``core`` package
SRC_ROOT = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), os.pardir, os.pardir, "src"
)
SHARED_PACKAGE = "core"


class CustomLambdaFunction(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        src_folder_path: str,
        runtime: lambda_.Runtime = lambda_.Runtime.PYTHON_3_12,
        stack_suffix: Optional[str] = "",
        function_name: Optional[str] = None,
        memory_size: Optional[int] = 512,
        timeout: Optional[Duration] = Duration.seconds(30),
        environment: Optional[Dict[str, str]] = None,
        powertools_environment: Optional[bool] = True,
        initial_policy: Optional[List[iam.PolicyStatement]] = None,
        role: Optional[iam.IRole] = None,
        description: Optional[str] = None,
        **kwargs,
    ) -> None:
        """Custom Lambda Construct for AWS CDK from a source folder.

        The package is built in the runtime's bundling image: the folder's
        ``requirements.txt`` is installed, then the folder itself and the
        shared ``core`` package are copied next to the dependencies.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        src_folder_path : str
            Folder under ``src/`` containing the Lambda function code.
        runtime : lambda_.Runtime, optional
            Runtime for the Lambda function, by default lambda_.Runtime.PYTHON_3_12
        stack_suffix : Optional[str], optional
            Suffix to append to the Lambda function name, by default ""
        function_name : Optional[str], optional
            Explicit function name, by default None (let CloudFormation
            generate one)
        memory_size : Optional[int], optional
            Memory size for the Lambda function in MB, by default 512
        timeout : Optional[Duration], optional
            Timeout for the Lambda function, by default Duration.seconds(30)
        environment : Optional[Dict[str, str]], optional
            Environment variables for the Lambda function, by default None
        powertools_environment : Optional[bool], optional
            Whether to set the Powertools environment variables, by default
            True. Must be False for Lambda@Edge, which rejects environment
            variables.
        initial_policy : Optional[List[iam.PolicyStatement]], optional
            Initial IAM policy statements to attach to the Lambda function,
            by default None
        role : Optional[iam.IRole], optional
            IAM role to attach to the Lambda function, by default None
        description : Optional[str], optional
            Description for the Lambda function, by default None
        """
        super().__init__(scope, id, **kwargs)

        # Set variables for Lambda function
        name = os.path.basename(src_folder_path)
        if not os.path.exists(os.path.join(SRC_ROOT, src_folder_path)):
            raise ValueError(f"No Lambda source folder named {src_folder_path}")

        # Append stack suffix to name if provided
        if stack_suffix:
            name = f"{name}{stack_suffix}"
            if function_name:
                function_name = f"{function_name}{stack_suffix}"

        code_asset = lambda_.Code.from_asset(
            SRC_ROOT,
            bundling=BundlingOptions(
                image=runtime.bundling_image,
                command=[
                    "bash",
                    "-c",
                    # Dependencies, function code and the shared package all
                    # land in the root of /asset-output
                    " && ".join(
                        [
                            f"pip install -r {src_folder_path}/requirements.txt"
                            " -t /asset-output/",
                            f"cp -r {src_folder_path}/. /asset-output/",
                            f"cp -r {SHARED_PACKAGE} /asset-output/",
                        ]
                    ),
                ],
            ),
        )

        environment = dict(environment or {})
        if powertools_environment:
            # Default environment variables for Powertools for AWS Lambda
            powertools_env_vars = {
                "POWERTOOLS_SERVICE_NAME": name,
                "LOG_LEVEL": "INFO",
            }
            powertools_env_vars.update(environment)
            environment = powertools_env_vars

        # Create Lambda function from source folder
        self.function = lambda_.Function(
            self,
            f"{name}-function",
            function_name=function_name,
            runtime=runtime,
            handler="handler.lambda_handler",
            code=code_asset,
            memory_size=memory_size,
            timeout=timeout,
            environment=environment or None,
            initial_policy=initial_policy,
            role=role,
            description=description
            or f"Lambda function for {name}",
        )
