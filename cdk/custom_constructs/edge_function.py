# Standard Library
from typing import Any, Dict, Optional

# Third Party
from aws_cdk import (
    CustomResource,
    Duration,
    Stack,
    aws_cloudfront as cloudfront,
    aws_iam as iam,
    aws_lambda as lambda_,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs.lambda_function import CustomLambdaFunction


class EdgeRole(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        role_name: Optional[str] = None,
    ) -> None:
        """Execution role usable by Lambda@Edge functions.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        role_name : Optional[str], optional
            The name of the role, by default None (generated)
        """
        super().__init__(scope, id)

        self.role = iam.Role(
            self,
            "Role",
            role_name=role_name,
            assumed_by=iam.CompositePrincipal(
                iam.ServicePrincipal("lambda.amazonaws.com"),
                iam.ServicePrincipal("edgelambda.amazonaws.com"),
            ),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ],
        )

        # Replicas log to the region of the edge location that ran them
        self.role.add_to_policy(
            iam.PolicyStatement(
                actions=[
                    "logs:CreateLogGroup",
                    "logs:CreateLogStream",
                    "logs:PutLogEvents",
                ],
                resources=[
                    f"arn:{Stack.of(self).partition}:logs:*:*:log-group:/aws/lambda/*"
                ],
            )
        )


class WithConfiguration(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        function: lambda_.IFunction,
        configuration: Dict[str, Any],
        stack_suffix: Optional[str] = "",
    ) -> None:
        """Publishes a version of a function with an injected configuration.

        The custom resource writes ``configuration.json`` into the
        function's code package, publishes a new version and waits for the
        function to become active. Any change to the configuration
        publishes a new version.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        function : lambda_.IFunction
            The function to configure.
        configuration : Dict[str, Any]
            The configuration document; may contain tokens.
        stack_suffix : Optional[str], optional
            Suffix to append to the handler name, by default ""
        """
        super().__init__(scope, id)

        stack = Stack.of(self)

        self.handler = CustomLambdaFunction(
            self,
            "WithConfigurationHandler",
            src_folder_path="cc-edge-configuration",
            stack_suffix=stack_suffix,
            memory_size=512,
            timeout=Duration.minutes(5),
            description="Injects configuration into edge functions",
        ).function

        self.handler.add_to_role_policy(
            iam.PolicyStatement(
                actions=[
                    "lambda:GetFunction",
                    "lambda:GetFunctionConfiguration",
                    "lambda:UpdateFunctionCode",
                ],
                resources=[function.function_arn],
            )
        )

        self.resource = CustomResource(
            self,
            "Resource",
            service_token=self.handler.function_arn,
            resource_type="Custom::WithConfiguration",
            properties={
                "Region": stack.region,
                "FunctionName": function.function_name,
                "Configuration": stack.to_json_string(configuration),
            },
        )

        self.function_version = lambda_.Version.from_version_arn(
            self,
            "Version",
            self.resource.get_att_string("VersionArn"),
        )


class EdgeFunction(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        src_folder_path: str,
        event_type: cloudfront.LambdaEdgeEventType,
        configuration: Optional[Dict[str, Any]] = None,
        edge_role: Optional[EdgeRole] = None,
        include_body: Optional[bool] = False,
        stack_suffix: Optional[str] = "",
    ) -> None:
        """Lambda@Edge function whose settings ship in its code package.

        Edge functions must be deployed in us-east-1, so the enclosing
        stack has to target that region.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        src_folder_path : str
            Folder under ``src/`` containing the function code.
        event_type : cloudfront.LambdaEdgeEventType
            The CloudFront event the function is attached to.
        configuration : Optional[Dict[str, Any]], optional
            Configuration written to ``configuration.json``, by default {}
        edge_role : Optional[EdgeRole], optional
            Execution role shared between edge functions, by default a new
            ``EdgeRole``
        include_body : Optional[bool], optional
            Whether the function receives the request body, by default False
        stack_suffix : Optional[str], optional
            Suffix to append to the function names, by default ""
        """
        super().__init__(scope, id)

        edge_role = edge_role or EdgeRole(self, "EdgeRole")

        self.function = CustomLambdaFunction(
            self,
            "Function",
            src_folder_path=src_folder_path,
            stack_suffix=stack_suffix,
            memory_size=128,
            timeout=Duration.seconds(5),
            powertools_environment=False,
            role=edge_role.role,
        ).function

        self.with_configuration = WithConfiguration(
            self,
            "WithConfiguration",
            function=self.function,
            configuration=configuration or {},
            stack_suffix=stack_suffix,
        )

        self.edge_lambda = cloudfront.EdgeLambda(
            event_type=event_type,
            function_version=self.with_configuration.function_version,
            include_body=include_body,
        )
