# Standard Library
from typing import List, Optional

# Third Party
from aws_cdk import (
    aws_s3 as s3,
    aws_cloudfront as cloudfront,
    aws_certificatemanager as acm,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs.origins import CustomS3Origin


class CustomCdn(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        name: str,
        s3_origin: s3.IBucket,
        edge_lambdas: Optional[List[cloudfront.EdgeLambda]] = None,
        domain_name: Optional[str] = None,
        certificate: Optional[acm.ICertificate] = None,
        stack_suffix: Optional[str] = "",
        default_root_object: Optional[str] = "index.html",
    ) -> None:
        """Custom CloudFront Distribution Construct for AWS CDK.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        name : str
            The name of the CloudFront distribution, used as its comment.
        s3_origin : s3.IBucket
            The S3 bucket to use as the origin for the CloudFront distribution.
        edge_lambdas : Optional[List[cloudfront.EdgeLambda]], optional
            Lambda@Edge functions attached to the default behavior, by
            default None
        domain_name : Optional[str], optional
            Alternate domain name, requires ``certificate``, by default None
        certificate : Optional[acm.ICertificate], optional
            Certificate for ``domain_name``, by default None
        stack_suffix : Optional[str], optional
            Suffix to append to the CloudFront distribution name, by default ""
        default_root_object : Optional[str], optional
            The default root object for the CloudFront distribution, by default "index.html"
        """
        super().__init__(scope, id)

        if bool(domain_name) != bool(certificate):
            raise ValueError(
                "domain_name and certificate must be given together"
            )

        # Append stack suffix to name if provided
        if stack_suffix:
            name = f"{name}{stack_suffix}"

        origin = CustomS3Origin(self, "Origin", bucket=s3_origin).origin

        self.distribution = cloudfront.Distribution(
            self,
            id,
            default_root_object=default_root_object,
            default_behavior=cloudfront.BehaviorOptions(
                origin=origin,
                viewer_protocol_policy=(
                    cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS
                ),
                allowed_methods=(
                    cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS
                ),
                cached_methods=(
                    cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS
                ),
                edge_lambdas=edge_lambdas,
                compress=True,
            ),
            domain_names=[domain_name] if domain_name else None,
            certificate=certificate,
            comment=name,
            price_class=cloudfront.PriceClass.PRICE_CLASS_100,
        )
