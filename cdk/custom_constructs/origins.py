# Standard Library
from typing import Optional, Dict

# Third Party
from aws_cdk import (
    aws_s3 as s3,
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as origins,
)
from constructs import Construct


class CustomS3Origin(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        bucket: s3.IBucket,
        origin_access_control: Optional[cloudfront.IOriginAccessControl] = None,
        origin_path: Optional[str] = None,
        custom_headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """Custom S3 Origin Construct for AWS CDK.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        bucket : s3.IBucket
            The S3 bucket to use as the origin.
        origin_access_control : Optional[cloudfront.IOriginAccessControl], optional
            The CloudFront Origin Access Control for the S3 bucket, by
            default None (one is created)
        origin_path : Optional[str], optional
            The path within the S3 bucket to use as the origin, by default None
        custom_headers : Optional[Dict[str, str]], optional
            Custom headers to include in the origin request, by default None
        """
        super().__init__(scope, id)

        # Buckets stay private, CloudFront signs its requests with OAC
        self.origin = origins.S3BucketOrigin.with_origin_access_control(
            bucket,
            origin_access_control=origin_access_control,
            origin_path=origin_path,
            custom_headers=custom_headers,
        )
