"""Edge stack: CloudFront router in front of the HTTP API."""

from __future__ import annotations

from aws_cdk import Fn
from aws_cdk import Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from constructs import Construct

API_PATH_PATTERN = "/api/*"


class EdgeStack(Stack):
    """Routes ``/api/*`` at the edge to the HTTP API origin."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        api_url: str,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # https://<id>.execute-api.<region>.amazonaws.com -> host part
        api_domain = Fn.select(2, Fn.split("/", api_url))
        api_behavior = cloudfront.BehaviorOptions(
            origin=origins.HttpOrigin(api_domain),
            viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
            cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
            origin_request_policy=(
                cloudfront.OriginRequestPolicy.ALL_VIEWER_EXCEPT_HOST_HEADER
            ),
        )

        self.router = cloudfront.Distribution(
            self,
            "EdgeRouter",
            default_behavior=api_behavior,
            additional_behaviors={API_PATH_PATTERN: api_behavior},
        )

    @property
    def domain(self) -> str:
        return f"https://{self.router.distribution_domain_name}"
