# Standard Library
from typing import List, Optional

# Third Party
from aws_cdk import (
    CustomResource,
    Duration,
    aws_apigateway as apigw,
    aws_events as eventbridge,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs.lambda_function import CustomLambdaFunction
from cdk.custom_constructs.secret_key import SecretKey, SecretKeyStore


class StripeWebhook(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        secret_key: SecretKey,
        url: str,
        events: List[str],
        description: Optional[str] = None,
        endpoint_secret_store: Optional[SecretKeyStore] = None,
        stack_suffix: Optional[str] = "",
    ) -> None:
        """Stripe webhook endpoint managed as a custom resource.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        secret_key : SecretKey
            Reference to the Stripe secret API key.
        url : str
            The URL Stripe delivers events to.
        events : List[str]
            The Stripe event types to enable, e.g. ["charge.failed"].
        description : Optional[str], optional
            A description of the endpoint, by default None
        endpoint_secret_store : Optional[SecretKeyStore], optional
            Where to store the endpoint signing secret returned on creation,
            by default None (the secret is discarded)
        stack_suffix : Optional[str], optional
            Suffix to append to the handler name, by default ""
        """
        super().__init__(scope, id)

        self.handler = CustomLambdaFunction(
            self,
            "StripeWebhookHandler",
            src_folder_path="cc-stripe-webhook",
            stack_suffix=stack_suffix,
            memory_size=256,
            timeout=Duration.minutes(3),
            description="Manages Stripe webhook endpoints",
        ).function

        secret_key.grant_read(self.handler)

        properties = {
            "SecretKeyString": secret_key.serialize(self),
            "Url": url,
            "Events": events,
        }
        if description:
            properties["Description"] = description
        if endpoint_secret_store:
            endpoint_secret_store.grant_write(self.handler)
            properties["EndpointSecretStoreString"] = (
                endpoint_secret_store.serialize(self)
            )

        self.resource = CustomResource(
            self,
            "Resource",
            service_token=self.handler.function_arn,
            resource_type="Custom::StripeWebhook",
            properties=properties,
        )

        # The Stripe endpoint id (we_...)
        self.webhook_id = self.resource.ref


class StripeEventBusProducer(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        endpoint_secret: SecretKey,
        event_bus: Optional[eventbridge.IEventBus] = None,
        source: Optional[str] = "stripe.com",
        stack_suffix: Optional[str] = "",
    ) -> None:
        """REST endpoint forwarding verified Stripe events to EventBridge.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        endpoint_secret : SecretKey
            Reference to the endpoint signing secret, typically
            ``endpoint_secret_store.to_secret_key()`` of a ``StripeWebhook``.
        event_bus : Optional[eventbridge.IEventBus], optional
            The bus receiving the events, by default the account's default
            event bus
        source : Optional[str], optional
            Source of the forwarded events, by default "stripe.com"
        stack_suffix : Optional[str], optional
            Suffix to append to the handler name, by default ""
        """
        super().__init__(scope, id)

        event_bus = event_bus or eventbridge.EventBus.from_event_bus_name(
            self, "DefaultEventBus", "default"
        )

        self.handler = CustomLambdaFunction(
            self,
            "StripeEventBusProducerHandler",
            src_folder_path="cc-stripe-event-bus-producer",
            stack_suffix=stack_suffix,
            memory_size=256,
            timeout=Duration.seconds(10),
            environment={
                "ENDPOINT_SECRET_STRING": endpoint_secret.serialize(self),
                "EVENT_BUS_NAME": event_bus.event_bus_name,
                "SOURCE": source,
            },
            description="Forwards Stripe webhook deliveries to EventBridge",
        ).function

        endpoint_secret.grant_read(self.handler)
        event_bus.grant_put_events_to(self.handler)

        self.api = apigw.LambdaRestApi(
            self,
            "Api",
            handler=self.handler,
            proxy=False,
            description="Stripe webhook receiver",
        )
        self.api.root.add_resource("stripe").add_method("POST")

        # Register this URL with StripeWebhook
        self.url = self.api.url_for_path("/stripe")
