"""Runtime configuration read from the Lambda environment."""

# Standard Library
import os

# Secret resolution
SECRET_MAX_ATTEMPTS = int(os.environ.get("SECRET_MAX_ATTEMPTS", "5"))

# Stripe
STRIPE_API_VERSION = os.environ.get("STRIPE_API_VERSION", "2020-08-27")
STRIPE_MAX_NETWORK_RETRIES = int(
    os.environ.get("STRIPE_MAX_NETWORK_RETRIES", "5")
)
STRIPE_SIGNATURE_TOLERANCE = int(
    os.environ.get("STRIPE_SIGNATURE_TOLERANCE", "300")
)

# Event bus producer
ENDPOINT_SECRET_STRING = os.environ.get("ENDPOINT_SECRET_STRING", "")
EVENT_BUS_NAME = os.environ.get("EVENT_BUS_NAME", "default")
EVENT_SOURCE = os.environ.get("SOURCE", "stripe.com")

# Edge function configuration injection
CONFIGURATION_FILE_NAME = "configuration.json"
CODE_DOWNLOAD_TIMEOUT_SECONDS = int(
    os.environ.get("CODE_DOWNLOAD_TIMEOUT_SECONDS", "30")
)
POLL_DELAY_SECONDS = int(os.environ.get("POLL_DELAY_SECONDS", "5"))
POLL_MAX_ATTEMPTS = int(os.environ.get("POLL_MAX_ATTEMPTS", "12"))
