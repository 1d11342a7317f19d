import json
import logging
from os import environ
from pathlib import Path

import boto3
import pydantic
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict

from ridefare.errors import PricingConfigError
from ridefare.models.pricing import PricingConfig
from ridefare.pricing_defaults import DEFAULT_PRICING_CONFIG

logger = logging.getLogger(__name__)

_cached_maps_api_key: str | None = None


def _resolve_maps_api_key() -> str:
    """Fetch the Google Maps key from Secrets Manager at runtime, with caching."""
    global _cached_maps_api_key
    if _cached_maps_api_key is not None:
        return _cached_maps_api_key

    # Local dev: use env var directly
    direct = environ.get("GOOGLE_MAPS_API_KEY", "")
    if direct:
        _cached_maps_api_key = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("GOOGLE_MAPS_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_maps_api_key = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_maps_api_key


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    environment: str
    log_level: str = "INFO"
    pricing_config_path: str | None = None
    pricing_config_parameter: str | None = None
    distance_matrix_url: str
    route_timeout_seconds: float = 5.0
    google_maps_api_key: str = ""


_cached_config: Config | None = None
_cached_pricing_config: PricingConfig | None = None


def _reset_config() -> None:
    """Reset cached config, for testing only."""
    global _cached_config, _cached_maps_api_key, _cached_pricing_config
    _cached_config = None
    _cached_maps_api_key = None
    _cached_pricing_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        pricing_config_path=environ.get("PRICING_CONFIG_PATH"),
        pricing_config_parameter=environ.get("PRICING_CONFIG_PARAMETER"),
        distance_matrix_url=environ.get(
            "DISTANCE_MATRIX_URL", "https://maps.googleapis.com/maps/api/distancematrix/json"
        ),
        route_timeout_seconds=float(environ.get("ROUTE_TIMEOUT_SECONDS", "5.0")),
        google_maps_api_key=_resolve_maps_api_key(),
    )
    return _cached_config


def _parse_pricing_config(raw: str, source: str) -> PricingConfig:
    try:
        return PricingConfig.model_validate(json.loads(raw))
    except (json.JSONDecodeError, pydantic.ValidationError) as e:
        raise PricingConfigError(f"Invalid pricing config from {source}: {e}") from e


def load_pricing_config(config: Config) -> PricingConfig:
    """Read the fare table from a JSON file, then SSM Parameter Store, else the built-in defaults."""
    if config.pricing_config_path:
        path = Path(config.pricing_config_path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PricingConfigError(f"Cannot read pricing config {path}: {e}") from e
        logger.info("Loaded pricing config from %s", path)
        return _parse_pricing_config(raw, str(path))

    if config.pricing_config_parameter:
        client = boto3.client("ssm", region_name=config.aws_region)
        try:
            response = client.get_parameter(Name=config.pricing_config_parameter, WithDecryption=True)
        except (ClientError, BotoCoreError) as e:
            raise PricingConfigError(
                f"Cannot read pricing config parameter {config.pricing_config_parameter}: {e}"
            ) from e
        logger.info("Loaded pricing config from SSM parameter %s", config.pricing_config_parameter)
        return _parse_pricing_config(response["Parameter"]["Value"], config.pricing_config_parameter)

    return DEFAULT_PRICING_CONFIG


def get_pricing_config() -> PricingConfig:
    global _cached_pricing_config
    if _cached_pricing_config is not None:
        return _cached_pricing_config

    _cached_pricing_config = load_pricing_config(get_config())
    return _cached_pricing_config
