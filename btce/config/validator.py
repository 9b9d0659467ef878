"""Additional configuration validation logic"""

from urllib.parse import urlparse

from btce.config.models import ClientConfig


def validate_config_constraints(config: ClientConfig) -> None:
    """
    Perform additional validation beyond Pydantic model validators.

    Args:
        config: ClientConfig instance to validate

    Raises:
        ValueError: If validation fails
    """
    exchange = config.exchange

    # Credentials travel in headers; refuse plaintext transport
    for name in ("trading_url", "public_url"):
        url = getattr(exchange, name)
        parsed = urlparse(url)
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValueError(f"{name} must be an https:// URL, got: {url}")

    # Endpoint names are appended to public_url
    if not exchange.public_url.endswith("/"):
        raise ValueError("public_url must end with '/'")

    if exchange.api_key_env == exchange.api_secret_env:
        raise ValueError("api_key_env and api_secret_env must name different variables")
