"""Error types raised by the food search application."""


class FoodSearchError(Exception):
    """Base class for all fatal application errors."""


class ConfigurationError(FoodSearchError):
    """Required configuration is missing or invalid."""


class ApiError(FoodSearchError):
    """A call to the food API failed."""


class AuthorizationError(ApiError):
    """The API rejected the configured credential."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"unauthorized (HTTP {status_code}): check that API_KEY is correct"
        )
        self.status_code = status_code


class UpstreamStatusError(ApiError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"unexpected HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class TransportError(ApiError):
    """The request never produced a response (DNS, connect, timeout)."""


class DecodeError(ApiError):
    """The response body did not match the expected shape."""
