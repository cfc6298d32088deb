import logging

import requests

from .errors import NetworkError
from .models import ScraperConfig

logger = logging.getLogger(__name__)


class RequestsClient:
    def __init__(self, config: ScraperConfig, headers: dict[str, str] | None = None):
        self.config = config
        self.session = requests.Session()

        default_headers = {"User-Agent": config.user_agent}
        if headers:
            default_headers.update(headers)

        self.session.headers.update(default_headers)

    def get(self, url: str, **kwargs) -> requests.Response:
        """GET ``url`` without judging the status code.

        Callers decide what a 404 means; only transport failures (connection
        errors, timeouts) are turned into :class:`NetworkError` here.
        """
        timeout = kwargs.pop("timeout", self.config.timeout_seconds)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise NetworkError(f"Request to {url} failed: {e}") from e

        logger.debug("GET %s -> %s", url, response.status_code)
        # pbinfo serves UTF-8; requests falls back to latin-1 for text/html
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
