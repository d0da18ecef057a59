# stellar_federation/stellar/toml_resolver.py
"""stellar.toml (SEP-1) lookups through stellar_sdk."""

from typing import Any, Optional

from loguru import logger
from stellar_sdk.client.aiohttp_client import AiohttpClient
from stellar_sdk.sep.stellar_toml import fetch_stellar_toml_async

from stellar_federation.config_reader import config


class StellarTomlResolver:
    """Fetch https://<domain>/.well-known/stellar.toml with a short-lived AiohttpClient."""

    def __init__(self, use_http: Optional[bool] = None, request_timeout: Optional[float] = None):
        self.use_http = config.stellar_toml_use_http if use_http is None else use_http
        self.request_timeout = config.request_timeout if request_timeout is None else request_timeout

    async def fetch(self, domain: str) -> dict[str, Any]:
        client = AiohttpClient(request_timeout=self.request_timeout, user_agent=config.user_agent)
        try:
            logger.debug(f"Fetching stellar.toml of {domain}")
            return await fetch_stellar_toml_async(domain, client=client, use_http=self.use_http)
        finally:
            await client.close()
