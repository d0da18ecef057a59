import aiohttp
import asyncio
import time
from dataclasses import dataclass
from typing import Optional, Dict

from loguru import logger

from stellar_federation.config_reader import config
from stellar_federation.errors import TransportError


@dataclass
class WebResponse:
    status: int  # HTTP status code
    body: bytes  # raw response body
    headers: Optional[Dict[str, str]] = None
    elapsed_time: Optional[float] = None  # seconds

    @property
    def text(self) -> str:
        return self.body.decode('utf-8', errors='replace')


class HTTPSessionManager:
    def __init__(self, timeout: Optional[float] = None, max_session_duration: Optional[int] = None,
                 user_agent: Optional[str] = None):
        self.session: Optional[aiohttp.ClientSession] = None
        self.session_start_time: float = 0.0
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.max_session_duration = (max_session_duration if max_session_duration is not None
                                     else config.max_session_duration)
        self.user_agent = user_agent or config.user_agent
        self._lock = asyncio.Lock()
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    async def get_session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            # session and lock of a previous event loop are unusable here
            if self.session is not None and not self.session.closed:
                logger.warning("HTTP session belongs to another event loop, dropping it")
            self.session = None
            self._lock = asyncio.Lock()
            self._loop = loop

        async with self._lock:
            current_time = time.monotonic()
            if (
                    self.session is None
                    or self.session.closed
                    or current_time - self.session_start_time > self.max_session_duration
            ):
                if self.session and not self.session.closed:
                    await self.session.close()
                self.session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    headers={'User-Agent': self.user_agent, 'Accept': 'application/json'},
                )
                self.session_start_time = current_time
                logger.info("HTTP session created")
            return self.session

    async def close(self):
        if self._loop is not asyncio.get_running_loop():
            # no session was opened in this loop, the old one can not be closed here
            self.session = None
            return
        async with self._lock:
            if self.session and not self.session.closed:
                await self.session.close()
                logger.info("HTTP session closed")

    async def fetch(self, url: str) -> WebResponse:
        """
        GET url with the shared session.

        :param url: Fully built request URL.
        :return: WebResponse with the status and the raw body, for any status.
        :raises TransportError: connection, TLS or timeout failure.
        """
        session = await self.get_session()
        start_time = time.monotonic()

        try:
            async with session.get(url) as response:
                body = await response.read()
                return WebResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers),
                    elapsed_time=time.monotonic() - start_time,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Request to {url} failed: {e!r}")
            raise TransportError(url, e) from e


http_session_manager = HTTPSessionManager()
