"""
Handles the low-level downloading of a single item over HTTP into a new local file.
"""

import asyncio
import logging
from pathlib import Path

import aiofiles
import aiohttp

from mcm_cli.exceptions import LocalWriteError, NetworkError
from mcm_cli.models.config import DEFAULT_USER_AGENT

log = logging.getLogger(__name__)


class Fetcher:
    """
    Downloads one URL at a time into a freshly created file.

    Each step of a fetch fails with its own error kind: creating the file and
    writing to it raise LocalWriteError, the request and reading the body
    raise NetworkError. Nothing is cleaned up after a failure, so a partial or
    empty file may remain at the destination.
    """

    CHUNK_SIZE = 131072  # 128 KB

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._session = session
        self._owns_session = session is None
        self.timeout = timeout
        self.user_agent = user_agent

    async def _get_session(self) -> aiohttp.ClientSession:
        """Gets or lazily creates the ClientSession used for every fetch."""
        if self._session is None or self._session.closed:
            kwargs = {"headers": {"User-Agent": self.user_agent}}
            if self.timeout:
                kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(**kwargs)
            self._owns_session = True
            log.debug("Created download session.")
        return self._session

    async def close(self) -> None:
        """Closes the session if this fetcher created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            log.debug("Download session closed.")

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(
        self,
        destination_path: Path,
        url: str,
        *,
        item_name: str = "",
        category: str = "",
    ) -> int:
        """
        Creates `destination_path` and fills it with the body of `url`.

        Returns:
            The number of bytes written.

        Raises:
            LocalWriteError: If the file cannot be created or written.
            NetworkError: If the request fails or the status is not 2xx.
        """
        context = {
            "item_name": item_name or destination_path.name,
            "url": url,
            "path": destination_path,
            "category": category,
        }

        try:
            f = await aiofiles.open(destination_path, "xb")
        except OSError as e:
            raise LocalWriteError(
                f"Failed create file: {destination_path}: {e}", cause=e, **context
            ) from e

        try:
            return await self._stream_to_file(f, url, context)
        finally:
            try:
                await f.close()
            except OSError as e:
                raise LocalWriteError(
                    f"Failed write to: {destination_path}: {e}", cause=e, **context
                ) from e

    async def _stream_to_file(self, f, url: str, context: dict) -> int:
        path = context["path"]
        bytes_written = 0
        try:
            session = await self._get_session()
            log.debug(f"Download from: {url}")
            async with session.get(url, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise NetworkError(
                        f"Failed download: {url}: HTTP {response.status} "
                        f"{response.reason or ''}".rstrip(),
                        **context,
                    )

                log.debug(f"Install to: {path}")
                async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                    try:
                        await f.write(chunk)
                    except OSError as e:
                        raise LocalWriteError(
                            f"Failed write to: {path}: {e}", cause=e, **context
                        ) from e
                    bytes_written += len(chunk)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(
                f"Failed download: {url}: {str(e) or type(e).__name__}",
                cause=e,
                **context,
            ) from e
        return bytes_written
