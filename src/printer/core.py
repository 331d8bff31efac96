from abc import ABC, abstractmethod
from enum import StrEnum
from types import TracebackType
from typing import Self

from httpx import AsyncClient
from pydantic import HttpUrl

from printer.models import JobSnapshot, StateSnapshot


class PrinterApi(StrEnum):
    OctoPrint = "OctoPrint"
    Mock = "Mock"


class BaseActualPrinter(ABC):
    def __init__(self, url: str | HttpUrl, api_key: str | None = None):
        self.url: str = str(url).rstrip("/")
        self.api_key: str = api_key or ""

    async def setup(self) -> None:
        ...

    async def cleanup(self) -> None:
        ...

    @abstractmethod
    async def fetch_job(self) -> JobSnapshot:
        ...

    @abstractmethod
    async def fetch_state(self) -> StateSnapshot:
        ...

    async def __aenter__(self) -> Self:
        await self.setup()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.cleanup()


Headers = dict[str, str]


class BaseHttpPrinter(BaseActualPrinter, ABC):
    def __init__(
        self,
        url: str | HttpUrl,
        api_key: str | None = None,
        client: AsyncClient | None = None,
    ) -> None:
        super().__init__(url, api_key)
        self._owns_client: bool = client is None
        self.client: AsyncClient = client or AsyncClient()

    @property
    def headers(self) -> Headers:
        return {"X-Api-Key": self.api_key}

    async def cleanup(self) -> None:
        if self._owns_client:
            await self.client.aclose()
