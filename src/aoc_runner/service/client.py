"""HTTP client for the puzzle site."""

from typing import Optional

import httpx

from ..exceptions import ServiceError
from ..logging_config import get_logger
from .html import page_text

logger = get_logger(__name__)


class AdventClient:
    """One request per call; nothing here retries."""

    def __init__(
        self,
        session_token: str,
        base_url: str = "https://adventofcode.com",
        user_agent: str = "aoc-runner",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._sanitized = "..." + session_token[-4:]
        self._http = httpx.Client(
            base_url=base_url,
            cookies={"session": session_token},
            headers={"User-Agent": user_agent},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "AdventClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _checked(self, response: httpx.Response) -> httpx.Response:
        if response.status_code != 200:
            logger.error("got %s status code", response.status_code)
            logger.debug(response.text)
            raise ServiceError(str(response.url), response.status_code)
        return response

    def get_instructions(self, year: int, day: int) -> str:
        logger.info("Fetching instructions for %d day %02d", year, day)
        response = self._checked(self._http.get(f"/{year}/day/{day}"))
        return page_text(response.text, container="main")

    def get_input(self, year: int, day: int) -> str:
        logger.info("Fetching input for %d day %02d", year, day)
        return self._checked(self._http.get(f"/{year}/day/{day}/input")).text

    def submit(self, year: int, day: int, part: int, answer: str) -> str:
        """Post an answer and return the site's reply as text."""
        logger.info(
            "Posting %r for %d day %02d part %d (token=%s)",
            answer,
            year,
            day,
            part,
            self._sanitized,
        )
        response = self._checked(
            self._http.post(
                f"/{year}/day/{day}/answer", data={"level": str(part), "answer": answer}
            )
        )
        return page_text(response.text, container="article")
