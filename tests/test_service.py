"""Tests for the puzzle site client, HTML flattening and the local cache."""

import httpx
import pytest

from aoc_runner.exceptions import ServiceError
from aoc_runner.models import PuzzleId
from aoc_runner.service import AdventClient, PuzzleFetcher, page_text

PUZZLE = PuzzleId(2023, 5)

DAY_PAGE = """<!DOCTYPE html>
<html><body>
<header><h1>Advent of Code</h1></header>
<main>
<article class="day-desc"><h2>--- Day 5: Seeds ---</h2>
<p>The almanac lists seeds <code>79</code> and <code>14</code>.</p>
<ul><li>First rule</li><li>Second rule</li></ul>
</article>
<p>Your puzzle answer was <code>35</code>.</p>
<p>You can <a href="5/input">get your puzzle input</a>.</p>
</main>
</body></html>
"""

ANSWER_PAGE = """<html><body><main>
<article><p>That's the right answer!  You are one gold star closer.
<a href="/2023/day/5#part2">[Continue to Part Two]</a></p></article>
</main></body></html>
"""


class TestPageText:
    def test_code_becomes_backticks(self):
        text = page_text(DAY_PAGE)
        assert "Your puzzle answer was `35`." in text
        assert "seeds `79` and `14`" in text

    def test_links_and_lists(self):
        text = page_text(DAY_PAGE)
        assert "[get your puzzle input](5/input)" in text
        assert "- First rule" in text
        assert "- Second rule" in text

    def test_only_container_text(self):
        text = page_text(DAY_PAGE)
        assert text.startswith("--- Day 5: Seeds ---")
        assert "Advent of Code" not in text

    def test_blocks_are_separated(self):
        text = page_text(DAY_PAGE)
        assert "--- Day 5: Seeds ---\n\nThe almanac" in text
        assert "\n\n\n" not in text

    def test_missing_container_falls_back_to_body(self):
        assert page_text("<html><body><p>Plain</p></body></html>", container="article") == "Plain"

    def test_submit_reply(self):
        text = page_text(ANSWER_PAGE, container="article")
        assert text.startswith("That's the right answer!")
        assert "[[Continue to Part Two]](/2023/day/5#part2)" in text


@pytest.fixture
def requests():
    return []


@pytest.fixture
def make_client(requests):
    def factory(status: int = 200, answer_page: str = ANSWER_PAGE) -> AdventClient:
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if status != 200:
                return httpx.Response(status, text="Please log in")
            if request.url.path.endswith("/input"):
                return httpx.Response(200, text="79 14 55 13\n")
            if request.url.path.endswith("/answer"):
                return httpx.Response(200, text=answer_page)
            return httpx.Response(200, text=DAY_PAGE)

        return AdventClient(
            "0123456789abcdef",
            base_url="https://puzzles.test",
            user_agent="aoc-runner-tests",
            transport=httpx.MockTransport(handler),
        )

    return factory


class TestAdventClient:
    def test_get_input(self, make_client, requests):
        with make_client() as client:
            assert client.get_input(2023, 5) == "79 14 55 13\n"
        request = requests[0]
        assert request.url == "https://puzzles.test/2023/day/5/input"
        assert request.headers["User-Agent"] == "aoc-runner-tests"
        assert "session=0123456789abcdef" in request.headers["Cookie"]

    def test_get_instructions(self, make_client):
        with make_client() as client:
            text = client.get_instructions(2023, 5)
        assert "Your puzzle answer was `35`." in text

    def test_submit_posts_level_and_answer(self, make_client, requests):
        with make_client() as client:
            reply = client.submit(2023, 5, 2, "46")
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/2023/day/5/answer"
        assert sorted(request.content.decode().split("&")) == ["answer=46", "level=2"]
        assert reply.startswith("That's the right answer!")

    @pytest.mark.parametrize("status", [400, 404, 500])
    def test_error_status_raises(self, make_client, status):
        with make_client(status=status) as client:
            with pytest.raises(ServiceError) as exc_info:
                client.get_input(2023, 5)
        assert exc_info.value.status == status


class TestPuzzleFetcher:
    @pytest.fixture
    def counting_factory(self, make_client):
        built = []

        def factory():
            client = make_client()
            built.append(client)
            return client

        factory.built = built
        return factory

    def test_input_is_cached(self, layout, counting_factory, requests):
        fetcher = PuzzleFetcher(counting_factory, layout)
        assert fetcher.fetch_input(PUZZLE) == "79 14 55 13\n"
        assert fetcher.fetch_input(PUZZLE) == "79 14 55 13\n"
        assert len(requests) == 1
        assert layout.input_path(PUZZLE).read_text() == "79 14 55 13\n"

    def test_cache_hit_never_builds_a_client(self, layout, counting_factory):
        path = layout.instructions_path(PUZZLE)
        path.parent.mkdir(parents=True)
        path.write_text("cached\n")
        fetcher = PuzzleFetcher(counting_factory, layout)
        assert fetcher.fetch_instructions(PUZZLE) == "cached\n"
        assert counting_factory.built == []

    def test_overwrite_refetches(self, layout, counting_factory, requests):
        path = layout.instructions_path(PUZZLE)
        path.parent.mkdir(parents=True)
        path.write_text("stale\n")
        fetcher = PuzzleFetcher(counting_factory, layout)
        text = fetcher.fetch_instructions(PUZZLE, overwrite=True)
        assert "Your puzzle answer was `35`." in text
        assert text.endswith("\n")
        assert path.read_text() == text
        assert len(requests) == 1

    def test_client_is_reused_and_closed(self, layout, counting_factory):
        fetcher = PuzzleFetcher(counting_factory, layout)
        fetcher.fetch_input(PUZZLE)
        fetcher.fetch_instructions(PUZZLE)
        assert len(counting_factory.built) == 1
        fetcher.close()
        fetcher.close()
