"""Tests for blocker resolution and link recording."""

import pytest

from links_tools.adapters.github.exceptions import IssueFetchError, LinkMutationError
from links_tools.adapters.github.links import add_link, build_graph, find_blockers, remove_link
from links_tools.adapters.github.schemas import IssueLink

REPO = "owner/repo"


class TestFindBlockers:
    """Tests for find_blockers."""

    @pytest.mark.asyncio
    async def test_text_and_search_are_merged_without_duplicates(self, fake_repo):
        """Test text mentions and search hits merge in first-seen order."""
        fake_repo.add(10, body="Blocked by #7", comments=["waiting on #8", "depends on #7"])
        fake_repo.search_results["blocks #10"] = [7, 12]

        result = await find_blockers(fake_repo, REPO, 10)

        assert result.issue == 10
        assert result.blocked_by == [7, 8, 12]
        assert fake_repo.searches == [(REPO, "blocks #10", 50)]

    @pytest.mark.asyncio
    async def test_no_blockers(self, fake_repo):
        """Test an issue without blockers gives an empty list."""
        fake_repo.add(10, body="Nothing here")

        result = await find_blockers(fake_repo, REPO, 10)

        assert result.blocked_by == []

    @pytest.mark.asyncio
    async def test_issue_itself_is_not_its_own_blocker(self, fake_repo):
        """Test the target issue is dropped from search hits."""
        fake_repo.add(10)
        fake_repo.search_results["blocks #10"] = [10, 3]

        result = await find_blockers(fake_repo, REPO, 10)

        assert result.blocked_by == [3]

    @pytest.mark.asyncio
    async def test_fetch_failure_is_fatal(self, fake_repo):
        """Test a failed lookup aborts before searching."""
        with pytest.raises(IssueFetchError):
            await find_blockers(fake_repo, REPO, 10)
        assert fake_repo.searches == []

    @pytest.mark.asyncio
    async def test_search_failure_is_fatal(self, fake_repo):
        """Test a failed search aborts the resolution."""
        fake_repo.add(10, body="blocked by #7")
        fake_repo.fail_search = True

        with pytest.raises(IssueFetchError):
            await find_blockers(fake_repo, REPO, 10)


class TestLinkRecorder:
    """Tests for add_link / remove_link."""

    @pytest.mark.asyncio
    async def test_add_posts_comment_on_source(self, fake_repo):
        """Test adding a link comments on the source issue."""
        fake_repo.add(1)

        record = await add_link(fake_repo, REPO, 1, 2, "blocks")

        assert record.status == "created"
        assert len(fake_repo.comments) == 1
        repo, number, body = fake_repo.comments[0]
        assert (repo, number) == (REPO, 1)
        assert "Blocks #2" in body

    @pytest.mark.asyncio
    async def test_added_link_shows_up_in_graph(self, fake_repo):
        """Test a recorded link is extracted by the next graph build."""
        fake_repo.add(1)
        fake_repo.add(2)

        await add_link(fake_repo, REPO, 1, 2, "blocks")
        graph = await build_graph(fake_repo, REPO, 1, max_depth=1)

        assert IssueLink(source=1, target=2, type="blocks") in graph.edges

    @pytest.mark.asyncio
    async def test_dry_run_posts_nothing(self, fake_repo):
        """Test dry-run returns the comment without posting it."""
        record = await add_link(fake_repo, REPO, 1, 2, "child", dry_run=True)

        assert record.status == "dry_run"
        assert "Child of #2" in record.comment
        assert fake_repo.comments == []

    @pytest.mark.asyncio
    async def test_comment_failure_propagates(self, fake_repo):
        """Test a failed comment post raises."""
        fake_repo.fail_comment = True

        with pytest.raises(LinkMutationError):
            await add_link(fake_repo, REPO, 1, 2, "relates")

    def test_remove_returns_guidance(self):
        """Test removal returns manual guidance."""
        guidance = remove_link(REPO, 1, 2, "blocks")

        assert guidance.source == 1
        assert guidance.url == "https://github.com/owner/repo/issues/1"
