import asyncio
import io

import pytest
from rich.console import Console

from citrusrules.cli.progress_manager import ProgressManager
from citrusrules.core.installer import TemplateInstaller
from citrusrules.exceptions import ResolutionError
from citrusrules.models.report import OutcomeState
from citrusrules.remote.fetcher import TemplateFetcher
from citrusrules.storage.writer import TemplateWriter


@pytest.fixture
def rules_dir(tmp_path):
    return tmp_path / ".cursor" / "rules"


@pytest.fixture
def installer(template_site, session, rules_dir):
    return TemplateInstaller(
        TemplateFetcher(session, template_site.base_url),
        TemplateWriter(rules_dir),
        max_workers=4,
    )


async def test_single_template_is_written(template_site, installer, rules_dir):
    template_site.add("security", "security content")

    report = await installer.install(["security"])

    assert report.ok
    assert (rules_dir / "security.mdc").read_text() == "security content"
    outcome = report.outcomes[0]
    assert outcome.state is OutcomeState.WRITTEN
    assert outcome.path == rules_dir / "security.mdc"
    assert outcome.size_bytes == len("security content")


async def test_fetches_and_writes_multiple_templates(
    template_site, installer, rules_dir
):
    names = ["feature", "agent", "api-design"]
    for name in names:
        template_site.add(name, f"{name} content")

    report = await installer.install(names)

    assert [o.identifier for o in report.outcomes] == names
    for name in names:
        assert (rules_dir / f"{name}.mdc").read_text() == f"{name} content"
    assert report.total_bytes == sum(len(f"{n} content") for n in names)


async def test_failed_fetch_does_not_stop_others(template_site, installer, rules_dir):
    template_site.add("security", "security content")

    report = await installer.install(["unknown-but-mapped-name", "security"])

    assert not report.ok
    failed, written = report.outcomes
    assert failed.state is OutcomeState.FETCH_FAILED
    assert "404" in failed.error
    assert written.state is OutcomeState.WRITTEN
    assert (rules_dir / "security.mdc").read_text() == "security content"
    assert not (rules_dir / "unknown-but-mapped-name.mdc").exists()


async def test_failed_write_is_reported_per_template(
    template_site, installer, rules_dir
):
    template_site.add("security", "security content")
    template_site.add("api-design", "api content")
    rules_dir.mkdir(parents=True)
    (rules_dir / "api-design.mdc").mkdir()

    report = await installer.install(["api-design", "security"])

    api, security = report.outcomes
    assert api.state is OutcomeState.WRITE_FAILED
    assert api.error
    assert security.state is OutcomeState.WRITTEN
    assert [o.name for o in report.failed] == ["api-design"]
    assert [o.name for o in report.succeeded] == ["security"]


async def test_empty_request_touches_nothing(template_site, installer, rules_dir):
    report = await installer.install([])

    assert report.outcomes == []
    assert report.ok
    assert template_site.requests == []
    assert not rules_dir.exists()


async def test_alias_is_fetched_and_written_under_canonical_name(
    template_site, installer, rules_dir
):
    template_site.add("development-workflow", "workflow")

    report = await installer.install(["dev-workflow"])

    assert template_site.requests == ["development-workflow.mdc"]
    assert (rules_dir / "development-workflow.mdc").read_text() == "workflow"
    assert not (rules_dir / "dev-workflow.mdc").exists()
    assert report.outcomes[0].identifier == "dev-workflow"
    assert report.outcomes[0].name == "development-workflow"


async def test_same_template_twice_keeps_last_fetch(
    template_site, installer, rules_dir
):
    template_site.add("security", "v1")
    template_site.add("security", "v2")

    report = await installer.install(["security", "security"])

    assert report.ok
    assert len(report.outcomes) == 2
    assert template_site.requests == ["security.mdc", "security.mdc"]
    assert [p.name for p in rules_dir.iterdir()] == ["security.mdc"]
    assert (rules_dir / "security.mdc").read_text() == "v2"


async def test_same_template_twice_keeps_last_successful_fetch(
    template_site, installer, rules_dir
):
    template_site.add("security", "v1")
    template_site.add("security", "gone", status=404)

    report = await installer.install(["security", "security"])

    first, second = report.outcomes
    assert first.state is OutcomeState.WRITTEN
    assert second.state is OutcomeState.FETCH_FAILED
    assert (rules_dir / "security.mdc").read_text() == "v1"


async def test_unsafe_identifier_aborts_before_any_request(
    template_site, installer, rules_dir
):
    template_site.add("security", "security content")

    with pytest.raises(ResolutionError):
        await installer.install(["security", "../escape"])

    assert template_site.requests == []
    assert not rules_dir.exists()


async def test_progress_manager_tracks_outcomes(template_site, session, rules_dir):
    template_site.add("security", "security content")
    progress_manager = ProgressManager(Console(file=io.StringIO()), total=2)
    installer = TemplateInstaller(
        TemplateFetcher(session, template_site.base_url),
        TemplateWriter(rules_dir),
        progress_manager=progress_manager,
    )

    async with progress_manager:
        await installer.install(["security", "missing"])

    stats = progress_manager.get_statistics()
    assert stats["completed"] == 1
    assert stats["failed"] == 1


class SlowFetcher:
    """Records how many fetches are in flight at once."""

    def __init__(self):
        self.active = 0
        self.peak = 0

    async def fetch(self, name: str) -> bytes:
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.02)
        self.active -= 1
        return name.encode()


async def test_concurrent_fetches_are_bounded_by_max_workers(rules_dir):
    fetcher = SlowFetcher()
    installer = TemplateInstaller(fetcher, TemplateWriter(rules_dir), max_workers=2)

    report = await installer.install([f"template-{i}" for i in range(6)])

    assert report.ok
    assert fetcher.peak == 2
    assert (rules_dir / "template-5.mdc").read_bytes() == b"template-5"
