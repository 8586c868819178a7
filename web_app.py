#!/usr/bin/env python3
"""FastAPI front end: a form that runs the label reconciler and streams its log."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterator, List, Literal, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, StreamingResponse
from pydantic import BaseModel, field_validator

from config import DEFAULT_API_URL, DEFAULT_LABELS, Label, SyncConfig
from events import (
    Event,
    LabelCreated,
    LabelsMissing,
    RepositoriesListed,
    RepositoryDone,
    RepositoryStarted,
    RunComplete,
    RunFailed,
)
from github_client import GitHubLabelClient
from label_reconciler import LabelReconciler
from logging_utils import Logger
from security import SecurityValidator
from web_page import INDEX_HTML

Severity = Literal["info", "success", "error", "progress"]
ClientFactory = Callable[[str, str], GitHubLabelClient]


class LabelModel(BaseModel):
    name: str
    color: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return SecurityValidator.validate_label_name(value.strip())

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        return SecurityValidator.validate_color(value.strip().lstrip("#"))

    def to_label(self) -> Label:
        return Label(name=self.name, color=self.color)


class SyncRequest(BaseModel):
    token: str = ""
    org: str = ""
    labels: List[LabelModel]
    dry_run: bool = False


class LogEntry(BaseModel):
    message: str
    timestamp: datetime
    severity: Severity = "info"


def make_entry(message: str, severity: Severity = "info") -> LogEntry:
    return LogEntry(
        message=SecurityValidator.sanitize_for_logging(message),
        timestamp=datetime.now(tz=timezone.utc),
        severity=severity,
    )


def entry_for_event(event: Event) -> Optional[LogEntry]:
    """Render an event for the on-screen log; None for events not shown."""
    if isinstance(event, RepositoriesListed):
        return make_entry(f"found {event.total} repositories", "success")
    if isinstance(event, RepositoryStarted):
        return make_entry(
            f"processing repository {event.index}/{event.total}: "
            f"{event.repository.name}",
            "progress",
        )
    if isinstance(event, LabelsMissing):
        names = ", ".join(label.name for label in event.labels)
        return make_entry(f"missing in {event.repository.name}: {names}")
    if isinstance(event, LabelCreated):
        verb = "would add" if event.dry_run else "added"
        return make_entry(
            f"{verb} label '{event.label.name}' to {event.repository.name}",
            "success",
        )
    if isinstance(event, RepositoryDone):
        return make_entry(
            f"progress: {event.percentage:.2f}% "
            f"({event.processed}/{event.total} repositories processed)",
            "progress",
        )
    if isinstance(event, RunComplete):
        verb = "would add" if event.dry_run else "added"
        return make_entry(
            f"done: processed {event.processed} repositories, "
            f"{verb} {event.added} labels",
            "success",
        )
    if isinstance(event, RunFailed):
        return make_entry(f"error: {event.error}", "error")
    return None


def _line(entry: LogEntry) -> str:
    return entry.model_dump_json() + "\n"


def stream_sync(
    request: SyncRequest, api_url: str, client_factory: ClientFactory
) -> Iterator[str]:
    """Yield NDJSON log lines for one sync run."""
    token = request.token.strip()
    org = request.org.strip()
    if not token or not org:
        yield _line(make_entry("error: GitHub token and organization are required", "error"))
        return

    try:
        org = SecurityValidator.validate_org(org)
        sync = SyncConfig(
            labels=[label.to_label() for label in request.labels],
            dry_run=request.dry_run,
        )
    except ValueError as e:
        yield _line(make_entry(f"error: {e}", "error"))
        return

    Logger.info(f"sync requested for organization: {org}")
    yield _line(make_entry("starting label sync"))
    yield _line(make_entry(f"fetching repositories for organization {org}", "progress"))

    client = None
    try:
        client = client_factory(api_url, token)
        reconciler = LabelReconciler.for_client(client, dry_run=sync.dry_run)
        for event in reconciler.iter_events(org, sync.labels):
            if isinstance(event, RunFailed):
                Logger.error(f"sync for {org} failed: {event.error}")
            entry = entry_for_event(event)
            if entry is not None:
                yield _line(entry)
    except Exception as e:
        Logger.error(f"sync for {org} failed: {e}")
        yield _line(make_entry(f"error: {e}", "error"))
    finally:
        if client is not None:
            client.close()


def create_app(
    api_url: str = DEFAULT_API_URL,
    client_factory: ClientFactory = GitHubLabelClient,
) -> FastAPI:
    api_url = SecurityValidator.validate_url(api_url)
    app = FastAPI(title="Prio Labels", docs_url=None, redoc_url=None)

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return INDEX_HTML

    @app.get("/api/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/labels/default")
    def default_labels() -> List[LabelModel]:
        return [LabelModel(name=label.name, color=label.color) for label in DEFAULT_LABELS]

    @app.post("/api/sync")
    def sync(request: SyncRequest) -> StreamingResponse:
        return StreamingResponse(
            stream_sync(request, api_url, client_factory),
            media_type="application/x-ndjson",
        )

    return app
