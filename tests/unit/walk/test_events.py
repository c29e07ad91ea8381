"""Unit tests for walk diagnostics."""

import logging

import pytest
from conftest import EventRecorder, OcflTree
from ocflwalk.drivers.file import FileDriver
from ocflwalk.layout.probe import root_ref
from ocflwalk.models.entity import EntityType, Select
from ocflwalk.walk.events import WalkEvent, logging_observer
from ocflwalk.walk.scope import Scope


class TestWalkEvent:
    """Tests for WalkEvent."""

    def test_format(self) -> None:
        """format() renders the name followed by key=value pairs."""
        event = WalkEvent(logging.DEBUG, "object.enter", {"id": "obj-A", "path": "/r/a"})

        assert event.format() == "object.enter id=obj-A path=/r/a"

    def test_format_without_fields(self) -> None:
        """An event without fields renders as its name."""
        assert WalkEvent(logging.DEBUG, "walk.done").format() == "walk.done"


class TestWalkEvents:
    """Tests for the events a walk emits."""

    def test_records_walk_events(
        self, ocfl_tree: OcflTree, event_recorder: EventRecorder
    ) -> None:
        """A walk emits start, per-object and done events."""
        Scope(root_ref(ocfl_tree.root), EntityType.VERSION, observer=event_recorder).walk(
            lambda _ref: None
        )

        names = event_recorder.names()
        assert names[0] == "walk.start"
        assert names[-1] == "walk.done"
        assert names.count("object.enter") == 2
        assert names.count("object.versions") == 2

    def test_start_event_fields(
        self, ocfl_tree: OcflTree, event_recorder: EventRecorder
    ) -> None:
        """The start event describes the walk."""
        FileDriver(ocfl_tree.root, observer=event_recorder).walk(
            Select(EntityType.FILE), lambda _ref: None, "obj-A"
        )

        # The object lookup walks the root first
        starts = [e for e in event_recorder.events if e.name == "walk.start"]
        assert [e.fields["start_type"] for e in starts] == ["root", "object"]
        start = starts[-1]
        assert start.fields["start_type"] == "object"
        assert start.fields["desired"] == "file"
        assert start.fields["resolving"] is False

    def test_min_level_filters(self, ocfl_tree: OcflTree) -> None:
        """Events below the minimum level are dropped."""
        recorder = EventRecorder(min_level=logging.INFO)

        Scope(root_ref(ocfl_tree.root), EntityType.OBJECT, observer=recorder).collect()

        assert recorder.events == []

    def test_no_observer_no_events(self, ocfl_tree: OcflTree) -> None:
        """Walking without an observer works and emits nothing."""
        scope = Scope(root_ref(ocfl_tree.root), EntityType.OBJECT)

        assert len(scope.collect()) == 2


class TestLoggingObserver:
    """Tests for logging_observer."""

    def test_forwards_to_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Events are logged at their own level."""
        with caplog.at_level(logging.DEBUG, logger="ocflwalk"):
            logging_observer(WalkEvent(logging.DEBUG, "walk.done"))

        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].getMessage() == "walk.done"
