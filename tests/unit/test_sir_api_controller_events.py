"""Unit tests for watchdog event collection and event processing."""

import pytest
from watchdog.events import DirCreatedEvent, FileCreatedEvent, FileModifiedEvent, FileMovedEvent

from sir.api.controller._EventHandler import _EventHandler
from sir.api.controller._process_events import _process_events
from sir.api.controller.FilesystemEvents import FilesystemEvents
from sir.api.controller.ImageController import ImageController
from tests.unit.conftest import write_vault_file

pytestmark = pytest.mark.controller


class TestEventHandler:
    def test_accumulates_and_clears(self):
        handler = _EventHandler()
        handler.on_created(FileCreatedEvent("/v/a.png"))
        handler.on_created(FileCreatedEvent("/v/a.png"))
        handler.on_modified(FileModifiedEvent("/v/n.md"))
        handler.on_moved(FileMovedEvent("/v/old.md", "/v/new.md"))
        handler.on_created(DirCreatedEvent("/v/folder"))

        events = handler.get_and_clear_events()
        assert events.created == ["/v/a.png"]
        assert events.modified == ["/v/n.md"]
        assert events.moved == [("/v/old.md", "/v/new.md")]
        assert handler.get_and_clear_events().is_empty()


class TestProcessEvents:
    @pytest.fixture
    def controller(self, backend, clock):
        return ImageController(backend, clock=clock)

    def test_empty_batch(self, controller):
        assert _process_events(controller, FilesystemEvents()) == []

    def test_edited_note_becomes_active_and_new_image_is_renamed(self, vault_dir, controller):
        write_vault_file(vault_dir, "Trip.md", "Hello")
        write_vault_file(vault_dir, "Pasted image 1.png", b"x")
        events = FilesystemEvents(
            modified=[str(vault_dir / "Trip.md")],
            created=[str(vault_dir / "Pasted image 1.png")],
        )
        assert _process_events(controller, events) == ["Trip 1.png"]
        assert controller.active_document == "Trip.md"
        assert (vault_dir / "Trip 1.png").exists()

    def test_second_edit_queues_link_check(self, vault_dir, controller, clock):
        write_vault_file(vault_dir, "a.png", b"x")
        note = write_vault_file(vault_dir, "Trip.md", "![[a.png]]")
        _process_events(controller, FilesystemEvents(modified=[str(note)]))

        note.write_text("gone", encoding="utf-8")
        _process_events(controller, FilesystemEvents(modified=[str(note)]))
        clock.advance(1)
        assert [prompt.image_path for prompt in controller.poll()] == ["a.png"]

    def test_moved_note_keeps_snapshot(self, vault_dir, controller):
        old = write_vault_file(vault_dir, "Old.md", "![[a.png]]")
        controller.open_document("Old.md")
        new = vault_dir / "New.md"
        old.rename(new)
        _process_events(controller, FilesystemEvents(moved=[(str(old), str(new))]))
        assert controller.tracker.get_cached("New.md") == {"a.png"}
        assert controller.tracker.get_cached("Old.md") is None

    def test_internal_folders_and_outside_paths_ignored(self, vault_dir, tmp_path, controller):
        write_vault_file(vault_dir, "Trip.md", "")
        controller.open_document("Trip.md")
        write_vault_file(vault_dir, ".trash/Pasted image 1.png", b"x")
        outside = tmp_path / "elsewhere.png"
        outside.write_bytes(b"x")
        events = FilesystemEvents(created=[str(vault_dir / ".trash" / "Pasted image 1.png"), str(outside)])
        assert _process_events(controller, events) == []

    def test_modified_image_is_not_renamed(self, vault_dir, controller):
        write_vault_file(vault_dir, "Trip.md", "")
        controller.open_document("Trip.md")
        image = write_vault_file(vault_dir, "IMG_1.png", b"x")
        assert _process_events(controller, FilesystemEvents(modified=[str(image)])) == []
