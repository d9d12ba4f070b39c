"""Unit tests for ImageController."""

from datetime import datetime

import pytest

from sir.api.config.RenameConfig import RenameConfig
from sir.api.config.SirConfig import SirConfig
from sir.api.controller import ImageController, ImageNotFoundError, InvalidFilenameError
from tests.unit.conftest import minimal_config_dict, write_vault_file

pytestmark = pytest.mark.controller

NOW = datetime(2025, 1, 2, 3, 4, 5)


@pytest.fixture
def note(vault_dir):
    write_vault_file(vault_dir, "Trip.md", "Hello\n")
    return "Trip.md"


@pytest.fixture
def make_controller(backend, clock):
    def factory(**kwargs):
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("now", lambda: NOW)
        rename_config = kwargs.pop("rename_config", None)
        return ImageController(backend, rename_config, **kwargs)

    return factory


@pytest.fixture
def controller(make_controller):
    return make_controller()


class TestPaste:
    def test_saves_and_links_image(self, vault_dir, note, controller):
        processed = controller.paste_image(note, b"png-bytes", "image/png")
        assert processed.path == "Trip 1.png"
        assert processed.file_name == "Trip 1.png"
        assert processed.markdown_link == "![[Trip 1.png]]"
        assert (vault_dir / "Trip 1.png").read_bytes() == b"png-bytes"
        assert (vault_dir / "Trip.md").read_text() == "Hello\n![[Trip 1.png]]"
        assert controller.tracker.get_cached(note) == {"Trip 1.png"}

    def test_sequential_names(self, note, controller):
        controller.paste_image(note, b"1", "image/png")
        assert controller.paste_image(note, b"2", "image/png").path == "Trip 2.png"

    def test_extension_from_mime(self, note, controller):
        assert controller.paste_image(note, b"1", "image/jpeg").path == "Trip 1.jpg"

    def test_insert_at_offset(self, vault_dir, note, controller):
        controller.paste_image(note, b"1", "image/png", offset=0)
        assert (vault_dir / "Trip.md").read_text() == "![[Trip 1.png]]Hello\n"

    def test_offset_clamped(self, vault_dir, note, controller):
        controller.paste_image(note, b"1", "image/png", offset=999)
        assert (vault_dir / "Trip.md").read_text() == "Hello\n![[Trip 1.png]]"

    def test_non_image_payload_ignored(self, vault_dir, note, controller):
        assert controller.paste_image(note, b"text", "text/plain") is None
        assert sorted(p.name for p in vault_dir.iterdir()) == ["Trip.md"]

    def test_guard_expires(self, note, controller, clock):
        processed = controller.paste_image(note, b"1", "image/png")
        assert controller.is_processing(processed.path)
        clock.advance(1.0)
        assert not controller.is_processing(processed.path)

    def test_attachment_folder(self, vault_dir, make_controller):
        write_vault_file(vault_dir, "notes/Trip.md", "")
        controller = make_controller(attachment_folder="./assets")
        processed = controller.paste_image("notes/Trip.md", b"1", "image/png")
        assert processed.path == "notes/assets/Trip 1.png"
        assert processed.markdown_link == "![[Trip 1.png]]"
        assert (vault_dir / "notes" / "assets" / "Trip 1.png").exists()

    def test_timestamp_suffix(self, note, make_controller):
        controller = make_controller(rename_config=RenameConfig(suffix_mode="timestamp"))
        assert controller.paste_image(note, b"1", "image/png").path == "Trip 20250102-030405.png"

    def test_aggressive_sanitization(self, vault_dir, make_controller):
        write_vault_file(vault_dir, "Café & Città.md", "")
        controller = make_controller(rename_config=RenameConfig(aggressive_sanitization=True))
        assert controller.paste_image("Café & Città.md", b"1", "image/png").path == "cafe_citta 1.png"

    def test_drawing_suffix_removed(self, vault_dir, controller):
        write_vault_file(vault_dir, "Plan.excalidraw.md", "")
        assert controller.paste_image("Plan.excalidraw.md", b"1", "image/png").path == "Plan 1.png"

    def test_empty_note_name(self, vault_dir, controller):
        write_vault_file(vault_dir, "???.md", "")
        with pytest.raises(InvalidFilenameError):
            controller.paste_image("???.md", b"1", "image/png")


class TestDrop:
    def test_saves_every_image(self, vault_dir, note, controller):
        processed = controller.drop_images(
            note, [(b"1", "image/png"), (b"t", "text/plain"), (b"2", "image/png"), (b"3", "image/gif")]
        )
        assert [image.path for image in processed] == ["Trip 1.png", "Trip 2.png", "Trip 1.gif"]
        assert (vault_dir / "Trip.md").read_text() == "Hello\n![[Trip 1.png]]\n![[Trip 2.png]]\n![[Trip 1.gif]]"

    def test_nothing_to_drop(self, vault_dir, note, controller):
        assert controller.drop_images(note, [(b"t", "text/plain")]) == []
        assert (vault_dir / "Trip.md").read_text() == "Hello\n"


class TestFileCreated:
    def test_renames_after_active_note(self, vault_dir, note, controller):
        controller.open_document(note)
        write_vault_file(vault_dir, "Pasted image 1.png", b"x")
        assert controller.handle_file_created("Pasted image 1.png") == "Trip 1.png"
        assert (vault_dir / "Trip 1.png").exists()
        assert controller.is_processing("Trip 1.png")

    def test_keeps_folder(self, vault_dir, note, controller):
        controller.open_document(note)
        write_vault_file(vault_dir, "inbox/IMG_001.jpg", b"x")
        assert controller.handle_file_created("inbox/IMG_001.jpg") == "inbox/Trip 1.jpg"

    def test_own_writes_are_skipped(self, note, controller):
        controller.open_document(note)
        processed = controller.paste_image(note, b"1", "image/png")
        assert controller.handle_file_created(processed.path) is None

    def test_no_active_note(self, vault_dir, controller):
        write_vault_file(vault_dir, "Pasted image 1.png", b"x")
        assert controller.handle_file_created("Pasted image 1.png") is None

    def test_non_image_ignored(self, vault_dir, note, controller):
        controller.open_document(note)
        write_vault_file(vault_dir, "doc.pdf", b"x")
        assert controller.handle_file_created("doc.pdf") is None

    def test_auto_rename_off(self, vault_dir, note, make_controller):
        controller = make_controller(rename_config=RenameConfig(auto_rename_on_create=False))
        controller.open_document(note)
        write_vault_file(vault_dir, "a.png", b"x")
        assert controller.handle_file_created("a.png") is None

    def test_force_rename_is_one_shot(self, vault_dir, note, make_controller):
        controller = make_controller(rename_config=RenameConfig(auto_rename_on_create=False))
        controller.open_document(note)
        write_vault_file(vault_dir, "a.png", b"x")
        write_vault_file(vault_dir, "b.png", b"x")
        controller.arm_force_rename()
        assert controller.handle_file_created("a.png") == "Trip 1.png"
        assert controller.handle_file_created("b.png") is None

    def test_force_rename_lapses(self, vault_dir, note, make_controller, clock):
        controller = make_controller(rename_config=RenameConfig(auto_rename_on_create=False))
        controller.open_document(note)
        write_vault_file(vault_dir, "a.png", b"x")
        controller.arm_force_rename()
        clock.advance(1.5)
        assert controller.handle_file_created("a.png") is None

    def test_rename_updates_links_without_phantom_removal(self, vault_dir, controller):
        write_vault_file(vault_dir, "Trip.md", "![[Pasted image 1.png|Beach]]")
        write_vault_file(vault_dir, "Pasted image 1.png", b"x")
        controller.open_document("Trip.md")
        assert controller.handle_file_created("Pasted image 1.png") == "Trip 1.png"

        text = (vault_dir / "Trip.md").read_text()
        assert text == "![[Trip 1.png|Beach]]"
        controller.handle_editor_change("Trip.md", text)
        assert controller.flush() == []

    def test_rename_drops_check_queued_before_it(self, vault_dir, make_controller, clock):
        write_vault_file(vault_dir, "Trip.md", "Day one ![[Pasted image 1.png]]")
        write_vault_file(vault_dir, "Pasted image 1.png", b"x")
        seen = []
        controller = make_controller(confirm_delete=lambda prompt: seen.append(prompt.image_path) or False)
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "Day one, beach ![[Pasted image 1.png]]")
        assert controller.handle_file_created("Pasted image 1.png") == "Trip 1.png"

        clock.advance(1.0)
        assert controller.poll() == []
        assert seen == []
        assert (vault_dir / "Trip 1.png").exists()

    def test_rename_failure_is_not_raised(self, vault_dir, note, controller, backend, monkeypatch):
        controller.open_document(note)
        write_vault_file(vault_dir, "a.png", b"x")

        def rename(path, new_path):
            raise PermissionError(path)

        monkeypatch.setattr(backend, "rename", rename)
        assert controller.handle_file_created("a.png") is None


class TestLinkRemoval:
    @pytest.fixture
    def linked(self, vault_dir):
        write_vault_file(vault_dir, "a.png", b"x")
        write_vault_file(vault_dir, "Trip.md", "![[a.png]] text")
        return vault_dir

    def test_prompt_after_debounce(self, linked, controller, clock):
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", " text")
        assert controller.poll() == []
        clock.advance(0.35)
        (prompt,) = controller.poll()
        assert prompt.image_path == "a.png"
        assert prompt.document == "Trip.md"
        assert prompt.is_orphan
        assert not prompt.confirmed
        assert not prompt.trashed
        assert (linked / "a.png").exists()

    def test_typing_pushes_check_back(self, linked, controller, clock):
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", " text")
        clock.advance(0.2)
        controller.handle_editor_change("Trip.md", "![[a.png]] text")
        clock.advance(0.35)
        assert controller.poll() == []

    def test_confirmed_prompt_trashes(self, linked, make_controller):
        seen = []
        controller = make_controller(confirm_delete=lambda prompt: seen.append(prompt) or True)
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "")
        (prompt,) = controller.flush()
        assert seen == [prompt]
        assert prompt.trashed
        assert not (linked / "a.png").exists()
        assert (linked / ".trash" / "a.png").exists()

    def test_backlinks_reported(self, linked, controller):
        write_vault_file(linked, "Other.md", "![x](a.png)")
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "")
        (prompt,) = controller.flush()
        assert prompt.backlinks == ["Other.md"]
        assert not prompt.is_orphan

    def test_trash_failure_recorded(self, linked, make_controller, backend, monkeypatch):
        def trash(path):
            raise PermissionError(path)

        monkeypatch.setattr(backend, "trash", trash)
        controller = make_controller(confirm_delete=lambda prompt: True)
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "")
        (prompt,) = controller.flush()
        assert prompt.confirmed
        assert not prompt.trashed
        assert prompt.error == "a.png"

    def test_disabled(self, linked, make_controller):
        controller = make_controller(rename_config=RenameConfig(prompt_delete_on_link_removal=False))
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "")
        assert controller.flush() == []

    def test_missing_image_not_offered(self, vault_dir, controller):
        write_vault_file(vault_dir, "Trip.md", "![[gone.png]]")
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "")
        assert controller.flush() == []

    def test_paste_drops_check_queued_before_it(self, linked, make_controller, clock):
        seen = []
        controller = make_controller(confirm_delete=lambda prompt: seen.append(prompt.image_path) or False)
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "![[a.png]] text, more")
        processed = controller.paste_image("Trip.md", b"png", "image/png")

        clock.advance(1.0)
        assert controller.poll() == []
        assert seen == []
        assert controller.tracker.get_cached("Trip.md") == {"a.png", processed.file_name}

    def test_close_document_cancels_check(self, linked, controller):
        controller.open_document("Trip.md")
        controller.handle_editor_change("Trip.md", "")
        controller.close_document("Trip.md")
        assert controller.flush() == []
        assert controller.active_document is None


class TestContextActions:
    @pytest.fixture
    def linked(self, vault_dir):
        write_vault_file(vault_dir, "a.png", b"x")
        write_vault_file(vault_dir, "Trip.md", "Intro ![[a.png|old|300]]")
        return vault_dir

    def test_set_caption(self, linked, controller):
        assert controller.set_caption("Trip.md", "a.png", "new")
        assert (linked / "Trip.md").read_text() == "Intro ![[a.png|new|300]]"
        assert not controller.set_caption("Trip.md", "a.png", "new")

    def test_remove_caption(self, linked, controller):
        assert controller.remove_caption("Trip.md", "a.png")
        assert (linked / "Trip.md").read_text() == "Intro ![[a.png||300]]"
        assert not controller.remove_caption("Trip.md", "a.png")

    def test_rename_from_link(self, linked, controller):
        assert controller.rename_image_from_link("a.png", "Trip.md", "Sunset") == "Sunset.png"
        assert (linked / "Trip.md").read_text() == "Intro ![[Sunset.png|old|300]]"

    def test_rename_from_unknown_link(self, linked, controller):
        with pytest.raises(ImageNotFoundError, match="Image not found: ghost.png"):
            controller.rename_image_from_link("ghost.png", "Trip.md", "Sunset")
        with pytest.raises(ImageNotFoundError):
            controller.rename_image_from_link("Trip", "Trip.md", "Sunset")

    def test_rename_invalid_name(self, linked, controller):
        with pytest.raises(InvalidFilenameError):
            controller.rename_image("a.png", ":/")

    def test_cursor_helpers(self):
        assert ImageController.get_image_link_at_cursor("x ![y](My%20Image.png)", 4) == "My Image.png"
        assert ImageController.get_image_link_at_cursor("x ![[a.png]]", 0) is None
        assert ImageController.get_first_image_link_in_line("t ![[a.png|c]] ![[b.png]]") == "a.png"
        assert ImageController.extract_image_path_from_src("app://id/v/My%20Image.png?1") == "My Image.png"


def test_from_config(vault_dir, backend):
    config_dict = minimal_config_dict(vault_dir)
    config_dict["vault"]["attachment_folder"] = "Attachments"
    config_dict["tracker"]["debounce_ms"] = 500
    controller = ImageController.from_config(SirConfig(**config_dict), backend)
    assert controller.attachment_folder == "Attachments"
    assert controller.tracker_config.debounce_ms == 500


def test_controllers_do_not_share_state(backend, vault_dir):
    write_vault_file(vault_dir, "Trip.md", "![[a.png]]")
    first, second = ImageController(backend), ImageController(backend)
    first.open_document("Trip.md")
    assert second.tracker.get_cached("Trip.md") is None
    assert second.active_document is None
