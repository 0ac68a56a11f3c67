"""
Format Tests - Loading and saving whole documents.
"""

import logging
import os
import stat
import tempfile
import zipfile
from dataclasses import replace
from pathlib import Path

import pytest

from nlogofmt import CodecError, Model, NLogoFormat, SectionCountMismatch, UnsupportedLocation
from nlogofmt.info import empty_info
from nlogofmt.io import atomic_write, read_text, writable_path
from nlogofmt.logging_config import setup_logging
from nlogofmt.sections import join_sections, split_sections
from nlogofmt.shapes import default_link_shapes, default_shapes
from nlogofmt.spec import (
    CURRENT_VERSION,
    SECTION_CODE,
    SECTION_INFO,
    SECTION_INTERFACE,
    SECTION_PREVIEW_COMMANDS,
    SECTION_VERSION,
)
from nlogofmt.versions import threshold_auto_convert
from nlogofmt.widgets import default_view

from samples import build_document


@pytest.fixture
def fmt():
    return NLogoFormat()


@pytest.fixture
def nlogo_file(document):
    with tempfile.NamedTemporaryFile(suffix=".nlogo", delete=False) as f:
        path = f.name
    Path(path).write_text(document, encoding="utf-8")
    yield path
    Path(path).unlink()


# =============================================================================
# Parsing
# =============================================================================

class TestModelFromSource:

    def test_fields(self, fmt, document):
        model = fmt.model_from_source(document)
        assert model.code == "to setup\n  clear-all\nend"
        assert model.version == "NetLogo 6.0.4"
        assert model.info == "## WHAT IS IT?\n\nA test model."
        assert [w.kind for w in model.widgets] == ["GRAPHICS-WINDOW", "BUTTON"]
        assert [s.name for s in model.turtle_shapes] == ["default"]
        assert [s.name for s in model.link_shapes] == ["default"]

    def test_unhandled_sections_carried(self, fmt, document):
        model = fmt.model_from_source(document)
        assert model.other_section(SECTION_PREVIEW_COMMANDS) == ("setup repeat 75 [ go ]",)

    def test_unhandled_sections_are_immutable(self, fmt, document):
        model = fmt.model_from_source(document)
        copy = replace(model, code="x")
        assert isinstance(copy.other_sections, tuple)
        with pytest.raises(TypeError):
            copy.other_sections[0] = (SECTION_PREVIEW_COMMANDS, ("changed",))
        assert copy.other_section(SECTION_PREVIEW_COMMANDS) == ("setup repeat 75 [ go ]",)

    def test_model_is_hashable(self, fmt, document):
        model = fmt.model_from_source(document)
        assert hash(model) == hash(replace(model))
        assert hash(Model()) == hash(Model())

    def test_byte_for_byte_round_trip(self, fmt, document):
        assert fmt.source_from_model(fmt.model_from_source(document)) == document

    def test_section_round_trip(self, fmt, document):
        sections = fmt.sections_from_model(fmt.model_from_source(document))
        assert split_sections(join_sections(sections)) == sections

    def test_section_count_mismatch(self, fmt):
        with pytest.raises(SectionCountMismatch):
            fmt.model_from_source("to go end\n")

    def test_codec_failure_names_section(self, fmt):
        text = join_sections({SECTION_INTERFACE: ["BUTTON", "1", "2"], SECTION_VERSION: ["NetLogo 6.0.4"]})
        with pytest.raises(CodecError, match="interface") as exc:
            fmt.model_from_source(text)
        assert exc.value.section == SECTION_INTERFACE

    def test_bad_chooser_literal(self, fmt):
        chooser = ["CHOOSER", "1", "2", "3", "4", "c", "c", "turtles", "0"]
        text = join_sections({SECTION_INTERFACE: chooser, SECTION_VERSION: ["NetLogo 6.0.4"]})
        with pytest.raises(CodecError):
            fmt.model_from_source(text)

    def test_old_document_converted(self):
        fmt = NLogoFormat(
            auto_convert=threshold_auto_convert(lambda s, v: s.replace("clear-all", "ca"), "6.0")
        )
        model = fmt.model_from_source(build_document(version="NetLogo 5.3.1"))
        assert model.code == "to setup\n  ca\nend"

    def test_old_info_converted(self, fmt):
        text = build_document(version="NetLogo 4.1.3", info="WHAT IS IT?\n-----------\nOld.\n")
        assert fmt.model_from_source(text).info == "## WHAT IS IT?\nOld."

    def test_empty_shape_sections_get_defaults(self, fmt):
        text = fmt.source_from_model(Model(version=CURRENT_VERSION, widgets=(default_view(),)))
        model = fmt.model_from_source(text)
        assert model.turtle_shapes == default_shapes()
        assert model.link_shapes == default_link_shapes()
        assert model.code == ""
        assert model.info == ""


# =============================================================================
# Defaults
# =============================================================================

class TestDefaults:

    def test_missing_sections_get_defaults(self, fmt):
        model = fmt.model_from_sections({})
        assert model.code == ""
        assert model.info == empty_info()
        assert model.version == CURRENT_VERSION
        assert model.widgets == (default_view(),)
        assert model.turtle_shapes == default_shapes()
        assert model.link_shapes == default_link_shapes()

    def test_missing_section_matches_add_default(self, fmt):
        loaded = fmt.model_from_sections({})
        for component in fmt.components.values():
            expected = component.add_default(Model())
            assert component.serialize(loaded) == component.serialize(expected)

    def test_present_but_empty_is_not_missing(self, fmt):
        model = fmt.model_from_sections({SECTION_INFO: [], SECTION_VERSION: ["NetLogo 6.0.4"]})
        assert model.info == ""

    def test_partial_document(self, fmt):
        model = fmt.model_from_sections({SECTION_CODE: ["a"], SECTION_VERSION: ["5.0"]})
        assert model.code == "a"
        assert model.info == empty_info()
        assert model.version == "5.0"


# =============================================================================
# Validation
# =============================================================================

class TestValidation:

    def test_empty_model(self, fmt):
        assert fmt.validation_errors(Model()) == ["Model has no version", "Model has no view widget"]

    def test_valid_model(self, fmt, document):
        assert fmt.validation_errors(fmt.model_from_source(document)) == []


# =============================================================================
# Files
# =============================================================================

class TestLoadSave:

    def test_load(self, fmt, nlogo_file):
        model = fmt.load(nlogo_file)
        assert model.version == "NetLogo 6.0.4"

    def test_load_path_object(self, fmt, nlogo_file):
        assert fmt.load(Path(nlogo_file)).code.startswith("to setup")

    def test_load_file_uri(self, fmt, nlogo_file):
        assert fmt.load(Path(nlogo_file).as_uri()).version == "NetLogo 6.0.4"

    def test_sections(self, fmt, nlogo_file):
        sections = fmt.sections(nlogo_file)
        assert sections[SECTION_VERSION] == ["NetLogo 6.0.4"]

    def test_save_round_trip(self, fmt, nlogo_file, document):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "copy.nlogo"
            written = fmt.save(fmt.load(nlogo_file), str(target))
            assert written == target
            assert target.read_text(encoding="utf-8") == document

    def test_write_sections(self, fmt):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "s.nlogo"
            fmt.write_sections({SECTION_CODE: ["to go", "end"]}, target)
            assert read_text(target) == join_sections({SECTION_CODE: ["to go", "end"]})

    def test_load_missing_file(self, fmt):
        with pytest.raises(FileNotFoundError):
            fmt.load("/no/such/dir/model.nlogo")

    def test_load_from_zip(self, fmt, document):
        with tempfile.TemporaryDirectory() as tmp:
            archive = Path(tmp) / "models.zip"
            with zipfile.ZipFile(archive, "w") as zf:
                zf.writestr("Sample Models/Fire.nlogo", document)
            model = fmt.load(f"zip:{archive}!/Sample Models/Fire.nlogo")
            assert model.version == "NetLogo 6.0.4"

    def test_load_from_jar_uri(self, fmt, document):
        with tempfile.TemporaryDirectory() as tmp:
            archive = Path(tmp) / "models.jar"
            with zipfile.ZipFile(archive, "w") as zf:
                zf.writestr("Fire.nlogo", document)
            model = fmt.load(f"jar:{archive.as_uri()}!/Fire.nlogo")
            assert len(model.widgets) == 2

    def test_archive_without_member(self, fmt):
        with pytest.raises(UnsupportedLocation, match="member"):
            fmt.load("zip:/tmp/models.zip")


class TestWritablePath:

    def test_plain_path(self):
        assert writable_path("a/b.nlogo") == Path("a/b.nlogo")

    def test_file_uri(self):
        assert writable_path("file:///tmp/b.nlogo") == Path("/tmp/b.nlogo")

    def test_remote_rejected(self):
        with pytest.raises(UnsupportedLocation):
            writable_path("https://example.org/b.nlogo")

    def test_archive_rejected(self):
        with pytest.raises(UnsupportedLocation):
            writable_path("zip:/tmp/a.zip!/b.nlogo")


class TestAtomicWrite:

    def test_save_keeps_existing_permissions(self, fmt, document):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "m.nlogo"
            target.write_text(document, encoding="utf-8")
            os.chmod(target, 0o644)
            fmt.save(fmt.load(target), target)
            assert stat.S_IMODE(os.stat(target).st_mode) == 0o644

    def test_new_file_follows_umask(self):
        umask = os.umask(0o022)
        try:
            with tempfile.TemporaryDirectory() as tmp:
                target = Path(tmp) / "new.nlogo"
                atomic_write(target, "text")
                assert stat.S_IMODE(os.stat(target).st_mode) == 0o644
        finally:
            os.umask(umask)

    def test_replaces_existing(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "m.nlogo"
            target.write_text("old")
            atomic_write(target, "new")
            assert target.read_text() == "new"
            assert os.listdir(tmp) == ["m.nlogo"]

    def test_failed_write_leaves_original(self, monkeypatch):
        def boom(src, dst):
            raise OSError("disk full")

        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "m.nlogo"
            target.write_text("old")
            monkeypatch.setattr(os, "replace", boom)
            with pytest.raises(OSError, match="disk full"):
                atomic_write(target, "new")
            assert target.read_text() == "old"
            assert os.listdir(tmp) == ["m.nlogo"]


# =============================================================================
# Logging
# =============================================================================

class TestLogging:

    def test_package_is_silent_by_default(self):
        handlers = logging.getLogger("nlogofmt").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_setup_logging_namespace_only(self):
        logger = logging.getLogger("nlogofmt")
        saved = list(logger.handlers)
        try:
            setup_logging(logging.DEBUG)
            returned = setup_logging(logging.DEBUG)
            assert returned is logger
            assert logger.level == logging.DEBUG
            streams = [h for h in logger.handlers if type(h) is logging.StreamHandler]
            assert len(streams) == 1
            assert streams[0] not in logging.getLogger().handlers
        finally:
            logger.handlers[:] = saved
            logger.setLevel(logging.NOTSET)

    def test_load_logs_location(self, fmt, nlogo_file, caplog):
        with caplog.at_level(logging.INFO, logger="nlogofmt"):
            fmt.load(nlogo_file)
        assert any(nlogo_file in r.getMessage() for r in caplog.records)
