"""Tests for the type registry."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from chirp import Base, ObjectAttribute
from chirp.config import ChirpConfig, RegistryConfig, reset_config, set_config
from chirp.exceptions import ChirpError, UnknownTypeError
from chirp.registry import (
    clear_registry,
    list_types,
    register_type,
    resolve_type,
    unregister_type,
)

SRC_PATH = Path(__file__).resolve().parents[2] / "src"


def test_subclasses_register_under_their_name():
    class Hashtag(Base):
        pass

    assert resolve_type("Hashtag") is Hashtag
    assert "Hashtag" in list_types()


def test_subclass_can_choose_name_or_opt_out():
    class Place(Base, name="Geo"):
        pass

    class Draft(Base, register=False):
        pass

    assert resolve_type("Geo") is Place
    assert "Place" not in list_types()
    assert "Draft" not in list_types()


def test_auto_register_follows_configuration():
    set_config(ChirpConfig(registry=RegistryConfig(auto_register=False)))

    class Silent(Base):
        pass

    class Loud(Base, register=True):
        pass

    assert "Silent" not in list_types()
    assert resolve_type("Loud") is Loud


def test_resolve_type_passes_classes_through():
    class Local(Base, register=False):
        pass

    assert resolve_type(Local) is Local


def test_unknown_type_raises():
    with pytest.raises(UnknownTypeError) as excinfo:
        resolve_type("Nope")
    assert excinfo.value.name == "Nope"
    assert isinstance(excinfo.value, ChirpError)
    assert isinstance(excinfo.value, LookupError)
    assert "Nope" in str(excinfo.value)


def test_unknown_target_type_propagates_from_accessor():
    class Orphan(Base, register=False):
        ghost = ObjectAttribute("Ghost")

    orphan = Orphan({"ghost": {"id": 1}})
    with pytest.raises(UnknownTypeError):
        orphan.ghost
    assert Orphan({}).has_ghost is False


def test_late_registration_is_picked_up():
    class Album(Base, register=False):
        cover = ObjectAttribute("Cover")

    album = Album({"cover": {"url": "x"}})

    class Cover(Base):
        pass

    assert isinstance(album.cover, Cover)


def test_replacing_a_name_logs_warning(caplog):
    class First(Base, register=False):
        pass

    class Second(Base, register=False):
        pass

    register_type(First, "Shared")
    with caplog.at_level(logging.WARNING, logger="chirp.registry"):
        register_type(Second, "Shared")

    assert resolve_type("Shared") is Second
    assert "Replacing registered type 'Shared'" in caplog.text


def test_register_type_works_as_decorator():
    @register_type
    class Badge(Base, register=False):
        pass

    assert resolve_type("Badge") is Badge


def test_unregister_and_clear():
    class Temp(Base):
        pass

    unregister_type("Temp")
    assert "Temp" not in list_types()
    unregister_type("Temp")

    clear_registry()
    assert list_types() == []


def test_import_does_not_depend_on_configuration(tmp_path):
    env = {key: value for key, value in os.environ.items() if not key.startswith("CHIRP_")}
    env["CHIRP_LOGGING_LEVEL"] = "verbose"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_PATH), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [sys.executable, "-c", "import chirp; print(chirp.resolve_type('Identity').__name__)"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "Identity"


def test_subclass_registers_with_defaults_when_config_fails(tmp_path, monkeypatch, caplog):
    reset_config()
    monkeypatch.setenv("CHIRP_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("CHIRP_LOGGING_LEVEL", "verbose")

    with caplog.at_level(logging.WARNING, logger="chirp.base"):

        class Fallback(Base):
            pass

    assert resolve_type("Fallback") is Fallback
    assert "Could not load configuration" in caplog.text
