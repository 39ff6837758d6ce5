"""Tests for state_store.py - the run record."""

import json

import yaml

from ukol_provisioner.state_store import new_state, save_state


def test_new_state_shape():
    state = new_state(packages=["tree"], dry_run=False)

    assert state["config"] == {"packages": ["tree"], "dry_run": False}
    assert state["execution"]["errors"] == []
    assert state["execution"]["loop_device"] is None


def test_json_is_default_format(tmp_path):
    path = tmp_path / "nested" / "run.record"

    save_state(str(path), {"b": 1, "a": [1, 2]})

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == {"a": [1, 2], "b": 1}
    assert text.index('"a"') < text.index('"b"')


def test_yaml_by_extension(tmp_path):
    path = tmp_path / "run.yml"

    save_state(str(path), {"execution": {"loop_device": "/dev/loop0"}})

    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"execution": {"loop_device": "/dev/loop0"}}


def test_overwrites_previous_record(tmp_path):
    path = tmp_path / "run.json"
    path.write_text('{"stale": true}\n', encoding="utf-8")

    save_state(str(path), {"version": 1})

    assert json.loads(path.read_text(encoding="utf-8")) == {"version": 1}
