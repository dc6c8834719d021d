# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Tests for checklist loading."""

from __future__ import annotations

import pytest

from hostprobe.core.exceptions import ChecklistLoadError, ConfigurationError
from hostprobe.core.loader import ChecklistLoader, load_checklist


class TestLoadChecklist:
    def test_yaml(self, tmp_path):
        path = tmp_path / "baseline.yaml"
        path.write_text(
            "name: docker host baseline\n"
            "checklist:\n"
            "  - id: dockerimage\n"
            "    parameters: [ubuntu]\n"
            "  - id: dockerrunningapi\n"
            "    parameters: ['unix:///var/run/docker.sock', redis]\n"
        )

        checklist = load_checklist(path)

        assert checklist.name == "docker host baseline"
        assert checklist.source == path
        assert len(checklist) == 2
        assert checklist.checks[0].check_id == "dockerimage"
        assert checklist.checks[1].parameters == ["unix:///var/run/docker.sock", "redis"]

    def test_json(self, tmp_path):
        path = tmp_path / "baseline.json"
        path.write_text('{"Name": "json list", "Checklist": [{"ID": "dockerrunning", "Parameters": ["redis"]}]}')

        checklist = load_checklist(path)

        assert checklist.name == "json list"
        assert checklist.checks[0].check_id == "dockerrunning"
        assert checklist.checks[0].parameters == ["redis"]

    def test_name_defaults_to_file_stem(self, tmp_path):
        path = tmp_path / "webhosts.yml"
        path.write_text("checklist:\n  - id: dockerimage\n    parameters: [nginx]\n")
        assert load_checklist(path).name == "webhosts"

    def test_scalar_parameters_become_strings(self, tmp_path):
        path = tmp_path / "scalars.yaml"
        path.write_text("checklist:\n  - id: dockerimage\n    parameters: [22.04, 7, ~]\n")
        assert load_checklist(path).checks[0].parameters == ["22.04", "7", ""]

    def test_missing_parameters_means_none(self, tmp_path):
        path = tmp_path / "noparams.yaml"
        path.write_text("checklist:\n  - id: noop\n")
        assert load_checklist(path).checks[0].parameters == []

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(load_checklist(path)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(ChecklistLoadError, match="not found"):
            load_checklist(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("checklist: [unclosed\n")
        with pytest.raises(ChecklistLoadError):
            load_checklist(path)

    def test_load_error_is_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_checklist(tmp_path / "absent.yaml")


class TestParseChecklist:
    @pytest.mark.parametrize(
        "raw, message",
        [
            (["dockerimage"], "must be a mapping"),
            ({"checklist": "dockerimage"}, "must be a list"),
            ({"checklist": ["dockerimage"]}, "must be a mapping"),
            ({"checklist": [{"parameters": ["ubuntu"]}]}, "has no 'id'"),
            ({"checklist": [{"id": "dockerimage", "parameters": "ubuntu"}]}, "must be a list"),
            ({"checklist": [{"id": "dockerimage", "parameters": [["ubuntu"]]}]}, "must be scalars"),
        ],
    )
    def test_malformed(self, raw, message):
        with pytest.raises(ChecklistLoadError, match=message):
            ChecklistLoader().parse_checklist(raw)

    def test_checks_alias(self):
        checklist = ChecklistLoader().parse_checklist({"checks": [{"check": "dockerimage", "parameters": ["a"]}]})
        assert checklist.checks[0].check_id == "dockerimage"
        assert checklist.name == "checklist"
