# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test CLI."""

from click.testing import CliRunner
from flask.cli import ScriptInfo

from invenio_algolia.cli import algolia as cmd


def _invoke(app, args):
    runner = CliRunner()
    script_info = ScriptInfo(create_app=lambda: app)
    return runner.invoke(cmd, args, obj=script_info)


def test_list(app):
    """Test listing of the registered associations."""
    result = _invoke(app, ["list"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "├──Product",
        "│  ├──ProductIndex_test",
        "│  └──everything_test",
        "├──Article",
        "│  └──everything_test",
        "├──Book",
        "│  └──BookIndex_test (ChapterSerializer)",
        "└──Tag",
        "   └──everything_test",
    ]


def test_settings(app, algolia_client):
    """Test push of the settings of every index."""
    result = _invoke(app, ["settings"])
    assert result.exit_code == 0
    assert "ProductIndex_test" in result.output
    assert "everything_test" in result.output
    assert "BookIndex_test" in result.output
    assert algolia_client.set_settings.call_count == 3


def test_settings_of_one_index(app, algolia_client):
    """Test push of the settings of selected indexes."""
    result = _invoke(app, ["settings", "everything"])
    assert result.exit_code == 0
    algolia_client.set_settings.assert_called_once_with(
        index_name="everything_test",
        index_settings={
            "searchableAttributes": ["name", "title"],
            "attributesForFaceting": ["filterOnly(model_id)"],
        },
    )


def test_settings_of_unknown_index(app, algolia_client):
    """Test push of the settings of an unregistered index."""
    result = _invoke(app, ["settings", "everything", "missing"])
    assert result.exit_code == 2
    assert "missing" in result.output
    algolia_client.set_settings.assert_not_called()


def test_settings_disabled(disabled_app, algolia_client):
    """Test that no settings are pushed when indexing is disabled."""
    result = _invoke(disabled_app, ["settings"])
    assert result.exit_code == 0
    assert algolia_client.method_calls == []
