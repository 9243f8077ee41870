# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.


"""Pytest configuration."""

import os
import sys

import pytest
from algoliasearch.search.client import SearchClientSync
from flask import Flask
from mock import create_autospec

from invenio_algolia import AlgoliaRegistry, InvenioAlgolia

sys.path.append(os.path.dirname(os.path.realpath(__file__)))

from mock_module import (  # noqa: E402
    Article,
    EverythingIndex,
    Product,
    ProductIndex,
    register_indexes,
)


@pytest.fixture()
def algolia_client():
    """Mocked Algolia search client checking call signatures."""
    return create_autospec(SearchClientSync, instance=True)


@pytest.fixture()
def registry():
    """Registry with the mock associations."""
    registry = AlgoliaRegistry()
    registry.register(Product, ProductIndex)
    registry.register(Product, EverythingIndex)
    registry.register(Article, EverythingIndex)
    register_indexes(registry)
    return registry


@pytest.fixture()
def base_app():
    """Flask application without the extension."""
    app = Flask("testapp")
    app.config.update(
        TESTING=True,
        ALGOLIA_APPLICATION_ID="TESTAPPID",
        ALGOLIA_API_KEY="admin-key",
        ALGOLIA_SEARCH_API_KEY="search-key",
        ALGOLIA_INDEX_SUFFIX="test",
        ALGOLIA_INDEXING_DISABLED=False,
    )
    return app


@pytest.fixture()
def app(base_app, registry, algolia_client):
    """Flask application fixture with indexing enabled."""
    InvenioAlgolia(
        base_app,
        registry=registry,
        client=algolia_client,
        entry_point_group_indexes=None,
    )
    with base_app.app_context():
        yield base_app


@pytest.fixture()
def disabled_app(base_app, registry, algolia_client):
    """Flask application fixture with indexing disabled."""
    base_app.config["ALGOLIA_INDEXING_DISABLED"] = True
    InvenioAlgolia(
        base_app,
        registry=registry,
        client=algolia_client,
        entry_point_group_indexes=None,
    )
    with base_app.app_context():
        yield base_app


@pytest.fixture()
def indexer(app):
    """Indexer of the application."""
    return app.extensions["invenio-algolia"].indexer
