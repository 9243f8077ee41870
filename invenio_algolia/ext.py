# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Invenio module for syncing records to Algolia."""

import os

from algoliasearch.search.client import SearchClientSync
from werkzeug.utils import cached_property

from . import config
from .cli import algolia as algolia_cmd
from .indexer import AlgoliaIndexer
from .registry import AlgoliaRegistry
from .utils import as_bool, build_index_name


def _config_or_env(app, key):
    """Get a value from the application config, else from the environment."""
    value = app.config.get(key)
    if value is None:
        value = os.environ.get(key)
    return value


class AlgoliaConfig(object):
    """Configuration resolved once when the application is initialized."""

    def __init__(
        self,
        application_id=None,
        api_key=None,
        search_api_key=None,
        index_suffix="",
        indexing_enabled=True,
    ):
        """Initialize the configuration."""
        self.application_id = application_id
        self.api_key = api_key
        self.search_api_key = search_api_key
        self.index_suffix = index_suffix
        self.indexing_enabled = indexing_enabled

    @classmethod
    def from_app(cls, app):
        """Resolve the configuration of a Flask application.

        :param app: An instance of :class:`~flask.app.Flask`.
        """
        suffix = _config_or_env(app, "ALGOLIA_INDEX_SUFFIX")
        if suffix is None:
            suffix = app.config.get("ENV") or (
                "development" if app.debug else "production"
            )

        disabled = _config_or_env(app, "ALGOLIA_INDEXING_DISABLED")
        if disabled is None:
            enabled = not app.testing
        else:
            enabled = not as_bool(disabled)

        return cls(
            application_id=_config_or_env(app, "ALGOLIA_APPLICATION_ID"),
            api_key=_config_or_env(app, "ALGOLIA_API_KEY"),
            search_api_key=_config_or_env(app, "ALGOLIA_SEARCH_API_KEY"),
            index_suffix=suffix,
            indexing_enabled=enabled,
        )


class _AlgoliaState(object):
    """Store the Algolia client, configuration and registered indexes."""

    def __init__(self, app, algolia_config, registry, **kwargs):
        """Initialize state.

        :param app: An instance of :class:`~flask.app.Flask`.
        :param algolia_config: The resolved :class:`AlgoliaConfig`.
        :param registry: The :class:`~invenio_algolia.registry.AlgoliaRegistry`.
        """
        self.app = app
        self.config = algolia_config
        self.registry = registry
        self._client = kwargs.get("client")

    def _client_builder(self):
        """Build the Algolia search client."""
        client_config = dict(self.app.config.get("ALGOLIA_CLIENT_CONFIG") or {})
        client_config.setdefault("app_id", self.config.application_id)
        client_config.setdefault("api_key", self.config.api_key)
        return SearchClientSync(**client_config)

    @property
    def client(self):
        """Return client for current application."""
        if self._client is None:
            self._client = self._client_builder()
        return self._client

    @cached_property
    def indexer(self):
        """Return the indexer bound to this application."""
        return AlgoliaIndexer(self)

    def index_name(self, index):
        """Return the remote name of an index definition."""
        return build_index_name(index, suffix=self.config.index_suffix)

    def search_config(self, index):
        """Return the values a browser needs to query an index.

        Only the search-only API key is exposed.
        """
        return {
            "app_id": self.config.application_id,
            "search_api_key": self.config.search_api_key,
            "index_name": self.index_name(index),
        }


class InvenioAlgolia(object):
    """Invenio-Algolia extension."""

    def __init__(self, app=None, **kwargs):
        """Extension initialization.

        :param app: An instance of :class:`~flask.app.Flask`.
        """
        if app:
            self.init_app(app, **kwargs)

    def init_app(
        self,
        app,
        registry=None,
        entry_point_group_indexes="invenio_algolia.indexes",
        **kwargs,
    ):
        """Flask application initialization.

        Registrations from ``ALGOLIA_INDEXES`` and from the entry point group
        are added to ``registry``, which is frozen afterwards.

        :param app: An instance of :class:`~flask.app.Flask`.
        :param registry: A prefilled
            :class:`~invenio_algolia.registry.AlgoliaRegistry`.
        :param entry_point_group_indexes: The entry point group name to load
            registrations from.
        """
        self.init_config(app)

        app.cli.add_command(algolia_cmd)

        registry = registry if registry is not None else AlgoliaRegistry()
        registry.load_config(app.config["ALGOLIA_INDEXES"])
        if entry_point_group_indexes:
            registry.load_entry_point_group(entry_point_group_indexes)
        registry.freeze()

        state = _AlgoliaState(app, AlgoliaConfig.from_app(app), registry, **kwargs)
        self._state = app.extensions["invenio-algolia"] = state

    @staticmethod
    def init_config(app):
        """Initialize configuration.

        :param app: An instance of :class:`~flask.app.Flask`.
        """
        for k in dir(config):
            if k.startswith("ALGOLIA_"):
                app.config.setdefault(k, getattr(config, k))

    def __getattr__(self, name):
        """Proxy to state object."""
        return getattr(self._state, name, None)
