# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Sync records and index settings to Algolia."""

from .api import build_documents
from .serializers import resolve_producer
from .utils import model_id_filter

EVENTS = ("created", "updated", "destroyed")


class AlgoliaIndexer(object):
    """Push records and settings of the registered indexes to Algolia.

    Every call is synchronous. Errors raised by the Algolia client or by
    serializers are not caught: retrying is the job of the caller.
    """

    def __init__(self, state):
        """Initialize the indexer.

        :param state: The state of the ``invenio-algolia`` extension.
        """
        self.state = state

    @property
    def client(self):
        """Return the Algolia client."""
        return self.state.client

    @property
    def enabled(self):
        """Return whether writes to Algolia are allowed."""
        return self.state.config.indexing_enabled

    @property
    def logger(self):
        """Return the application logger."""
        return self.state.app.logger

    def _skip(self, action, target):
        self.logger.debug(
            "Algolia indexing disabled, skipping %s of %s.", action, target
        )

    #
    # Settings
    #
    def push_settings(self, index):
        """Push the static settings of an index definition.

        :param index: An :class:`~invenio_algolia.api.AlgoliaIndex` subclass.
        :returns: The client response, or ``None`` when indexing is disabled.
        """
        if not self.enabled:
            self._skip("settings push", index.get_name())
            return None
        index_name = self.state.index_name(index)
        self.logger.info("Pushing Algolia settings of %s.", index_name)
        return self.client.set_settings(
            index_name=index_name,
            index_settings=index.get_settings(),
        )

    def push_all_settings(self):
        """Push the settings of every registered index.

        :returns: Generator of ``(index name, response)`` tuples.
        """
        for index in self.state.registry.indexes:
            yield self.state.index_name(index), self.push_settings(index)

    #
    # Records
    #
    def handle(self, record, event):
        """Sync a record after a lifecycle event.

        :param record: The record that changed.
        :param event: One of ``created``, ``updated`` or ``destroyed``.
        """
        if event not in EVENTS:
            raise ValueError("Unknown lifecycle event: {0}".format(event))
        if event == "destroyed":
            return self.delete(record)
        return self.index(record)

    def index(self, record):
        """Sync a created or updated record to every associated index."""
        for association in self.state.registry.associations_for(record):
            self.index_association(record, association)

    def delete(self, record):
        """Remove a destroyed record from every associated index."""
        for association in self.state.registry.associations_for(record):
            self.delete_association(record, association)

    def index_association(self, record, association):
        """Sync a record to the index of one association.

        Records that are not indexable are removed from the index. Fragments
        left over from a previous sync with more fragments are deleted before
        the new documents are saved.
        """
        if not self.enabled:
            self._skip("indexing", record.algolia_model_id())
            return

        if not record.algolia_indexable():
            self.delete_association(record, association)
            return

        produce = resolve_producer(record, association.serializer)
        documents = build_documents(record, produce())
        new_ids = [document["objectID"] for document in documents]

        index_name = self.state.index_name(association.index)
        self._delete_previous(record, association, keep=new_ids)
        if documents:
            self.client.save_objects(index_name=index_name, objects=documents)

        record.set_algolia_fragment_count(association.index.get_name(), len(documents))

    def delete_association(self, record, association):
        """Delete every document of a record from one index."""
        if not self.enabled:
            self._skip("deletion", record.algolia_model_id())
            return

        self._delete_previous(record, association)
        record.set_algolia_fragment_count(association.index.get_name(), 0)

    def _delete_previous(self, record, association, keep=()):
        """Delete the documents written by the previous sync.

        When the fragment count of the previous sync is unknown, every
        document sharing the model identifier of the record is deleted.
        """
        index_name = self.state.index_name(association.index)
        count = record.get_algolia_fragment_count(association.index.get_name())
        if count is None:
            self.client.delete_by(
                index_name=index_name,
                delete_by_params={
                    "filters": model_id_filter(record.algolia_model_id())
                },
            )
            return

        stale_ids = [
            object_id
            for object_id in record.algolia_object_ids(count)
            if object_id not in keep
        ]
        if stale_ids:
            self.client.delete_objects(index_name=index_name, object_ids=stale_ids)
