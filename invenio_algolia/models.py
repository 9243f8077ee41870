# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Model capabilities used when syncing records to Algolia.

Models that should be indexed mix in :class:`AlgoliaModelMixin`. Every
method has a sane default and can be overridden:

.. code-block:: python

    class Product(db.Model, AlgoliaModelMixin):

        def algolia_attributes(self):
            return {'name': self.name}

        def algolia_indexable(self):
            return self.published
"""

from .utils import object_ids


class AlgoliaModelMixin(object):
    """Capabilities of a model synced to Algolia."""

    algolia_fragments = None
    """Fragment count of the last sync, keyed by index logical name.

    The indexer updates it after each sync. When it is unknown, for instance
    on a freshly loaded record, the previous documents are deleted by a
    ``model_id`` filter instead of by object identifiers.
    """

    #
    # Identity
    #
    def algolia_model_name(self):
        """Return the type identifier stored in ``model_name``."""
        return type(self).__name__

    def algolia_primary_key(self):
        """Return the primary key of the record."""
        return self.id

    def algolia_model_id(self):
        """Return the identifier shared by all fragments of the record."""
        return "{0}#{1}".format(
            self.algolia_model_name(), self.algolia_primary_key()
        )

    def algolia_object_ids(self, count):
        """Return the object identifiers of ``count`` fragments."""
        return object_ids(self.algolia_model_id(), count)

    #
    # Serialization
    #
    def algolia_indexable(self):
        """Return whether the record should currently be in the indexes."""
        return True

    def algolia_attributes(self):
        """Return the attributes of the single document of this record."""
        return self.algolia_dump()

    def algolia_dump(self):
        """Dump every public instance attribute."""
        return {
            key: value
            for key, value in vars(self).items()
            if not key.startswith("_") and key != "algolia_fragments"
        }

    #
    # Fragment bookkeeping
    #
    def get_algolia_fragment_count(self, index_name):
        """Get the fragment count of the last sync, ``None`` if unknown."""
        return (self.algolia_fragments or {}).get(index_name)

    def set_algolia_fragment_count(self, index_name, count):
        """Remember the fragment count of the last sync."""
        fragments = dict(self.algolia_fragments or {})
        fragments[index_name] = count
        self.algolia_fragments = fragments
