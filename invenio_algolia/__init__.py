# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

r"""Algolia indexing for Invenio.

Serializes application records and pushes them to hosted Algolia indexes
through the official ``algoliasearch`` client. Ranking, storage and query
execution are left to Algolia.

Initialization
--------------

Create an Algolia application and export its credentials:

.. code-block:: console

    $ export ALGOLIA_APPLICATION_ID=XXXXXXXXXX
    $ export ALGOLIA_API_KEY=<admin key>
    $ export ALGOLIA_SEARCH_API_KEY=<search-only key>

Then initialize the extension in your application:

.. code-block:: python

    # app.py
    from flask import Flask
    from invenio_algolia import InvenioAlgolia

    app = Flask('myapp')
    algolia = InvenioAlgolia(app)

Declaring indexes
~~~~~~~~~~~~~~~~~

An index is declared by subclassing :class:`AlgoliaIndex`. The remote name of
the index is its logical name followed by the environment suffix, e.g.
``ProductIndex_production``:

.. code-block:: python

    from invenio_algolia import AlgoliaIndex, AlgoliaSerializer

    class ProductIndex(AlgoliaIndex):

        settings = {
            'searchableAttributes': ['name'],
            'attributesForFaceting': ['category'],
        }

    class ProductSerializer(AlgoliaSerializer):

        def algolia_attributes(self):
            return {'name': self.record.name, 'category': self.record.category}

Models mix in :class:`AlgoliaModelMixin` and are associated to indexes with
the ``ALGOLIA_INDEXES`` configuration variable:

.. code-block:: python

    ALGOLIA_INDEXES = [
        ('my_site.models.Product', 'my_site.search.ProductIndex',
         'my_site.search.ProductSerializer'),
    ]

or from an ``invenio_algolia.indexes`` entry point pointing to a function
that receives the :class:`~invenio_algolia.registry.AlgoliaRegistry`.
Registrations are frozen once the application is initialized.

Push the settings of every registered index with:

.. code-block:: console

   $ flask algolia settings

Syncing records
~~~~~~~~~~~~~~~

Call the indexer from the lifecycle hooks of your models, or connect
:func:`invenio_algolia.receivers.index_record_modification` to
Flask-SQLAlchemy's ``models_committed`` signal:

.. code-block:: python

    from invenio_algolia import current_algolia_indexer

    current_algolia_indexer.handle(product, 'updated')

Every document carries ``objectID``, ``model_name`` and ``model_id``. A
product with primary key ``514`` becomes ``Product#514``. Serializers that
split a record in several documents produce ``Product#514/0``,
``Product#514/1``, ...

Indexing is disabled when the application runs with ``TESTING = True``,
unless ``ALGOLIA_INDEXING_DISABLED`` says otherwise.
"""

from .api import AlgoliaIndex, Association
from .ext import AlgoliaConfig, InvenioAlgolia
from .indexer import AlgoliaIndexer
from .models import AlgoliaModelMixin
from .proxies import current_algolia, current_algolia_client, current_algolia_indexer
from .registry import AlgoliaRegistry
from .serializers import AlgoliaSerializer
from .version import __version__

__all__ = (
    "__version__",
    "AlgoliaConfig",
    "AlgoliaIndex",
    "AlgoliaIndexer",
    "AlgoliaModelMixin",
    "AlgoliaRegistry",
    "AlgoliaSerializer",
    "Association",
    "InvenioAlgolia",
    "current_algolia",
    "current_algolia_client",
    "current_algolia_indexer",
)
