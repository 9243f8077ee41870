# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Configuration options for Invenio-Algolia.

Every credential and switch below can be left to ``None``, in which case the
value is read from the environment variable of the same name when the
extension is initialized.
"""

#
# Algolia credentials
#

ALGOLIA_APPLICATION_ID = None
"""Algolia application identifier.

Falls back to the ``ALGOLIA_APPLICATION_ID`` environment variable.
"""

ALGOLIA_API_KEY = None
"""Algolia admin API key, used for every write to the indexes.

Falls back to the ``ALGOLIA_API_KEY`` environment variable. Never expose this
key to browsers, use :py:data:`ALGOLIA_SEARCH_API_KEY` instead.
"""

ALGOLIA_SEARCH_API_KEY = None
"""Algolia search-only API key, safe to render in templates.

Falls back to the ``ALGOLIA_SEARCH_API_KEY`` environment variable.
"""

ALGOLIA_CLIENT_CONFIG = None
"""Dictionary of keyword arguments passed to the Algolia search client.

When the key ``config`` is present it must hold a
:py:class:`algoliasearch.search.config.SearchConfig` and takes precedence over
the credentials above.
"""

#
# Index naming
#

ALGOLIA_INDEX_SUFFIX = None
"""Suffix appended to every index name.

Useful when several environments (developers' machines, staging, production)
share one Algolia application. Resolution order:

1. this configuration variable;
2. the ``ALGOLIA_INDEX_SUFFIX`` environment variable;
3. the ``ENV`` configuration variable of the Flask application;
4. ``"development"`` when the application runs in debug mode, else
   ``"production"``.

Set it to an empty string to disable suffixing:

.. code-block:: python

    # in your config.py
    ALGOLIA_INDEX_SUFFIX = ''
"""

#
# Indexing gate
#

ALGOLIA_INDEXING_DISABLED = None
"""Disable every write (settings, upserts, deletes) to Algolia.

When ``None`` the ``ALGOLIA_INDEXING_DISABLED`` environment variable is
consulted (``1``, ``true``, ``yes`` and ``on`` disable indexing). When the
environment is silent as well, indexing is disabled for applications running
with ``TESTING = True`` and enabled otherwise.
"""

#
# Registrations
#

ALGOLIA_INDEXES = []
"""Model to index associations registered at application bootstrap.

Each entry is a tuple of import strings (or objects) ``(model, index)`` or
``(model, index, serializer)``:

.. code-block:: python

    ALGOLIA_INDEXES = [
        ('my_site.models.Product', 'my_site.search.ProductIndex',
         'my_site.search.ProductSerializer'),
        ('my_site.models.Product', 'my_site.search.EverythingIndex'),
    ]

Associations can also be registered from the ``invenio_algolia.indexes``
entry point group, whose entries point to a callable receiving the registry.
"""
