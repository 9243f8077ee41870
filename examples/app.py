# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.


"""Minimal Flask application example for development.

SPHINX-START

Export the credentials of your Algolia application:

.. code-block:: console

   $ pip install -e .[all]
   $ export ALGOLIA_APPLICATION_ID=XXXXXXXXXX
   $ export ALGOLIA_API_KEY=<admin key>
   $ export ALGOLIA_SEARCH_API_KEY=<search-only key>

Push the index settings and some fixtures:

.. code-block:: console

   $ cd examples
   $ FLASK_APP=app.py flask algolia settings
   $ FLASK_APP=app.py flask fixtures

Run example development server and look at the search configuration given
to the browser:

.. code-block:: console

   $ FLASK_APP=app.py flask run -p 5000
   $ curl http://localhost:5000/

SPHINX-END
"""

from flask import Flask, jsonify

from invenio_algolia import (
    AlgoliaIndex,
    AlgoliaModelMixin,
    AlgoliaRegistry,
    AlgoliaSerializer,
    InvenioAlgolia,
    current_algolia,
    current_algolia_indexer,
)


class Product(AlgoliaModelMixin):
    """Example model."""

    def __init__(self, id, name, category, published=True):
        """Initialize the product."""
        self.id = id
        self.name = name
        self.category = category
        self.published = published

    def algolia_indexable(self):
        """Index only published products."""
        return self.published


class ProductIndex(AlgoliaIndex):
    """Example products index."""

    settings = {
        "searchableAttributes": ["name"],
        "attributesForFaceting": ["category"],
    }


class ProductSerializer(AlgoliaSerializer):
    """Example products serializer."""

    def algolia_attributes(self):
        """Index name and category."""
        return {"name": self.record.name, "category": self.record.category}


registry = AlgoliaRegistry()
registry.register(Product, ProductIndex, ProductSerializer)

# Create Flask application
app = Flask(__name__)
InvenioAlgolia(app, registry=registry)


@app.cli.command()
def fixtures():
    """Example fixtures."""
    for product in (
        Product(1, "Widget", "tools"),
        Product(2, "Gadget", "toys"),
        Product(3, "Prototype", "toys", published=False),
    ):
        current_algolia_indexer.handle(product, "created")


@app.route("/", methods=["GET"])
def index():
    """Return the search configuration of the products index."""
    return jsonify(current_algolia.search_config(ProductIndex))
