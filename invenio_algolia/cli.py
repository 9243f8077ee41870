# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Click command-line interface for managing Algolia indexes."""

import sys

import click
from flask.cli import with_appcontext

from .proxies import current_algolia


@click.group()
def algolia():
    """Manage Algolia indexes."""


@algolia.command("list")
@with_appcontext
def list_cmd():
    """List registered models and their indexes."""
    registry = current_algolia.registry
    models = registry.models
    for model_idx, model in enumerate(models):
        last_model = model_idx == len(models) - 1
        click.echo(("└──" if last_model else "├──") + model.__name__)
        associations = registry.associations_for(model)
        for idx, association in enumerate(associations):
            line = "   " if last_model else "│  "
            line += "└──" if idx == len(associations) - 1 else "├──"
            line += current_algolia.index_name(association.index)
            if association.serializer is not None:
                line += " ({0})".format(association.serializer.__name__)
            click.echo(line)


@algolia.command()
@click.argument("index_names", nargs=-1)
@with_appcontext
def settings(index_names):
    """Push settings of the registered indexes."""
    if not current_algolia.config.indexing_enabled:
        click.secho(
            "Algolia indexing is disabled, settings were not pushed.",
            fg="yellow",
            file=sys.stderr,
        )
        return

    indexer = current_algolia.indexer
    known = {index.get_name(): index for index in current_algolia.registry.indexes}
    unknown = [name for name in index_names if name not in known]
    if unknown:
        raise click.BadParameter(
            "Unknown index: {0}".format(", ".join(unknown)),
            param_hint="INDEX_NAMES",
        )

    click.secho("Pushing settings...", fg="green", bold=True, file=sys.stderr)
    if index_names:
        results = (
            (current_algolia.index_name(known[name]), indexer.push_settings(known[name]))
            for name in index_names
        )
    else:
        results = indexer.push_all_settings()
    for index_name, _ in results:
        click.echo(index_name)
