# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Registry of the associations between models and Algolia indexes."""

from invenio_base.utils import entry_points, obj_or_import_string

from .api import AlgoliaIndex, Association
from .errors import AssociationAlreadyRegisteredError, RegistryFrozenError
from .serializers import AlgoliaSerializer


class AlgoliaRegistry(object):
    """Ordered, append-only ledger of associations per model type.

    The registry is filled while the application boots and frozen afterwards,
    so that it can be read from concurrent requests without locking.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._associations = {}
        self._frozen = False

    @property
    def frozen(self):
        """Return whether the registry still accepts registrations."""
        return self._frozen

    def freeze(self):
        """Refuse any further registration."""
        self._frozen = True

    def register(self, model, index, serializer=None):
        """Associate a model type with an index definition.

        :param model: The model class.
        :param index: An :class:`~invenio_algolia.api.AlgoliaIndex` subclass.
        :param serializer: An optional
            :class:`~invenio_algolia.serializers.AlgoliaSerializer` subclass.
        :returns: The new :class:`~invenio_algolia.api.Association`.
        """
        if self._frozen:
            raise RegistryFrozenError(
                "Cannot register {0} against {1} once the application is "
                "initialized.".format(model.__name__, index.__name__)
            )
        if not (isinstance(index, type) and issubclass(index, AlgoliaIndex)):
            raise TypeError("{0!r} is not an AlgoliaIndex subclass.".format(index))
        if serializer is not None and not (
            isinstance(serializer, type) and issubclass(serializer, AlgoliaSerializer)
        ):
            raise TypeError(
                "{0!r} is not an AlgoliaSerializer subclass.".format(serializer)
            )

        associations = self._associations.setdefault(model, [])
        if any(a.index is index for a in associations):
            raise AssociationAlreadyRegisteredError(
                "{0} is already registered against {1}.".format(
                    model.__name__, index.__name__
                )
            )
        association = Association(model, index, serializer)
        associations.append(association)
        return association

    def associations_for(self, model):
        """Return the ordered associations of a model type or a record."""
        if not isinstance(model, type):
            model = type(model)
        return tuple(self._associations.get(model, ()))

    @property
    def models(self):
        """Return the registered model types in registration order."""
        return list(self._associations)

    @property
    def indexes(self):
        """Return the registered index definitions, without duplicates."""
        result = []
        for associations in self._associations.values():
            for association in associations:
                if association.index not in result:
                    result.append(association.index)
        return result

    def __iter__(self):
        """Iterate over every association in registration order."""
        for associations in self._associations.values():
            for association in associations:
                yield association

    def load_config(self, registrations):
        """Register associations given as (import strings of) objects.

        :param registrations: Iterable of ``(model, index)`` or
            ``(model, index, serializer)`` tuples.
        """
        for registration in registrations:
            self.register(*[obj_or_import_string(value) for value in registration])

    def load_entry_point_group(self, entry_point_group):
        """Call every registration function of an entry point group."""
        for ep in entry_points(group=entry_point_group):
            ep.load()(self)
