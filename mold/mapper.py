import inspect
from collections.abc import Mapping
from .entity import Entity
from .types import find_class
from .utils import kind_of


class Mapper:

    def __init__(self, entity):
        if isinstance(entity, str):
            entity = find_class(entity)

        if not inspect.isclass(entity) or not issubclass(entity, Entity):
            raise ValueError('Mapper can be used only with entity classes, %r given' % entity)

        self._entity = entity

    def to_entity(self, data):
        if isinstance(data, Mapping):
            return self._map_one(data)
        elif isinstance(data, (list, tuple)):
            return self._map_many(data)
        else:
            raise TypeError('Cannot hydrate object of type %s' % kind_of(data))

    def from_entity(self, entity):
        if isinstance(entity, (list, tuple)):
            return [self.from_entity(item) for item in entity]

        if not isinstance(entity, self._entity):
            raise ValueError('Passed argument must be instance of ' + self._entity.__name__)

        return entity.serialize()

    def _map_one(self, data):
        return self._entity(data)

    def _map_many(self, data):
        collection = []
        for item in data:
            collection.append(self._map_one(item))
        return collection


def hydrate(entity, data):
    """ Builds entity (or list of entities) of passed type from raw data.
    :param entity: entity class or its registered name
    :param data: mapping or list of mappings
    """
    return Mapper(entity).to_entity(data)


def serialize(entity):
    if isinstance(entity, (list, tuple)):
        return [serialize(item) for item in entity]
    return entity.serialize()
