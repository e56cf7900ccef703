"""
Entities hydrated from and serialized to plain, JSON-like data.

    class Address(Entity):
        street = Field(required=True)
        zip_code = Field(name='zipCode', nullable=True)

    class Person(Entity):
        name = Field(required=True)
        age = Field(type='int')
        address = Field(type=Address, required=True)

    person = Person({'name': 'Bob', 'address': {'street': 'Main St.', 'zipCode': None}})
    person.serialize()
"""
import copy
import inspect
import json
import logging
import sys
from collections.abc import Mapping
from datetime import date, datetime
from dateutil import tz
from .errors import (
    FieldError,
    InvalidValueError,
    MissingFieldError,
    NestedEntityError,
    TypeMismatchError,
    UnexpectedFieldError,
    UnresolvableTypeError,
)
from .field import Field
from .types import PASSTHROUGH, SCALAR, declared_type, evaluate, get_builder, is_scalar, register_class, resolve
from .utils import get_fqn, kind_of, type_name

logger = logging.getLogger(__name__)


class EntityMeta(type):
    def __new__(mcs, name, bases, attrs):

        if not any(isinstance(base, EntityMeta) for base in bases):
            return type.__new__(mcs, name, bases, attrs)

        inherited_properties = {}
        for base in bases:
            if isinstance(base, EntityMeta):
                inherited_properties.update(base.__properties__)

        properties = {}
        EntityMeta._extract_properties(attrs, properties)

        # Values live on instances, definitions are kept in __properties__
        for key in properties:
            del attrs[key]

        klass = type.__new__(mcs, name, bases, attrs)

        annotations = EntityMeta._get_annotations(klass)
        for key, prop in properties.items():
            prop.bind(key, declared_type(annotations.get(key), prop.is_array), klass.__module__)

        klass.__properties__ = dict(list(inherited_properties.items()) + list(properties.items()))
        register_class(klass)

        return klass

    @staticmethod
    def _extract_properties(attrs, properties):
        for name in attrs:
            value = attrs[name]
            if isinstance(value, Field):
                properties[name] = value

    @staticmethod
    def _get_annotations(klass):
        try:
            return inspect.get_annotations(klass, eval_str=True)
        except NameError as e:
            logger.debug('Postponing annotations of %s: %s', get_fqn(klass), e)

        # Forward references stay strings and are evaluated again on hydration
        annotations = {}
        namespace = dict(vars(klass))
        for key, annotation in EntityMeta._get_raw_annotations(klass).items():
            if isinstance(annotation, str):
                evaluated = evaluate(annotation, klass.__module__, namespace)
                if evaluated is not None:
                    annotation = evaluated
            annotations[key] = annotation

        return annotations

    @staticmethod
    def _get_raw_annotations(klass):
        if sys.version_info >= (3, 14):
            import annotationlib
            return annotationlib.get_annotations(klass, format=annotationlib.Format.STRING)
        return inspect.get_annotations(klass)


class Serializable:
    def serialize(self):
        return {}


class Entity(Serializable, metaclass=EntityMeta):
    __properties__ = {}

    # Applied to naive datetime values on serialization
    __timezone__ = tz.UTC

    def __init__(self, data=None):
        """ Hydrates entity from passed data.
        :param data: mapping of field names to raw values
        :raises ValidationError: when data does not match declared fields
        """
        if data is None:
            data = {}

        if not isinstance(data, Mapping):
            raise TypeError('Cannot hydrate %s from object of type %s' % (get_fqn(self.__class__), kind_of(data)))

        values = self._hydrate(data)

        for key, prop in self.__properties__.items():
            if key in values:
                self.set_property(key, values[key])
            else:
                self.set_property(key, copy.deepcopy(prop.default))

    @classmethod
    def from_json(cls, text):
        return cls(json.loads(text))

    def to_json(self, **kwargs):
        return json.dumps(self.serialize(), **kwargs)

    def get_property(self, name):
        self._check_property(name)
        return getattr(self, name)

    def set_property(self, name, value):
        self._check_property(name)
        setattr(self, name, value)
        return self

    def serialize(self):
        result = {}
        for key, prop in self.__properties__.items():
            value = getattr(self, key)
            if prop.required or value is not None:
                result[prop.name] = self._serialize_value(value)

        return result

    def _serialize_value(self, value):
        if isinstance(value, Serializable):
            return value.serialize()

        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=self.__timezone__)
            return value.isoformat(timespec='seconds')

        if isinstance(value, date):
            return value.isoformat()

        if isinstance(value, (list, tuple)):
            return [self._serialize_value(item) for item in value]

        if isinstance(value, dict):
            return {key: self._serialize_value(item) for key, item in value.items()}

        return value

    def _check_property(self, name):
        if name not in self.__properties__:
            raise AttributeError('%s has no property `%s`' % (get_fqn(self.__class__), name))

    def __getattr__(self, name):
        # Synthesizes get_<property>() and set_<property>(value) accessors
        prefix, _, key = name.partition('_')
        if key in self.__properties__:
            if prefix == 'get':
                return lambda: self.get_property(key)
            if prefix == 'set':
                return lambda value: self.set_property(key, value)

        raise AttributeError('%r object has no attribute %r' % (self.__class__.__name__, name))

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.serialize())

    @classmethod
    def _hydrate(cls, data):
        logger.debug('Hydrating %s', get_fqn(cls))

        data = dict(data)
        values = {}
        missing_fields = []
        missing_classes = []
        invalid_values = []

        for key, prop in cls.__properties__.items():
            name = prop.name
            if name not in data:
                if prop.required:
                    missing_fields.append(name)
                continue

            strategy, type_ref = resolve(prop.type, prop.module, prop.is_array)
            if strategy is None:
                missing_classes.append('Missing class %s for field %s' % (type_name(prop.type), key))
                continue

            value = data.pop(name)
            logger.debug('Field %s.%s resolved as %s %s', cls.__name__, key, strategy, type_name(type_ref))

            if prop.is_array and not (value is None and prop.nullable):
                if not isinstance(value, (list, tuple)):
                    invalid_values.append(TypeMismatchError(cls, name, 'array', kind_of(value)))
                    continue

                collection = []
                for index, item in enumerate(value):
                    try:
                        collection.append(cls._coerce(strategy, type_ref, item, '%s[%d]' % (name, index), prop.nullable))
                    except FieldError as e:
                        invalid_values.append(e)
                values[key] = collection
            else:
                try:
                    values[key] = cls._coerce(strategy, type_ref, value, name, prop.nullable)
                except FieldError as e:
                    invalid_values.append(e)

        if missing_classes:
            cls._fail(UnresolvableTypeError(cls, missing_classes))

        if invalid_values:
            if len(invalid_values) == 1:
                cls._fail(invalid_values[0])
            cls._fail(InvalidValueError(cls, invalid_values))

        if data:
            cls._fail(UnexpectedFieldError(cls, [str(name) for name in data]))

        if missing_fields:
            cls._fail(MissingFieldError(cls, missing_fields))

        logger.debug('Hydrated %s', get_fqn(cls))
        return values

    @classmethod
    def _coerce(cls, strategy, type_ref, value, name, nullable):
        if strategy == PASSTHROUGH:
            return value

        if value is None and nullable:
            return None

        if strategy == SCALAR:
            if not is_scalar(value):
                raise TypeMismatchError(cls, name, type_ref, kind_of(value))
            return value

        return cls._build(type_ref, value, name)

    @classmethod
    def _build(cls, type_ref, value, name):
        if issubclass(type_ref, Entity):
            if not isinstance(value, Mapping):
                raise NestedEntityError(cls, name, type_ref, TypeMismatchError(cls, name, 'object', kind_of(value)))
            builder = type_ref
        else:
            builder = get_builder(type_ref)

        try:
            return builder(value)
        except Exception as e:
            raise NestedEntityError(cls, name, type_ref, e) from e

    @classmethod
    def _fail(cls, error):
        logger.debug('Could not hydrate %s: %s', get_fqn(cls), error)
        raise error
