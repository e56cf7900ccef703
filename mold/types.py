import inspect
import logging
import sys
import typing
from datetime import date, datetime
from dateutil import parser as date_parser
from .utils import get_fqn, kind_of, locate

logger = logging.getLogger(__name__)

ALLOWED_TYPES = ('array', 'object')
SCALAR_TYPES = ('int', 'float', 'bool', 'string')

PASSTHROUGH = 'passthrough'
SCALAR = 'scalar'
NESTED = 'nested'

_PRIMITIVES = {
    str: 'string',
    int: 'int',
    float: 'float',
    bool: 'bool',
    list: 'array',
    tuple: 'array',
    dict: 'object',
}

# Builtin names as they appear in postponed (string) annotations
_ANNOTATION_NAMES = {
    'str': 'string',
    'list': 'array',
    'tuple': 'array',
    'dict': 'object',
}

_classes = {}
_builders = {}


def register_class(cls, *aliases):
    """ Makes class resolvable by its fully qualified name, short name
    and any of passed aliases.
    """
    names = (get_fqn(cls), cls.__name__) + aliases
    for name in names:
        registered = _classes.get(name)
        if registered is not None and registered is not cls:
            logger.warning(
                'Type name `%s` is ambiguous: %s replaces %s, use the fully qualified name instead',
                name, get_fqn(cls), get_fqn(registered)
            )
        _classes[name] = cls


def register_builder(cls, builder, *aliases):
    """ Registers callable used to build instances of `cls` from hydrated values.
    :param cls: built class
    :param builder: callable accepting raw value and returning instance of `cls`
    :param aliases: additional names the class can be referred to in `Field(type=...)`
    """
    _builders[cls] = builder
    register_class(cls, *aliases)


def get_builder(cls):
    for klass in inspect.getmro(cls):
        if klass in _builders:
            return _builders[klass]
    return cls


def find_class(name: str, module=None):
    """ Finds class by name, looking into `module` first, then into registered
    classes and finally importing it by its dotted path.
    """
    scope = sys.modules.get(module) if module else None
    if scope is not None and name.isidentifier():
        obj = getattr(scope, name, None)
        if inspect.isclass(obj):
            return obj

    if name in _classes:
        return _classes[name]

    obj = locate(name) if '.' in name else None
    if inspect.isclass(obj):
        return obj

    return None


def resolve(type_ref, module=None, is_array=False):
    """ Classifies declared field type into one of the coercion strategies.

    :param type_ref: type tag, class name, postponed annotation or class
    :param module: name of the module string types are evaluated in
    :param is_array: field holds a list, `list[X]` resolves to X
    :return: tuple of strategy and resolved type, (None, None) when type cannot be resolved
    """
    if isinstance(type_ref, str):
        if type_ref in ALLOWED_TYPES:
            return PASSTHROUGH, type_ref
        if type_ref in SCALAR_TYPES:
            return SCALAR, type_ref
        cls = find_class(type_ref, module)
        if cls is None and module:
            declared = declared_type(evaluate(type_ref, module), is_array)
            if declared is not None and declared != type_ref:
                return resolve(declared, module, is_array)
        type_ref = cls

    if not inspect.isclass(type_ref):
        return None, None

    if type_ref in _PRIMITIVES:
        return resolve(_PRIMITIVES[type_ref])

    return NESTED, type_ref


def evaluate(expression: str, module, namespace=None):
    """ Evaluates postponed annotation in the scope of the module declaring it.
    Returns None when the expression cannot be evaluated yet.
    """
    scope = sys.modules.get(module)
    if scope is None:
        return None

    try:
        return eval(expression, vars(scope), namespace)
    except (NameError, AttributeError, SyntaxError, TypeError):
        return None


def declared_type(annotation, is_array=False):
    """ Translates class annotation into a field type.
    Returns None when annotation carries no usable type.
    """
    if annotation is None or annotation is inspect.Parameter.empty:
        return None

    if isinstance(annotation, str):
        return _ANNOTATION_NAMES.get(annotation, annotation)

    if isinstance(annotation, typing.ForwardRef):
        return declared_type(annotation.__forward_arg__, is_array)

    origin = typing.get_origin(annotation)
    if origin is not None:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if origin in (list, tuple):
            if is_array and args:
                return declared_type(args[0])
            return 'array'
        if origin is dict:
            return 'object'
        if len(args) == 1:
            return declared_type(args[0], is_array)
        return None

    if inspect.isclass(annotation):
        return annotation

    return None


def is_scalar(value):
    return isinstance(value, (bool, int, float, str))


def build_datetime(value):
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError('Cannot build datetime from value of type %s' % kind_of(value))
    return date_parser.parse(value)


def build_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return build_datetime(value).date()


register_builder(datetime, build_datetime, 'DateTime')
register_builder(date, build_date)
