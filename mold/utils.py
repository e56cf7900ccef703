import importlib
import inspect


def get_fqn(obj):
    return inspect.getmodule(obj).__name__ + '.' + obj.__qualname__


def type_name(type_ref):
    if inspect.isclass(type_ref):
        return get_fqn(type_ref)
    return str(type_ref)


def kind_of(value):
    """ Returns the JSON-like kind of the passed value, used in error messages.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, (list, tuple)):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return value.__class__.__name__


def locate(path: str):
    """ Imports an object by its dotted path, e.g. `datetime.datetime`.
    Returns None if the path cannot be imported.
    """
    module_name, _, attribute = path.lstrip('.').rpartition('.')
    if not module_name:
        return None

    try:
        module = importlib.import_module(module_name)
    except ImportError:
        obj = locate(module_name)
        if obj is None:
            return None
        return getattr(obj, attribute, None)

    return getattr(module, attribute, None)
