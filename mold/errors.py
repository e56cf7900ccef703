from .utils import get_fqn, type_name


class EntityError(Exception):
    def __init__(self, msg, entity=None):
        Exception.__init__(self, msg)
        self.message = msg
        self.entity = entity


class ValidationError(EntityError):
    """ Raised when an entity cannot be hydrated from the passed data.
    """
    pass


class UnresolvableTypeError(ValidationError):

    def __init__(self, entity, errors):
        ValidationError.__init__(
            self,
            'Some classes are missing while building entity of type %s: %s' % (get_fqn(entity), ', '.join(errors)),
            entity
        )
        self.errors = errors


class UnexpectedFieldError(ValidationError):

    def __init__(self, entity, fields):
        ValidationError.__init__(
            self,
            'Non existing fields while building entity of type %s: %s' % (get_fqn(entity), ', '.join(fields)),
            entity
        )
        self.fields = fields


class MissingFieldError(ValidationError):

    def __init__(self, entity, fields):
        ValidationError.__init__(
            self,
            'Missing fields while building entity of type %s: %s' % (get_fqn(entity), ', '.join(fields)),
            entity
        )
        self.fields = fields


class FieldError(ValidationError):
    """ Base for errors bound to the value of a single field.
    """

    def __init__(self, msg, entity, field, type):
        ValidationError.__init__(self, msg, entity)
        self.field = field
        self.type = type


class TypeMismatchError(FieldError):

    def __init__(self, entity, field, expected, actual):
        FieldError.__init__(
            self,
            'Invalid value for field %s: type %s instead of %s while building entity of type %s' % (
                field, actual, type_name(expected), get_fqn(entity)
            ),
            entity,
            field,
            expected
        )
        self.expected = expected
        self.actual = actual


class NestedEntityError(FieldError):

    def __init__(self, entity, field, type, cause):
        FieldError.__init__(
            self,
            'Unable to build field %s of type %s while building entity of type %s: %s' % (
                field, type_name(type), get_fqn(entity), cause
            ),
            entity,
            field,
            type
        )
        self.__cause__ = cause


class InvalidValueError(ValidationError):

    def __init__(self, entity, errors):
        ValidationError.__init__(
            self,
            'Invalid values while building entity of type %s: %s' % (
                get_fqn(entity), '; '.join(error.message for error in errors)
            ),
            entity
        )
        self.errors = errors
