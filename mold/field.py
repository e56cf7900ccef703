class Field:
    """ Describes a single entity field.

    :param name: key used in hydrated/serialized data, defaults to the attribute name
    :param type: type tag (`string`, `int`, `float`, `bool`, `array`, `object`),
                 entity class, entity name or any other class with a builder
    :param is_array: field holds a list of values of `type`
    :param required: field has to be present in hydrated data
    :param nullable: field accepts None
    :param default: value set when the field is absent
    """

    DEFAULT_TYPE = 'string'

    @property
    def name(self):
        return self._name or self.attribute

    @property
    def type(self):
        if self._type is not None:
            return self._type
        if self._declared_type is not None:
            return self._declared_type
        return Field.DEFAULT_TYPE

    @property
    def is_array(self):
        return self._is_array

    @property
    def required(self):
        return self._required

    @property
    def nullable(self):
        return self._nullable

    @property
    def default(self):
        return self._default

    def __init__(self, name=None, type=None, is_array=False, required=False, nullable=False, default=None):
        self._name = name
        self._type = type
        self._is_array = is_array
        self._required = required
        self._nullable = nullable
        self._default = default
        self._declared_type = None
        self.attribute = None
        self.module = None

    def bind(self, attribute: str, declared_type=None, module=None):
        """ Binds field to the entity attribute it is declared on.
        :param module: name of the module declaring the entity, string types are looked up there first
        """
        self.attribute = attribute
        self._declared_type = declared_type
        self.module = module

    def __repr__(self):
        return '%s(name=%r, type=%r, is_array=%r, required=%r, nullable=%r)' % (
            self.__class__.__name__,
            self.name,
            self.type,
            self._is_array,
            self._required,
            self._nullable
        )
