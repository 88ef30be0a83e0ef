"""Instances of monoclass classes.

An Instance is bound for its lifetime to the ClassDescriptor that created it.
Attribute reads check the instance's own fields first. Reads of the reserved
names ``class`` (also spelled ``class_``) and ``instanceof`` are answered by
the instance itself. Any other name is looked up in the member table of the
bound class, which delegates to its base classes.

Plain functions found in the member table are returned as methods bound to
the instance, so ``obj.describe()`` passes *obj* as the first argument.
"""
from __future__ import annotations

__all__ = ['Instance', 'instanceof', 'INSTANCE_ATTRIBUTES', 'RESERVED_INSTANCE_NAMES']

import copy
import logging
import types
import typing

if typing.TYPE_CHECKING:
    from monoclass.core.classes import ClassDescriptor

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

RESERVED_INSTANCE_NAMES = frozenset(('class', 'class_', 'instanceof'))
"""Names resolved by the instance itself rather than through the member table."""


class Instance:
    """An object constructed by calling a ClassDescriptor.

    Not meant to be created directly. See `monoclass.core.classes.ClassDescriptor.__call__`.
    """
    __slots__ = ('_bound_class', '__dict__', '__weakref__')

    def __init__(self, cls: ClassDescriptor):
        object.__setattr__(self, '_bound_class', cls)

    @property
    def class_(self) -> ClassDescriptor:
        """The class that created this instance. Same as ``getattr(obj, 'class')``."""
        return self._bound_class

    def instanceof(self, target) -> bool:
        """Whether this instance was created by *target* or by a class that extends it."""
        cls = self._bound_class
        return cls is target or cls.extends(target)

    def __getattr__(self, name: str):
        if name == '_bound_class':
            raise AttributeError(name)
        cls = self._bound_class
        if name == 'class':
            return cls
        try:
            value = cls.members.lookup(name)
        except KeyError:
            raise AttributeError('{} has no field or member {}'.format(repr(self), repr(name))) from None
        if isinstance(value, types.FunctionType):
            return types.MethodType(value, self)
        return value

    def __setattr__(self, name: str, value):
        if name in RESERVED_INSTANCE_NAMES or name == '_bound_class':
            raise AttributeError('{} is reserved on {}.'.format(repr(name), repr(self)))
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str):
        if name in RESERVED_INSTANCE_NAMES or name == '_bound_class':
            raise AttributeError('{} is reserved on {}.'.format(repr(name), repr(self)))
        object.__delattr__(self, name)

    def __dir__(self) -> typing.Iterable[str]:
        return sorted(set(self.__dict__) | set(self._bound_class.members) | RESERVED_INSTANCE_NAMES)

    def __copy__(self) -> Instance:
        duplicate = Instance(self._bound_class)
        duplicate.__dict__.update(self.__dict__)
        return duplicate

    def __deepcopy__(self, memo) -> Instance:
        # The class is shared, only the own fields are copied.
        duplicate = Instance(self._bound_class)
        memo[id(self)] = duplicate
        duplicate.__dict__.update(copy.deepcopy(self.__dict__, memo))
        return duplicate

    def __repr__(self) -> str:
        return '[object {}]'.format(self._bound_class.name)


INSTANCE_ATTRIBUTES = RESERVED_INSTANCE_NAMES | frozenset(dir(Instance))
"""Names an instance resolves without consulting the member table. They cannot be members."""


def instanceof(value, target) -> bool:
    """Whether *value* is an Instance of *target* or of a class that extends it.

    Unlike `Instance.instanceof`, accepts any value and returns False for
    values that are not monoclass instances.
    """
    return isinstance(value, Instance) and value.instanceof(target)
