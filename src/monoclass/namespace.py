"""Explicit registry for declared classes.

Declaring a class and binding it under its own name is a convenience on top of
`create` and `ClassDescriptor.define`. Rather than writing into the caller's
module globals, the binding goes into a Namespace object owned by the caller::

    ns = Namespace()
    ns.declare('A')({'prop': 5})
    ns.declare('B', ns.A)({'prop': 10})
    assert ns.B().prop == 10

A Namespace has no effect on the semantics of the classes it holds.
"""
from __future__ import annotations

__all__ = ['Namespace']

import collections.abc
import logging
import typing

from monoclass.core.classes import ClassDescriptor
from monoclass.core.classes import ClassFactory
from monoclass.core.classes import get_factory
from monoclass.exceptions import ProtocolError

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


class Namespace(collections.abc.Mapping):
    """Map class names to classes.

    Classes are also readable as attributes, e.g. ``ns.A``, as long as the
    name does not collide with a method of this class.

    Args:
        factory: Factory used by `declare`. Defaults to `monoclass.get_factory()`.
    """
    def __init__(self, factory: ClassFactory = None):
        self._factory = factory if factory is not None else get_factory()
        self._classes: typing.Dict[str, ClassDescriptor] = {}

    @property
    def factory(self) -> ClassFactory:
        return self._factory

    def declare(self, name: str, base: ClassDescriptor = None) -> typing.Callable[..., ClassDescriptor]:
        """Create and register a class, then return a function to define its members.

        The class is registered before any members are defined, so it can be
        looked up by name even if the returned function is never called.

        Example::

            Point = ns.declare('Point')({'x': 0, 'y': 0})

        """
        cls = self._factory.create(name, base)
        self.register(cls)

        def define(*groups) -> ClassDescriptor:
            cls.define(*groups)
            return cls

        return define

    def register(self, cls: ClassDescriptor) -> ClassDescriptor:
        """Bind *cls* under its name.

        Registering the same class again has no effect.

        Raises:
            ProtocolError if a different class is already bound to the name.
        """
        if not isinstance(cls, ClassDescriptor):
            raise TypeError('Only monoclass classes can be registered. Got {}'.format(repr(cls)))
        current = self._classes.get(cls.name)
        if current is not None and current is not cls:
            raise ProtocolError('{} is already registered as {}.'.format(repr(cls.name), repr(current)))
        self._classes[cls.name] = cls
        logger.debug('Registered {}.'.format(repr(cls)))
        return cls

    def unregister(self, name: str) -> ClassDescriptor:
        """Remove and return the class bound to *name*."""
        cls = self._classes.pop(name)
        logger.debug('Unregistered {}.'.format(repr(cls)))
        return cls

    def __getitem__(self, name: str) -> ClassDescriptor:
        return self._classes[name]

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __getattr__(self, name: str) -> ClassDescriptor:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._classes[name]
        except KeyError:
            raise AttributeError('No class named {} in {}'.format(repr(name), repr(self))) from None

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, sorted(self._classes))
