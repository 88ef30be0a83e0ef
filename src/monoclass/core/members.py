"""Member tables with delegation to a base table.

Each class owns one MemberTable for its instance members. A name that is not
present in a table is looked up in the table of the base class, and so on up
the chain, until some class defines it or the root is reached.

Item access is the normative interface. Attribute access is provided as a
convenience so that a member function can be reached or assigned the way
overriding code usually spells it::

    B.members.describe = lambda self: 'B:' + A.members.describe(self)

Attribute access does not reach members whose names collide with the
mapping interface (``get``, ``keys``, ``update``, ...) or start with an
underscore. Use item access for those.
"""
from __future__ import annotations

__all__ = ['MemberTable']

import collections.abc
import logging
import types
import typing

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

_MISSING = object()


class MemberTable(collections.abc.MutableMapping):
    """Mapping of instance member names to values for a single class.

    Reads delegate to *base* for names not defined locally. Writes and
    deletions only ever touch the local table.
    """
    _owner: str
    _base: typing.Optional[MemberTable]
    _local: typing.Dict[str, typing.Any]

    def __init__(self, owner: str, base: MemberTable = None):
        if base is not None and not isinstance(base, MemberTable):
            raise TypeError('*base* must be a MemberTable or None. Got {}'.format(repr(base)))
        object.__setattr__(self, '_owner', str(owner))
        object.__setattr__(self, '_base', base)
        object.__setattr__(self, '_local', {})

    @property
    def base(self) -> typing.Optional[MemberTable]:
        """The table consulted for names that are not defined locally."""
        return self._base

    @property
    def local(self) -> typing.Mapping[str, typing.Any]:
        """Read-only view of the members defined directly in this table."""
        return types.MappingProxyType(self._local)

    def lookup(self, name: str, default=_MISSING):
        """Find *name* in this table or the nearest base table that defines it.

        Raises:
            KeyError if *name* is not defined anywhere in the chain and no
            *default* is given.
        """
        if name in self._local:
            return self._local[name]
        if self._base is not None:
            return self._base.lookup(name, default)
        if default is _MISSING:
            raise KeyError(name)
        return default

    def __getitem__(self, name: str):
        return self.lookup(name)

    def __setitem__(self, name: str, value):
        if not isinstance(name, str):
            raise TypeError('Member names must be strings. Got {}'.format(repr(name)))
        self._local[name] = value

    def __delitem__(self, name: str):
        # Inherited members belong to the base table.
        del self._local[name]

    def __contains__(self, name) -> bool:
        table = self
        while table is not None:
            if name in table._local:
                return True
            table = table._base
        return False

    def __iter__(self) -> typing.Iterator[str]:
        seen = set()
        table = self
        while table is not None:
            for name in table._local:
                if name not in seen:
                    seen.add(name)
                    yield name
            table = table._base

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def clear(self):
        """Remove the local members. Base tables are not affected."""
        self._local.clear()

    def pop(self, name: str, default=_MISSING):
        """Remove a local member and return its value.

        Inherited members are never removed. Without a *default*, a name that
        is not defined locally raises KeyError.
        """
        if default is _MISSING:
            return self._local.pop(name)
        return self._local.pop(name, default)

    def popitem(self) -> typing.Tuple[str, typing.Any]:
        """Remove and return the most recently defined local member."""
        return self._local.popitem()

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self.lookup(name)
        except KeyError:
            raise AttributeError('{} has no member {}'.format(repr(self), repr(name))) from None

    def __setattr__(self, name: str, value):
        if name.startswith('_'):
            raise AttributeError('Cannot assign private attribute {} on {}.'.format(repr(name), repr(self)))
        self[name] = value

    def __delattr__(self, name: str):
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return '<{} of {} {}>'.format(self.__class__.__name__, self._owner, repr(self._local))
