"""Class descriptors and the factory that produces them.

A ClassDescriptor is a plain Python object playing the role of a class in the
monoclass object model. It has a name, at most one base class, a MemberTable
of instance members and a set of static attributes. Calling it creates an
Instance and runs the constructor protocol.

Example::

    A = create('A')
    A.define({'describe': lambda self: 'A'})
    B = create('B', A)
    B.define({'describe': lambda self: 'B:' + A.members.describe(self)})
    assert B().describe() == 'B:A'

Static attributes are attached with the static marker prefix (``'__'`` by
default) or through `ClassDescriptor.define_static`. They are not inherited.

Constructor protocol:
    Every class has a ``ctor(instance, *args, **kwargs)`` entry point. Unless a
    class overrides it with a static ``ctor``, the entry point forwards the
    instance and all arguments unchanged to the ``ctor`` of the base class, and
    does nothing for a root class. An overriding ``ctor`` must call the base
    ``ctor`` itself if base initialization is wanted.
"""
from __future__ import annotations

__all__ = ['ClassDescriptor', 'ClassFactory', 'create', 'get_factory']

import collections.abc
import logging
import typing

from monoclass.core.instances import Instance
from monoclass.core.instances import INSTANCE_ATTRIBUTES
from monoclass.core.members import MemberTable
from monoclass.exceptions import InvalidBaseError
from monoclass.exceptions import InvalidMemberGroupError
from monoclass.exceptions import InvalidNameError
from monoclass.exceptions import ReservedNameError

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

DEFAULT_STATIC_MARKER = '__'

CAPABILITIES = frozenset(('name', 'base', 'members', 'define', 'define_static', 'define_instance', 'extends'))
"""Fixed attributes of every ClassDescriptor. They cannot be assigned or shadowed by statics."""

MemberGroup = typing.Mapping[str, typing.Any]


class _Lineage:
    """Identity token shared by all classes produced by one factory."""
    def __init__(self, factory_name: str):
        self.factory_name = factory_name

    def __repr__(self):
        return '<lineage of {}>'.format(self.factory_name)


def _check_groups(groups: typing.Sequence) -> typing.List[MemberGroup]:
    for position, group in enumerate(groups, start=1):
        if not isinstance(group, collections.abc.Mapping):
            raise InvalidMemberGroupError(
                'Member group [{}] should be a mapping: {}'.format(position, repr(group)),
                position=position)
        for key in group:
            if not isinstance(key, str):
                raise InvalidMemberGroupError(
                    'Member group [{}] has a non-string member name: {}'.format(position, repr(key)),
                    position=position)
    return list(groups)


class ClassDescriptor:
    """A class in the monoclass object model.

    Instances are only created by `ClassFactory.create`.

    Attribute reads resolve in this order:
        1. the fixed capabilities (`name`, `base`, `members`, `define`, ...) and `ctor`,
        2. static attributes defined on this class,
        3. instance members, through the delegation chain of `members`.

    The last step lets an overriding method call its base implementation as
    ``Base.method(self)``.

    Attribute assignment stores a static attribute, so ``A.ctor = f`` overrides
    the constructor of *A*.
    """
    __slots__ = ('_name', '_base', '_members', '_statics', '_lineage', '_static_marker', '__weakref__')

    def __init__(self, name: str, base: typing.Optional[ClassDescriptor], *, lineage: _Lineage,
                 static_marker: str = DEFAULT_STATIC_MARKER):
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_base', base)
        object.__setattr__(self, '_members', MemberTable(name, None if base is None else base.members))
        object.__setattr__(self, '_statics', {})
        object.__setattr__(self, '_lineage', lineage)
        object.__setattr__(self, '_static_marker', static_marker)

    @property
    def name(self) -> str:
        return self._name

    @property
    def base(self) -> typing.Optional[ClassDescriptor]:
        return self._base

    @property
    def members(self) -> MemberTable:
        return self._members

    def define(self, *groups: MemberGroup) -> None:
        """Add or replace members from one or more mappings.

        Keys that begin with the static marker define static attributes under
        the key with the marker removed. Other keys define instance members.
        Later values replace earlier ones, in argument order and then key order.

        All groups are checked before any value is stored.

        Raises:
            InvalidMemberGroupError if a group is not a mapping of strings to values.
            ReservedNameError if a name would shadow a fixed attribute.
        """
        marker = self._static_marker
        statics = []
        members = []
        for group in _check_groups(groups):
            for key, value in group.items():
                if key.startswith(marker):
                    statics.append((key[len(marker):], value))
                else:
                    members.append((key, value))
        self._store(statics=statics, members=members)

    def define_static(self, *groups: MemberGroup, **attributes) -> None:
        """Add or replace static attributes. Names are used as given."""
        statics = [item for group in _check_groups(groups) for item in group.items()]
        statics.extend(attributes.items())
        self._store(statics=statics)

    def define_instance(self, *groups: MemberGroup, **members) -> None:
        """Add or replace instance members. Names are used as given."""
        items = [item for group in _check_groups(groups) for item in group.items()]
        items.extend(members.items())
        self._store(members=items)

    def _store(self, statics=(), members=()):
        for name, _ in statics:
            _check_static_name(name)
        for name, _ in members:
            if name in INSTANCE_ATTRIBUTES:
                raise ReservedNameError('{} is reserved on instances and cannot be a member.'.format(repr(name)))
        for name, value in statics:
            self._statics[name] = value
        for name, value in members:
            self._members[name] = value
        logger.debug('Defined {} static(s) and {} member(s) on {}.'.format(len(statics), len(members), repr(self)))

    def extends(self, target) -> bool:
        """Whether *target* is a (possibly indirect) base of this class."""
        base = self._base
        return base is not None and (base is target or base.extends(target))

    @property
    def ctor(self) -> typing.Callable[..., None]:
        """Constructor entry point, called as ``ctor(instance, *args, **kwargs)``.

        The static ``ctor`` of this class if one is defined, otherwise the
        default that forwards everything to the base class constructor.
        """
        return self._statics.get('ctor', self._forward_ctor)

    def _forward_ctor(self, instance, *args, **kwargs):
        base = self._base
        if base is not None:
            base.ctor(instance, *args, **kwargs)

    def __call__(self, *args, **kwargs) -> Instance:
        instance = Instance(self)
        self.ctor(instance, *args, **kwargs)
        return instance

    def __getattr__(self, name: str):
        if name in ClassDescriptor.__slots__:
            raise AttributeError(name)
        statics = self._statics
        if name in statics:
            return statics[name]
        if name.startswith('__') and name.endswith('__'):
            raise AttributeError(name)
        try:
            return self._members.lookup(name)
        except KeyError:
            raise AttributeError('{} has no attribute or member {}'.format(repr(self), repr(name))) from None

    def __setattr__(self, name: str, value):
        _check_static_name(name)
        self._statics[name] = value

    def __delattr__(self, name: str):
        try:
            del self._statics[name]
        except KeyError:
            raise AttributeError('{} has no static attribute {}'.format(repr(self), repr(name))) from None

    def __repr__(self) -> str:
        return '[class {}]'.format(self._name)


_CLASS_ATTRIBUTES = frozenset(dir(ClassDescriptor))


def _check_static_name(name: str):
    if not name:
        raise ReservedNameError('Static attribute names must not be empty.')
    if name == 'ctor':
        return
    if name in CAPABILITIES or name in _CLASS_ATTRIBUTES:
        raise ReservedNameError('{} is a reserved class attribute.'.format(repr(name)))


class ClassFactory:
    """Create classes of one lineage.

    A class can only be used as the base of another class created by the same
    factory. Classes from other factories are rejected even when they look the
    same.

    Args:
        static_marker: Prefix that marks static attributes in `ClassDescriptor.define`.
        name: Label for log messages and reprs.
    """
    def __init__(self, *, static_marker: str = DEFAULT_STATIC_MARKER, name: str = None):
        if not isinstance(static_marker, str):
            raise TypeError('*static_marker* must be a string.')
        if not static_marker:
            raise ValueError('*static_marker* must not be empty.')
        self.static_marker = static_marker
        self.name = name if name is not None else 'ClassFactory@{:x}'.format(id(self))
        self._lineage = _Lineage(self.name)

    def create(self, name: str, base: ClassDescriptor = None) -> ClassDescriptor:
        """Create a new class named *name*, optionally derived from *base*.

        Raises:
            InvalidNameError if *name* is not a non-empty string.
            InvalidBaseError if *base* is not a class from this factory.
        """
        if not isinstance(name, str) or not name:
            raise InvalidNameError('Invalid class name: {}'.format(repr(name)))
        if base is not None and not self.produced(base):
            raise InvalidBaseError('Invalid base class: {}'.format(repr(base)))
        cls = ClassDescriptor(name, base, lineage=self._lineage, static_marker=self.static_marker)
        logger.debug('Created {} with base {} in {}.'.format(repr(cls), repr(base), self.name))
        return cls

    def produced(self, cls) -> bool:
        """Whether *cls* was created by this factory."""
        return isinstance(cls, ClassDescriptor) and cls._lineage is self._lineage

    def __repr__(self):
        return '<{} {} static_marker={}>'.format(self.__class__.__name__, self.name, repr(self.static_marker))


_factory = ClassFactory(name='default')


def get_factory() -> ClassFactory:
    """Get the process-wide default factory used by `create`."""
    return _factory


def create(name: str, base: ClassDescriptor = None) -> ClassDescriptor:
    """Create a class with the default factory. See `ClassFactory.create`."""
    return get_factory().create(name, base)
