"""Test class creation, member definition and the constructor protocol."""
from __future__ import annotations

import logging

import pytest
import monoclass
from monoclass import ClassFactory
from monoclass import create
from monoclass.exceptions import APIError
from monoclass.exceptions import InvalidBaseError
from monoclass.exceptions import InvalidMemberGroupError
from monoclass.exceptions import InvalidNameError
from monoclass.exceptions import MonoclassError
from monoclass.exceptions import ReservedNameError

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def test_create_root():
    A = create('A')
    assert A.name == 'A'
    assert A.base is None
    assert not A.extends(A)
    assert not A.extends(None)
    assert not A.extends(create('B'))
    assert repr(A) == '[class A]'
    assert A.members.base is None


def test_create_derived():
    A = create('A')
    B = create('B', A)
    assert B.base is A
    assert B.members.base is A.members


@pytest.mark.parametrize('name', ['', None, 42, b'A', ('A',)])
def test_invalid_name(name):
    with pytest.raises(InvalidNameError):
        create(name)


def test_invalid_base():
    class LooksLikeAClass:
        name = 'Fake'
        base = None
        members = {}
        _lineage = None

        def extends(self, target):
            return False

    with pytest.raises(InvalidBaseError):
        create('B', LooksLikeAClass())
    with pytest.raises(InvalidBaseError):
        create('B', 'A')

    # Same structure, different lineage.
    other = ClassFactory(name='other')
    Foreign = other.create('Foreign')
    with pytest.raises(InvalidBaseError):
        create('B', Foreign)
    assert other.create('B', Foreign).base is Foreign
    assert other.produced(Foreign)
    assert not monoclass.get_factory().produced(Foreign)


def test_errors_share_base_class():
    for error in (InvalidNameError, InvalidBaseError, InvalidMemberGroupError, ReservedNameError):
        assert issubclass(error, APIError)
        assert issubclass(error, MonoclassError)


def test_define_instance_members():
    A = create('A')
    A.define({'prop': 5}, {'method': len})
    assert A.members['prop'] == 5
    assert A.members['method'] is len
    # Class reads fall through to the member table.
    assert A.prop == 5


def test_define_last_write_wins():
    A = create('A')
    A.define({'x': 1})
    A.define({'x': 2})
    assert A.members['x'] == 2
    A.define({'x': 3}, {'x': 4})
    assert A.members['x'] == 4
    assert list(A.members.local) == ['x']


def test_define_statics_last_write_wins():
    A = create('A')
    A.define({'__v': 1})
    A.define({'__v': 2})
    assert A.v == 2
    A.define({'__v': 3}, {'__v': 4})
    assert A.v == 4
    A.define_static({'v': 5}, v=6)
    assert A.v == 6
    A.v = 7
    assert A.v == 7
    assert 'v' not in A.members


def test_define_statics():
    A = create('A')
    B = create('B', A)
    C = create('C', B)
    B.define({'__limit': 10, 'limit_member': 1})
    assert B.limit == 10
    assert 'limit' not in B.members
    assert 'limit' not in C.members
    with pytest.raises(AttributeError):
        C.limit
    with pytest.raises(AttributeError):
        A.limit
    C.define({'__limit': 3})
    assert C.limit == 3
    assert B.limit == 10


def test_statics_shadow_members_on_class_reads():
    A = create('A')
    A.define({'value': 'member', '__value': 'static'})
    assert A.value == 'static'
    assert A.members['value'] == 'member'
    assert A().value == 'member'


def test_define_rejects_non_mappings():
    A = create('A')
    with pytest.raises(InvalidMemberGroupError) as excinfo:
        A.define(42)
    assert excinfo.value.position == 1
    with pytest.raises(InvalidMemberGroupError) as excinfo:
        A.define({'ok': 1}, ['not', 'a', 'mapping'])
    assert excinfo.value.position == 2
    assert '[2]' in str(excinfo.value)
    # Nothing from a rejected call is stored.
    assert 'ok' not in A.members
    with pytest.raises(InvalidMemberGroupError):
        A.define({1: 'one'})


def test_reserved_names():
    A = create('A')
    for name in ('name', 'base', 'members', 'define', 'extends'):
        with pytest.raises(ReservedNameError):
            A.define({'__' + name: None})
    with pytest.raises(ReservedNameError):
        A.define({'__': None})
    with pytest.raises(ReservedNameError):
        A.define({'class': None})
    with pytest.raises(ReservedNameError):
        A.define_instance(instanceof=None)
    with pytest.raises(ReservedNameError):
        A.name = 'B'
    assert A.name == 'A'


def test_explicit_entry_points():
    A = create('A')
    A.define_static({'count': 0}, origin='static')
    A.define_instance({'__dunder': 'kept'}, greet='hi')
    assert A.count == 0
    assert A.origin == 'static'
    assert A.members['__dunder'] == 'kept'
    assert A.members['greet'] == 'hi'
    assert 'count' not in A.members


def test_static_assignment():
    A = create('A')
    A.limit = 5
    assert A.limit == 5
    assert 'limit' not in A.members
    del A.limit
    with pytest.raises(AttributeError):
        A.limit
    with pytest.raises(AttributeError):
        del A.limit


def test_configured_static_marker():
    factory = ClassFactory(static_marker='s_')
    A = factory.create('A')
    A.define({'s_count': 1, '__kept': 2})
    assert A.count == 1
    assert A.members['__kept'] == 2
    with pytest.raises(TypeError):
        ClassFactory(static_marker=None)
    with pytest.raises(ValueError):
        ClassFactory(static_marker='')


def test_default_ctor_does_nothing_at_root():
    A = create('A')
    a = A(1, 2, key='value')
    assert a.class_ is A
    assert vars(a) == {}


def test_overridden_ctor():
    A = create('A')

    def ctor(self, prop=None):
        if prop is not None:
            self.prop = prop

    A.define({'prop': 5, '__ctor': ctor})
    assert A.ctor is ctor
    assert A().prop == 5
    assert A(8).prop == 8


def test_ctor_chaining_is_explicit():
    calls = []
    A = create('A')
    A.define_static(ctor=lambda self, *args: calls.append(('A', args)))
    B = create('B', A)

    def b_ctor(self, value):
        calls.append(('B', (value,)))
        A.ctor(self, value * value)

    B.ctor = b_ctor
    C = create('C', B)

    def c_ctor(self, value):
        calls.append(('C', (value,)))

    C.ctor = c_ctor

    B(3)
    assert calls == [('B', (3,)), ('A', (9,))]
    del calls[:]
    # C does not call its base constructor, so neither B nor A run.
    C(3)
    assert calls == [('C', (3,))]


def test_ctor_errors_propagate():
    A = create('A')

    def ctor(self):
        raise RuntimeError('from ctor')

    A.ctor = ctor
    B = create('B', A)
    with pytest.raises(RuntimeError, match='from ctor'):
        B()
