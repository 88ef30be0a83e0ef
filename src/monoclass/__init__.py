"""monoclass: a minimal single-inheritance object model.

Declare a class with a name and an optional base, attach instance members and
static attributes incrementally, and call the class to construct instances
whose member lookups follow the inheritance chain::

    import monoclass

    Animal = monoclass.create('Animal')
    Animal.define({
        '__ctor': lambda self, sound='...': setattr(self, 'sound', sound),
        'speak': lambda self: self.sound,
    })
    Dog = monoclass.create('Dog', Animal)
    dog = Dog('woof')
    assert dog.speak() == 'woof'
    assert dog.instanceof(Animal) and Dog.extends(Animal)

Use `Namespace` to keep declared classes in an explicit registry by name.
"""

__all__ = ['ClassDescriptor', 'ClassFactory', 'Instance', 'MemberTable', 'Namespace',
           'create', 'get_factory', 'instanceof']

import logging

from monoclass.core import ClassDescriptor
from monoclass.core import ClassFactory
from monoclass.core import create
from monoclass.core import get_factory
from monoclass.core import Instance
from monoclass.core import instanceof
from monoclass.core import MemberTable
from monoclass.namespace import Namespace

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))
