"""Core of the monoclass object model.

* `members` provides the delegating MemberTable.
* `instances` provides Instance and the `instanceof` predicate.
* `classes` provides ClassDescriptor, ClassFactory and `create`.
* `spec` describes the abstract roles these types play.
"""

__all__ = ['ClassDescriptor', 'ClassFactory', 'Instance', 'MemberTable',
           'create', 'get_factory', 'instanceof']

from monoclass.core.classes import ClassDescriptor
from monoclass.core.classes import ClassFactory
from monoclass.core.classes import create
from monoclass.core.classes import get_factory
from monoclass.core.instances import Instance
from monoclass.core.instances import instanceof
from monoclass.core.members import MemberTable
