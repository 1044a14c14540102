"""Factory Boy definition for :class:`todolist.models.todo.Todo`."""

from __future__ import annotations

import factory

from tests.factories import BaseFactory
from tests.factories.user import UserFactory
from todolist.models.todo import Priority, Status, Todo


class TodoFactory(BaseFactory):
    """Build persisted todos; an owner is created unless one is given."""

    class Meta:
        model = Todo

    id = None
    owner = factory.SubFactory(UserFactory)
    title = factory.Sequence(lambda n: f"Todo #{n}")
    due_date = factory.Faker("date_between", start_date="-30d", end_date="+30d")
    priority = Priority.MEDIUM
    status = Status.TODO
