from todolist.models.todo import Priority, Status, Todo
from todolist.models.user import User

__all__ = [
    "Priority",
    "Status",
    "Todo",
    "User",
]
