class TodoStoreError(Exception):
    """Base class for everything a TodoStore raises."""


class TodoNotFound(TodoStoreError):
    def __init__(self, todo_id: int):
        super().__init__(f"todo {todo_id} not found")
        self.todo_id = todo_id


class TodoConflict(TodoStoreError):
    def __init__(self, todo_id: int):
        super().__init__(f"todo {todo_id} already exists")
        self.todo_id = todo_id


class PersistenceFailure(TodoStoreError):
    """The backing store could not complete a read or write.

    The driver exception is chained as ``__cause__``.
    """
