import importlib
import sqlite3
import sys

HANDLER_MODULE = "todoserver.handlers.todo_handler"


def load_handler(monkeypatch, tmp_path, **env):
    monkeypatch.chdir(tmp_path)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delitem(sys.modules, HANDLER_MODULE, raising=False)
    return importlib.import_module(HANDLER_MODULE)


def test_handler_creates_schema_once_at_import(monkeypatch, tmp_path):
    db_path = tmp_path / "lambda.db"
    module = load_handler(
        monkeypatch,
        tmp_path,
        TODO_BACKEND="sql",
        DATABASE_URL=f"sqlite+aiosqlite:///{db_path}",
    )

    assert module.handler.lifespan == "off"
    with sqlite3.connect(db_path) as conn:
        tables = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    assert ("todos",) in tables

def test_handler_with_memory_backend(monkeypatch, tmp_path):
    module = load_handler(monkeypatch, tmp_path, TODO_BACKEND="memory")

    assert module.handler.lifespan == "off"
    assert module.app.state.store is module.store
