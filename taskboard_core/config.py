import os
from dataclasses import dataclass, field

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _default_db_path() -> str:
    return os.path.join(PROJECT_ROOT, "data", "tasks.db")


@dataclass
class TaskboardConfig:
    port: int = 3000
    host: str = "127.0.0.1"
    db_path: str = field(default_factory=_default_db_path)
    debug: bool = False

    @classmethod
    def from_env(cls, defaults: dict = None) -> "TaskboardConfig":
        d = defaults or {}
        return cls(
            port=int(os.environ.get("PORT") or d.get("port", 3000)),
            host=os.environ.get("TASKBOARD_HOST", d.get("host", "127.0.0.1")),
            db_path=os.environ.get("TASKBOARD_DB_PATH") or d.get("db_path") or _default_db_path(),
            debug=os.environ.get("TASKBOARD_DEBUG", str(d.get("debug", "false"))).lower() in ("1", "true"),
        )
