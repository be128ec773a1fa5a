from sqlalchemy.engine import Engine
from sqlmodel import create_engine


def make_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Один движок на процесс, запросы идут из пула потоков
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)
