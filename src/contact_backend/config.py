from dataclasses import dataclass, field
from environs import Env
from pathlib import Path

DEFAULT_STATIC_DIR = str(Path(__file__).resolve().parent / "static")

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    static_dir: str = DEFAULT_STATIC_DIR

@dataclass
class DBConfig:
    """ Explicit SQLAlchemy URL """
    url: str | None = None

    """ PostgreSQL """
    host: str | None = None
    port: int | None = None
    name: str | None = None
    user: str | None = None
    password: str | None = None

    """ SQLite """
    path: str | None = "data/contact.db"

@dataclass
class Config:
    """ Config """
    server: ServerConfig
    db: DBConfig

def load_config(path: str | None = None) -> Config:
    env = Env()
    env.read_env(path)

    return Config(
        server=ServerConfig(
            host=env('HOST', '0.0.0.0'),
            port=env.int('PORT', 3001),
            log_level=env('LOG_LEVEL', 'INFO').upper(),
            cors_origins=env.list('CORS_ORIGINS', ['*']),
            static_dir=env('STATIC_DIR', DEFAULT_STATIC_DIR)
        ),
        db=DBConfig(
            url=env('DATABASE_URL', None),
            host=env('DB_HOST', None),
            port=env.int('DB_PORT', None),
            name=env('DB_NAME', None),
            user=env('DB_USER', None),
            password=env('DB_PASSWORD', None),
            path=env('DB_PATH', 'data/contact.db')
        )
    )
