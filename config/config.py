import os


def db_config_from_env(default_password: str) -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "employee_management"),
    }


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))
