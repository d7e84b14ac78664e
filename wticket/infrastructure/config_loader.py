import os
import re
from pathlib import Path
from typing import Optional, Any

import yaml
from dotenv import load_dotenv

from wticket.domain.config import Config, Credentials, DriverConfig, DEFAULT_SERVER_URL

CONFIG_FILENAME = "config.yaml"


def find_config_path() -> str:
    """Find the most appropriate config.yaml path.

    Order of precedence:
    1. CONFIG_PATH environment variable (if set and file exists)
    2. ./config.yaml in current working directory
    3. Search upward from current working directory for config.yaml
    4. config.yaml next to the installed package (fallback when running from source tree)

    Raises FileNotFoundError if no config file is found.
    """
    env_config_path = os.getenv("CONFIG_PATH")
    if env_config_path:
        path = Path(env_config_path)
        if path.is_file():
            return str(path)
        raise FileNotFoundError(f"CONFIG_PATH is set but file not found: {env_config_path}")

    cwd_config = Path.cwd() / CONFIG_FILENAME
    if cwd_config.is_file():
        return str(cwd_config)

    p = Path.cwd()
    for parent in (p, *p.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return str(candidate)

    package_config = Path(__file__).resolve().parents[1] / CONFIG_FILENAME
    if package_config.is_file():
        return str(package_config)

    raise FileNotFoundError(
        f"{CONFIG_FILENAME} not found. Set CONFIG_PATH, or place {CONFIG_FILENAME} in the current working "
        "directory or a parent directory."
    )


def load(config_path: Optional[str] = None) -> Config:
    file = _find_config(config_path)
    data = _read_config(file)

    if not isinstance(data, dict):
        raise ValueError(f"Parsed config file {file} does not contain a mapping")

    return _map_to_domain(data)


def _read_config(file: Path) -> Any:
    content = file.read_text()

    def replace_env_var(match: re.Match) -> str:
        var_name = match.group(1)
        return os.getenv(var_name, match.group(0))

    content = re.sub(r'\$\{(\w+)}', replace_env_var, content)

    return yaml.safe_load(content)


def _find_config(config_path: str | None) -> Path:
    load_dotenv()

    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return path
    return Path(find_config_path())


def _map_to_domain(data: dict) -> Config:
    driver_config = DriverConfig(
        server_url=data.get('server_url') or DEFAULT_SERVER_URL,
        headless=bool(data.get('headless', True)),
        timeout_ms=int(data.get('timeout_ms', 30000)),
    )

    credentials = Credentials(
        user_login=str(data.get('user_login', '')),
        user_password=str(data.get('user_password', '')),
    )

    return Config(
        log_level=data.get('log_level', 'INFO'),
        driver_config=driver_config,
        credentials=credentials,
    )
