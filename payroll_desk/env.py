import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    log_file: bool = True
    log_console: bool = False
    currency: str = "rub."


def load_env() -> None:
    """Load .env from the working directory if present.
    Values already set in the process environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def _flag(raw: Optional[str], name: str, default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from PAYROLL_* environment variables."""
    env = os.environ if environ is None else environ

    level = env.get("PAYROLL_LOG_LEVEL", "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"PAYROLL_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

    return Settings(
        log_level=level,
        log_dir=Path(env.get("PAYROLL_LOG_DIR", "logs")),
        log_file=_flag(env.get("PAYROLL_LOG_FILE"), "PAYROLL_LOG_FILE", True),
        log_console=_flag(env.get("PAYROLL_LOG_CONSOLE"), "PAYROLL_LOG_CONSOLE", False),
        currency=env.get("PAYROLL_CURRENCY", "rub.").strip() or "rub.",
    )
