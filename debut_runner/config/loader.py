"""
Config Loader
=============

YAML 기반 러너 설정 로더.

사용법:
    from debut_runner.config import get_runner_config

    config = get_runner_config()
    print(config.schema_file)  # schema.json
    print(config.api_token)    # API_TOKEN 환경변수

환경변수 오버라이드:
    DEBUT_SCHEMA_FILE=bots.json   # 레지스트리 파일명
    DEBUT_TOKENS_FILE=.tok.json   # 토큰 파일명
    DEBUT_LOG_LEVEL=DEBUG         # 로그 레벨
    API_TOKEN=xxxx                # API 토큰 (프로세스당 1회 읽음)
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv


ROOT_DIR = Path(__file__).parent.parent.parent
CONFIG_DIR = ROOT_DIR / "config"


@dataclass(frozen=True)
class RunnerConfig:
    """러너 설정"""
    # Stores (cwd 기준)
    schema_file: str = "schema.json"
    tokens_file: str = ".tokens.json"

    # Bot artifacts (entry.path 기준)
    bot_module: str = "bot.py"
    config_module: str = "cfgs.py"
    meta_module: str = "meta.py"
    meta_export: str = "default"

    # Process
    api_token: Optional[str] = None
    log_level: str = "WARNING"
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _load_env_files() -> None:
    # 이미 설정된 환경변수가 우선
    for env_file in (ROOT_DIR / ".env", Path.cwd() / ".env"):
        if env_file.exists():
            load_dotenv(env_file, override=False)


def _apply_env_overrides(config: Dict) -> Dict:
    stores = config.setdefault("stores", {})
    if os.getenv("DEBUT_SCHEMA_FILE"):
        stores["schema"] = os.getenv("DEBUT_SCHEMA_FILE")
    if os.getenv("DEBUT_TOKENS_FILE"):
        stores["tokens"] = os.getenv("DEBUT_TOKENS_FILE")
    if os.getenv("DEBUT_LOG_LEVEL"):
        config.setdefault("logging", {})
        config["logging"]["level"] = os.getenv("DEBUT_LOG_LEVEL").upper()
    return config


def load_runner_config(path: Optional[Path] = None) -> RunnerConfig:
    """설정 로드 (default.yaml + .env + env)"""
    _load_env_files()
    merged = _apply_env_overrides(_load_yaml(path or CONFIG_DIR / "default.yaml"))

    stores = merged.get("stores", {})
    artifacts = merged.get("artifacts", {})
    log = merged.get("logging", {})

    return RunnerConfig(
        schema_file=stores.get("schema", "schema.json"),
        tokens_file=stores.get("tokens", ".tokens.json"),
        bot_module=artifacts.get("bot", "bot.py"),
        config_module=artifacts.get("configs", "cfgs.py"),
        meta_module=artifacts.get("meta", "meta.py"),
        meta_export=artifacts.get("meta_export", "default"),
        api_token=os.getenv("API_TOKEN"),
        log_level=log.get("level", "WARNING"),
        raw=merged,
    )


@lru_cache(maxsize=1)
def get_runner_config() -> RunnerConfig:
    """프로세스 전역 설정 (최초 1회 로드)"""
    return load_runner_config()


def get_api_token() -> Optional[str]:
    """API 토큰 조회"""
    return get_runner_config().api_token
