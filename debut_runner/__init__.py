"""
Debut Runner - Bot Bootstrap Layer
==================================

Core Components:
- resolver.py: 봇 이름 → BotData (schema → bot/cfgs/meta 로드 → 검증)
- store.py: schema.json / .tokens.json
- models.py: BotDataInfo, BotData
- errors.py: 에러 분류
- config/: YAML + .env + 환경변수 설정
- utils/: 파일 읽기, CLI 인자 파싱, fresh 모듈 로더
- cli.py: debut-runner 커맨드
"""
from .errors import (
    BotNotFound,
    BotResolutionError,
    ConfigMissing,
    ConstructorNameMismatch,
    JsonParseError,
    ModuleLoadError,
    RegistryMissing,
    StoreMissingError,
)
from .models import BotData, BotDataInfo
from .resolver import get_bot_data, resolve_bot_data
from .store import get_bots_schema, get_tokens, list_bot_names
from .utils.args import get_args
from .utils.module_loader import load_fresh

__all__ = [
    'BotData',
    'BotDataInfo',
    'get_bot_data',
    'resolve_bot_data',
    'get_bots_schema',
    'get_tokens',
    'list_bot_names',
    'get_args',
    'load_fresh',
    'BotNotFound',
    'BotResolutionError',
    'ConfigMissing',
    'ConstructorNameMismatch',
    'JsonParseError',
    'ModuleLoadError',
    'RegistryMissing',
    'StoreMissingError',
]
