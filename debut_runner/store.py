# -*- coding: utf-8 -*-
"""
JSON Stores
===========

작업 디렉토리(cwd)의 JSON 파일 두 개:
- schema.json: 봇 레지스트리 [{name, path, src}, ...]
- .tokens.json: API 토큰 {name: token}

사용법:
    from debut_runner.store import get_bots_schema, get_tokens

    schema = get_bots_schema()   # 파일 없으면 None
    tokens = get_tokens()        # 파일 없으면 StoreMissingError
"""
import os
from typing import Any, Dict, List, Optional, Sequence

from .config import get_runner_config
from .errors import InvalidStoreError, StoreMissingError
from .models import BotDataInfo
from .utils.file import load_json_store


def _cwd_path(filename: str) -> str:
    return os.path.join(os.getcwd(), filename)


def normalize_schema(entries: Any) -> List[BotDataInfo]:
    """
    JSON 배열 → BotDataInfo 리스트

    Raises:
        InvalidStoreError: 배열이 아니거나 항목 구조가 잘못됨
    """
    if not isinstance(entries, (list, tuple)):
        raise InvalidStoreError(f"Bot schema must be an array, got {type(entries).__name__}")
    schema = []
    for i, entry in enumerate(entries):
        if isinstance(entry, BotDataInfo):
            schema.append(entry)
            continue
        try:
            schema.append(BotDataInfo.from_dict(entry))
        except ValueError as e:
            raise InvalidStoreError(f"Bot schema entry #{i}: {e}") from e
    return schema


def get_bots_schema(path: Optional[str] = None) -> Optional[List[BotDataInfo]]:
    """
    schema.json 로드

    Returns:
        BotDataInfo 리스트, 파일이 없으면 None

    Raises:
        JsonParseError: JSON 파싱 실패
        InvalidStoreError: 구조 오류
    """
    path = path or _cwd_path(get_runner_config().schema_file)
    data = load_json_store(path)
    if data is None:
        return None
    return normalize_schema(data)


def find_bot(schema: Sequence[BotDataInfo], name: str) -> Optional[BotDataInfo]:
    """이름이 같은 첫 번째 항목"""
    return next((bot for bot in schema if bot.name == name), None)


def list_bot_names(schema: Optional[Sequence[BotDataInfo]] = None) -> List[str]:
    """레지스트리 순서대로 봇 이름 목록"""
    if schema is None:
        schema = get_bots_schema()
    if schema is None:
        return []
    return [bot.name for bot in schema]


def get_tokens(path: Optional[str] = None) -> Dict[str, str]:
    """
    .tokens.json 로드

    Raises:
        StoreMissingError: 파일 없음
        JsonParseError: JSON 파싱 실패
        InvalidStoreError: string -> string 객체가 아님
    """
    path = path or _cwd_path(get_runner_config().tokens_file)
    data = load_json_store(path)
    if data is None:
        raise StoreMissingError(path)
    if not isinstance(data, dict):
        raise InvalidStoreError(f"Tokens file must be an object, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(value, str):
            raise InvalidStoreError(f"Token '{key}' must be a string")
    return dict(data)
