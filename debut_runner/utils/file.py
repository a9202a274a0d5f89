# -*- coding: utf-8 -*-
"""
File Reader / JSON Store Loader
===============================

- read_file(): 파일 없음은 None (예외 아님), 빈 파일은 ""
- parse_json(): 잘못된 JSON은 JsonParseError
- load_json_store(): 둘의 조합. 없음(None)과 파싱 실패(예외)를 구분한다.

사용법:
    content = read_file("schema.json")
    if content is None:
        ...  # 파일 없음
    data = parse_json(content)  # JsonParseError 가능
"""
import json
from pathlib import Path
from typing import Any, Optional, Union

from ..errors import JsonParseError

PathLike = Union[str, Path]


def read_file(path: PathLike) -> Optional[str]:
    """UTF-8 텍스트 읽기. 파일이 없으면 None"""
    p = Path(path)
    if not p.is_file():
        return None
    with open(p, 'r', encoding='utf-8') as f:
        return f.read()


def parse_json(content: str) -> Any:
    """JSON 파싱. 실패 시 JsonParseError"""
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise JsonParseError(f"Invalid JSON: {e}") from e


def load_json_store(path: PathLike) -> Optional[Any]:
    """
    JSON 파일 로드

    Returns:
        파싱된 값, 파일이 없으면 None

    Raises:
        JsonParseError: 파일 내용이 유효한 JSON이 아님
    """
    content = read_file(path)
    if content is None:
        return None
    return parse_json(content)
