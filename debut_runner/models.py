# -*- coding: utf-8 -*-
"""
Bot Data Models
===============

- BotDataInfo: schema.json 항목 (봇 위치 정보)
- BotData: get_bot_data() 결과 (configs, meta, 작업 디렉토리)
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class BotDataInfo:
    """schema.json 항목"""
    name: str
    path: str
    src: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BotDataInfo":
        """
        JSON 객체 → BotDataInfo

        Raises:
            ValueError: name/path/src 누락 또는 문자열 아님
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Bot entry must be an object, got {type(data).__name__}")
        values = {}
        for key in ('name', 'path', 'src'):
            value = data.get(key)
            if not isinstance(value, str):
                raise ValueError(f"Bot entry field '{key}' must be a string")
            values[key] = value
        return cls(**values)


@dataclass
class BotData:
    """봇 메타 정보 (configs, meta, 작업 디렉토리)"""
    configs: Dict[str, Any]
    meta: Any
    dir: str  # 절대 경로
    src: str  # 절대 경로

    def summary(self, name: str) -> Dict[str, Any]:
        """CLI 출력용 요약"""
        return {
            'name': name,
            'dir': self.dir,
            'src': self.src,
            'configs': sorted(self.configs.keys()),
            'meta': self.meta,
        }
