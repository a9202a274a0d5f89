# -*- coding: utf-8 -*-
"""
Command Line Arguments
======================

CLI 토큰 → 플래그 맵.

    --key=value  -> {"key": "value"}   (첫 번째 '='에서만 분리)
    --key        -> {"key": True}
    -abc         -> {"a": True, "b": True, "c": True}
    그 외         -> 무시

값 변환은 하지 않는다 ("1", "true" 모두 문자열). 같은 키는 마지막 값이 이긴다.
"""
import sys
from typing import Dict, Iterable, Optional, Union

FlagMap = Dict[str, Union[str, bool]]


def get_args(argv: Optional[Iterable[str]] = None) -> FlagMap:
    """
    Args:
        argv: 토큰 시퀀스 (기본: sys.argv[1:])

    Returns:
        새 FlagMap (예외 없음)
    """
    if argv is None:
        argv = sys.argv[1:]

    args: FlagMap = {}
    for arg in argv:
        if not isinstance(arg, str):
            continue
        # long arg
        if arg.startswith('--'):
            flag, sep, value = arg[2:].partition('=')
            args[flag] = value if sep else True
        # flags
        elif arg.startswith('-'):
            for flag in arg[1:]:
                args[flag] = True

    return args
