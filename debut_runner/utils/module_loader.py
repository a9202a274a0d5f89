# -*- coding: utf-8 -*-
"""
Fresh Module Loader
===================

캐시 없는 모듈 로드. 봇 파일은 러너 프로세스가 살아있는 동안 다시 생성되므로
매 호출마다 소스를 다시 읽고 새 모듈 객체에서 실행한다.

- __pycache__ 바이트코드 사용 없음 (항상 소스 compile, 하위 import도 .pyc 미생성)
- 실행 중에만 sys.modules에 고유 이름(_debut_fresh_N.<stem>)으로 등록
- 봇 디렉토리를 sys.path 맨 앞에 추가: `from strategy import X` 가능
- 임시 패키지(_debut_fresh_N) 안에서 실행: `from .strategy import X` 가능
- 실행 전후로 봇 디렉토리 아래 파일에서 온 캐시 모듈 제거
"""
import importlib.util
import itertools
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Optional, Union

from ..errors import ModuleLoadError

logger = logging.getLogger(__name__)

_load_counter = itertools.count(1)


def _package_name() -> str:
    return f"_debut_fresh_{next(_load_counter)}"


def _is_under(file: str, directory: Path) -> bool:
    try:
        Path(file).resolve().relative_to(directory)
    except (ValueError, OSError):
        return False
    return True


def purge_cached_modules(directory: Path) -> int:
    """directory 아래 파일에서 로드된 sys.modules 항목 제거 (debut_runner 제외)"""
    own = __name__.split('.')[0]
    stale = [
        name
        for name, module in list(sys.modules.items())
        if name.split('.')[0] != own
        and isinstance(getattr(module, '__file__', None), str)
        and _is_under(module.__file__, directory)
    ]
    for name in stale:
        sys.modules.pop(name, None)
    return len(stale)


def _drop_package(package: str) -> None:
    for name in [n for n in sys.modules if n == package or n.startswith(package + '.')]:
        sys.modules.pop(name, None)


def load_fresh(path: Union[str, Path], required: bool = True) -> Optional[ModuleType]:
    """
    파이썬 파일을 새 모듈로 로드

    Args:
        path: 모듈 파일 경로
        required: False면 파일이 없을 때 None 반환

    Returns:
        실행된 모듈 (required=False이고 파일이 없으면 None)

    Raises:
        ModuleLoadError: 파일 없음(required), 문법 오류, 최상위 실행 중 예외
    """
    p = Path(path).resolve()
    if not p.is_file():
        if not required:
            return None
        raise ModuleLoadError(str(p), "file not found")

    try:
        source = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ModuleLoadError(str(p), f"cannot read source ({e})") from e

    bot_dir = p.parent
    package = _package_name()
    stem = p.stem.replace('-', '_').replace('.', '_')

    spec = importlib.util.spec_from_file_location(f"{package}.{stem}", p)
    if spec is None:
        raise ModuleLoadError(str(p), "no module spec")
    module = importlib.util.module_from_spec(spec)

    parent = ModuleType(package)
    parent.__path__ = [str(bot_dir)]
    parent.__package__ = package

    purge_cached_modules(bot_dir)
    importlib.invalidate_caches()
    dont_write_bytecode = sys.dont_write_bytecode
    sys.dont_write_bytecode = True
    dir_entry = str(bot_dir)
    sys.path.insert(0, dir_entry)
    sys.modules[package] = parent
    sys.modules[spec.name] = module
    try:
        code = compile(source, str(p), 'exec')
        exec(code, module.__dict__)
    except Exception as e:
        raise ModuleLoadError(str(p), f"{type(e).__name__}: {e}") from e
    finally:
        sys.dont_write_bytecode = dont_write_bytecode
        _drop_package(package)
        purge_cached_modules(bot_dir)
        try:
            sys.path.remove(dir_entry)
        except ValueError:
            pass

    logger.debug(f"Loaded {p} as {spec.name}")
    return module
