# -*- coding: utf-8 -*-
"""
Bot Resolver
============

봇 이름 → BotData.

파이프라인 (전부 성공하거나 None):
1. schema.json 로드 (인자로 받지 않은 경우)
2. 이름이 같은 첫 번째 항목 탐색
3. path / src → 절대 경로 (cwd 기준)
4. bot.py → cfgs.py → meta.py 순서로 fresh 로드
5. 검증: cfgs 존재, bot 모듈에 name 멤버 존재
6. BotData 조립

사용법:
```python
import asyncio
from debut_runner.resolver import get_bot_data

data = asyncio.run(get_bot_data("MyBot"))
if data is None:
    ...  # stdout에 [ERROR] 한 줄 출력됨
```

resolve_bot_data()는 같은 파이프라인의 strict 버전으로, None 대신
BotResolutionError 하위 예외를 던진다.
"""
import asyncio
import inspect
import logging
import os
import sys
from types import ModuleType
from typing import Any, Dict, Optional, Sequence, Union

from .config import RunnerConfig, get_runner_config
from .errors import (
    BotNotFound,
    BotResolutionError,
    ConfigMissing,
    ConstructorNameMismatch,
    RegistryMissing,
    StoreError,
)
from .models import BotData, BotDataInfo
from .store import find_bot, get_bots_schema, normalize_schema
from .utils.module_loader import load_fresh

logger = logging.getLogger(__name__)

Schema = Sequence[Union[BotDataInfo, Dict[str, Any]]]


def _report(message: str) -> None:
    sys.stdout.write(f"[ERROR] {message}\n")


def _is_profile(value: Any) -> bool:
    # import된 모듈, 함수, 클래스, typing 별칭은 프로필이 아님
    if inspect.ismodule(value) or inspect.isclass(value) or inspect.isroutine(value):
        return False
    return type(value).__module__ not in ('typing', 'typing_extensions')


def collect_configs(module: ModuleType) -> Dict[str, Any]:
    """설정 모듈 → {프로필명: 옵션}"""
    exported = getattr(module, '__all__', None)
    if exported is not None:
        return {key: getattr(module, key) for key in exported}
    return {
        key: value
        for key, value in vars(module).items()
        if not key.startswith('_') and _is_profile(value)
    }


def _load_schema(schema: Optional[Schema], config: RunnerConfig):
    if schema is not None:
        try:
            return normalize_schema(schema)
        except StoreError as e:
            raise RegistryMissing(config.schema_file, f"is invalid: {e}") from e

    try:
        loaded = get_bots_schema(os.path.join(os.getcwd(), config.schema_file))
    except StoreError as e:
        raise RegistryMissing(config.schema_file, f"is invalid: {e}") from e
    if loaded is None:
        raise RegistryMissing(config.schema_file)
    return loaded


async def resolve_bot_data(
    name: str,
    schema: Optional[Schema] = None,
    config: Optional[RunnerConfig] = None,
) -> BotData:
    """
    봇 정보 수집 (strict)

    Args:
        name: 봇 이름 (= 봇 모듈의 생성자 이름)
        schema: 미리 로드한 레지스트리 (없으면 cwd/schema.json)
        config: 러너 설정 (없으면 get_runner_config())

    Returns:
        BotData

    Raises:
        RegistryMissing, BotNotFound, ModuleLoadError,
        ConfigMissing, ConstructorNameMismatch
    """
    config = config or get_runner_config()

    bots = await asyncio.to_thread(_load_schema, schema, config)
    bot_info = find_bot(bots, name)
    if bot_info is None:
        raise BotNotFound(name, config.schema_file)

    bot_dir = os.path.abspath(bot_info.path)
    src_dir = os.path.abspath(bot_info.src)
    logger.debug(f"Resolving {name}: dir={bot_dir} src={src_dir}")

    bot_module = await asyncio.to_thread(
        load_fresh, os.path.join(bot_dir, config.bot_module)
    )
    cfg_module = await asyncio.to_thread(
        load_fresh, os.path.join(bot_dir, config.config_module), False
    )
    meta_module = await asyncio.to_thread(
        load_fresh, os.path.join(bot_dir, config.meta_module)
    )
    meta = getattr(meta_module, config.meta_export, None)

    if cfg_module is None:
        raise ConfigMissing(name)

    # 생성자 이름 존재 여부만 확인
    if name not in vars(bot_module):
        raise ConstructorNameMismatch(name)

    return BotData(
        configs=collect_configs(cfg_module),
        meta=meta,
        dir=bot_dir,
        src=src_dir,
    )


async def get_bot_data(
    name: str,
    schema: Optional[Schema] = None,
    config: Optional[RunnerConfig] = None,
) -> Optional[BotData]:
    """
    봇 정보 수집

    실패 시 stdout에 [ERROR] 한 줄을 쓰고 None 반환 (예외를 밖으로 내보내지 않음).
    """
    try:
        return await resolve_bot_data(name, schema, config)
    except BotResolutionError as e:
        logger.debug(f"Bot resolution failed for {name}: {type(e).__name__}")
        _report(str(e))
        return None
    except Exception as e:
        logger.exception(f"Unexpected error while resolving {name}")
        _report(f"Error strategy data loading: {e}")
        return None
