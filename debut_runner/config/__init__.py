"""
Config Module
=============

러너 설정 관리.
YAML 파일에서 설정 로드 + .env + 환경변수 오버라이드.
"""

from .loader import (
    load_runner_config,
    get_runner_config,
    get_api_token,
    RunnerConfig,
)

__all__ = [
    'load_runner_config',
    'get_runner_config',
    'get_api_token',
    'RunnerConfig',
]
