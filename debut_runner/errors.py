# -*- coding: utf-8 -*-
"""
Error Taxonomy
==============

저장소(JSON) 로딩 에러와 봇 해석(resolution) 에러.

- StoreError: schema.json / .tokens.json 로딩 실패
- BotResolutionError: get_bot_data() 파이프라인 실패 (메시지 = 진단 라인)
"""


class DebutRunnerError(Exception):
    """debut_runner 공통 베이스"""


# =============================================================================
# JSON Store
# =============================================================================

class StoreError(DebutRunnerError):
    """JSON 저장소 에러"""


class StoreMissingError(StoreError):
    """파일 없음"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} not found")


class InvalidStoreError(StoreError):
    """JSON은 유효하지만 구조가 맞지 않음"""


class JsonParseError(StoreError, ValueError):
    """JSON 파싱 실패"""


# =============================================================================
# Bot Resolution
# =============================================================================

class BotResolutionError(DebutRunnerError):
    """봇 해석 실패. str(e)가 그대로 stdout 진단 라인이 된다."""


class RegistryMissing(BotResolutionError):
    """schema.json 없음 또는 파싱 불가"""

    def __init__(self, filename: str = "schema.json", reason: str = "not found"):
        self.filename = filename
        super().__init__(f"File {filename} {reason}")


class BotNotFound(BotResolutionError):
    """레지스트리에 해당 이름 없음"""

    def __init__(self, name: str, filename: str = "schema.json"):
        self.name = name
        super().__init__(f"Bot data in {filename} not found")


class ConfigMissing(BotResolutionError):
    """설정 모듈(cfgs) 없음"""

    def __init__(self, name: str):
        self.name = name
        super().__init__("No configs for bot")


class ConstructorNameMismatch(BotResolutionError):
    """봇 모듈에 name 멤버 없음"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is incorrect bot constructor name")


class ModuleLoadError(BotResolutionError):
    """모듈 로드/실행 실패 (원인 예외는 __cause__)"""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Error strategy data loading: {path}: {reason}")
