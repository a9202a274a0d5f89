# -*- coding: utf-8 -*-
"""
Config Loader Tests
===================

Tests for debut_runner/config/loader.py
"""
import pytest

from debut_runner.config import RunnerConfig, get_runner_config, load_runner_config

ENV_KEYS = ('API_TOKEN', 'DEBUT_SCHEMA_FILE', 'DEBUT_TOKENS_FILE', 'DEBUT_LOG_LEVEL')


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """관련 환경변수 제거 (.env로 설정된 값도 테스트 후 정리)"""
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.setenv(key, 'placeholder')
        monkeypatch.delenv(key)
    return monkeypatch


class TestRunnerConfigDefaults:
    """RunnerConfig 기본값 테스트"""

    def test_default_values(self):
        cfg = RunnerConfig()
        assert cfg.schema_file == 'schema.json'
        assert cfg.tokens_file == '.tokens.json'
        assert cfg.bot_module == 'bot.py'
        assert cfg.config_module == 'cfgs.py'
        assert cfg.meta_module == 'meta.py'
        assert cfg.meta_export == 'default'
        assert cfg.api_token is None

    def test_missing_yaml(self, clean_env, tmp_path):
        cfg = load_runner_config(tmp_path / 'none.yaml')
        assert cfg == RunnerConfig()

    def test_cached(self):
        assert get_runner_config() is get_runner_config()


class TestYamlAndEnv:
    """YAML + 환경변수 오버라이드"""

    def test_yaml_values(self, clean_env, tmp_path):
        path = tmp_path / 'runner.yaml'
        path.write_text(
            'stores:\n'
            '  schema: bots.json\n'
            'artifacts:\n'
            '  bot: strategy.py\n'
            'logging:\n'
            '  level: INFO\n',
            encoding='utf-8',
        )
        cfg = load_runner_config(path)
        assert cfg.schema_file == 'bots.json'
        assert cfg.tokens_file == '.tokens.json'
        assert cfg.bot_module == 'strategy.py'
        assert cfg.log_level == 'INFO'

    def test_env_overrides_yaml(self, clean_env, tmp_path):
        path = tmp_path / 'runner.yaml'
        path.write_text('stores:\n  schema: bots.json\n', encoding='utf-8')
        clean_env.setenv('DEBUT_SCHEMA_FILE', 'registry.json')
        clean_env.setenv('DEBUT_LOG_LEVEL', 'debug')
        cfg = load_runner_config(path)
        assert cfg.schema_file == 'registry.json'
        assert cfg.log_level == 'DEBUG'

    def test_api_token_from_env(self, clean_env, tmp_path):
        clean_env.setenv('API_TOKEN', 'secret')
        assert load_runner_config(tmp_path / 'none.yaml').api_token == 'secret'

    def test_api_token_from_dotenv(self, clean_env, tmp_path):
        (tmp_path / '.env').write_text('API_TOKEN=from-file\n', encoding='utf-8')
        assert load_runner_config(tmp_path / 'none.yaml').api_token == 'from-file'

    def test_env_beats_dotenv(self, clean_env, tmp_path):
        (tmp_path / '.env').write_text('API_TOKEN=from-file\n', encoding='utf-8')
        clean_env.setenv('API_TOKEN', 'from-env')
        assert load_runner_config(tmp_path / 'none.yaml').api_token == 'from-env'
