# -*- coding: utf-8 -*-
"""
Shared fixtures: 디스크 위의 봇 디렉토리 생성
"""
import json
import textwrap
from pathlib import Path

import pytest

from debut_runner.config import RunnerConfig


BOT_SOURCE = '''
class MyBot:
    def __init__(self, opts):
        self.opts = opts
'''

CFGS_SOURCE = '''
default = {"ticker": "BTCUSDT", "amount": 500}
fast = {"ticker": "ETHUSDT", "amount": 100}
'''

META_SOURCE = '''
default = {"version": "1"}
'''


def write_bot(bot_dir: Path, bot=BOT_SOURCE, cfgs=CFGS_SOURCE, meta=META_SOURCE) -> Path:
    """bot.py / cfgs.py / meta.py 작성 (None이면 생략)"""
    bot_dir.mkdir(parents=True, exist_ok=True)
    for filename, source in (('bot.py', bot), ('cfgs.py', cfgs), ('meta.py', meta)):
        if source is not None:
            (bot_dir / filename).write_text(textwrap.dedent(source), encoding='utf-8')
    return bot_dir


def write_schema(root: Path, entries) -> Path:
    path = root / 'schema.json'
    path.write_text(json.dumps(entries), encoding='utf-8')
    return path


@pytest.fixture
def config():
    return RunnerConfig()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """cwd = tmp_path, MyBot 등록 + 유효한 봇 파일"""
    monkeypatch.chdir(tmp_path)
    write_bot(tmp_path / 'bots' / 'my')
    (tmp_path / 'bots' / 'my' / 'src').mkdir()
    write_schema(tmp_path, [{'name': 'MyBot', 'path': './bots/my', 'src': './bots/my/src'}])
    return tmp_path


@pytest.fixture
def make_bot():
    return write_bot
