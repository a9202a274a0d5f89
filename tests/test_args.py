# -*- coding: utf-8 -*-
"""
Argument Parser Tests
=====================

Tests for debut_runner/utils/args.py
"""
import sys

from debut_runner.utils.args import get_args


class TestLongArgs:
    """--key / --key=value 테스트"""

    def test_value(self):
        assert get_args(['--bot=MyBot']) == {'bot': 'MyBot'}

    def test_boolean(self):
        assert get_args(['--dry']) == {'dry': True}

    def test_numeric_value_stays_string(self):
        args = get_args(['--days=200', '--gap=0.5'])
        assert args == {'days': '200', 'gap': '0.5'}

    def test_json_value_stays_string(self):
        assert get_args(['--opts={"a":1}']) == {'opts': '{"a":1}'}

    def test_split_on_first_equals(self):
        args = get_args(['--url=http://host/?a=b'])
        assert args['url'] == 'http://host/?a=b'

    def test_empty_value(self):
        assert get_args(['--name=']) == {'name': ''}


class TestShortFlags:
    """-abc 테스트"""

    def test_single(self):
        assert get_args(['-v']) == {'v': True}

    def test_cluster(self):
        assert get_args(['-ab']) == {'a': True, 'b': True}

    def test_bare_dash(self):
        assert get_args(['-']) == {}


class TestMixed:
    """조합 / 엣지 케이스"""

    def test_example(self):
        args = get_args(['--a=1', '--b', '-cd'])
        assert args == {'a': '1', 'b': True, 'c': True, 'd': True}

    def test_last_write_wins(self):
        assert get_args(['--x=1', '--x=2']) == {'x': '2'}

    def test_flag_then_value(self):
        assert get_args(['-x', '--x=3']) == {'x': '3'}

    def test_positional_ignored(self):
        assert get_args(['run', 'MyBot', '--gap=5']) == {'gap': '5'}

    def test_empty(self):
        assert get_args([]) == {}

    def test_fresh_map_per_call(self):
        first = get_args(['--a'])
        first['b'] = True
        assert get_args(['--a']) == {'a': True}

    def test_defaults_to_sys_argv(self, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['runner.py', '--bot=X', 'extra', '-q'])
        assert get_args() == {'bot': 'X', 'q': True}
