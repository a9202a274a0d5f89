# -*- coding: utf-8 -*-
"""
Runner CLI
==========

사용법:
    debut-runner                      # 등록된 봇 목록
    debut-runner --bot=MyBot          # BotData 요약 (JSON)
    debut-runner --bot=MyBot --schema=bots.json
"""
import asyncio
import json
import logging
import os
import sys
from typing import Iterable, Optional

from .config import get_runner_config
from .errors import StoreError
from .resolver import get_bot_data
from .store import get_bots_schema, list_bot_names
from .utils.args import get_args


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = get_args(argv)
    config = get_runner_config()
    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    schema = None
    schema_file = args.get('schema')
    if isinstance(schema_file, str):
        try:
            schema = get_bots_schema(os.path.abspath(schema_file))
        except StoreError as e:
            print(f"[ERROR] {e}")
            return 1
        if schema is None:
            print(f"[ERROR] File {schema_file} not found")
            return 1

    bot = args.get('bot')
    if not isinstance(bot, str):
        try:
            names = list_bot_names(schema)
        except StoreError as e:
            print(f"[ERROR] {e}")
            return 1
        for name in names:
            print(name)
        return 0

    data = asyncio.run(get_bot_data(bot, schema))
    if data is None:
        return 1

    print(json.dumps(data.summary(bot), indent=2, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
