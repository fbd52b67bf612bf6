"""按卡牌种类统计在场数量

每个对局持有一个 LiveCounter（由 KindRegistry 创建），
同种类的所有卡牌共享同一个计数，不同对局之间互不影响。
"""

from __future__ import annotations

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class LiveCounter:
    """在场卡牌计数器

    不变量：计数永远不为负数。
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = defaultdict(int)

    def increment(self, kind_id: str) -> int:
        """某种类的卡牌进场，返回新的计数"""
        self._counts[kind_id] += 1
        return self._counts[kind_id]

    def decrement(self, kind_id: str) -> int:
        """某种类的卡牌离场，返回新的计数（不会低于 0）"""
        if self._counts[kind_id] <= 0:
            logger.warning("LiveCounter: decrement of '%s' below zero ignored", kind_id)
            self._counts[kind_id] = 0
            return 0
        self._counts[kind_id] -= 1
        return self._counts[kind_id]

    def get(self, kind_id: str) -> int:
        return self._counts.get(kind_id, 0)

    def snapshot(self) -> dict[str, int]:
        """当前所有非零计数的副本"""
        return {k: v for k, v in self._counts.items() if v > 0}

    def clear(self) -> None:
        self._counts.clear()
