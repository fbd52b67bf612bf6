"""卡牌种类包

  - base.py      : 卡牌 / 生物（全部钩子的默认实现）
  - ducks.py     : 和平鸭、酿酒师
  - dogs.py      : 强盗狗、打手、小弟、伪鸭
  - creatures.py : 加特林、浪人、尼莫

导入子模块即触发 define_kind / kind_hook 的注册副作用，
本模块提供统一的 get_all_kinds() 入口。
"""

from __future__ import annotations

from . import base as _base  # noqa: F401
from . import creatures as _creatures  # noqa: F401
from . import dogs as _dogs  # noqa: F401
from . import ducks as _ducks  # noqa: F401
from .registry import (
    KindDefinition,
    define_kind,
    get_definition,
    get_registry,
    kind_hook,
    kind_trait,
    static_trait,
)


def get_all_kinds() -> dict[str, KindDefinition]:
    """返回全部已注册的种类定义。"""
    return get_registry()


def playable_kinds() -> list[str]:
    """可以放进牌组的种类（排除抽象的 card / creature）。"""
    return [k for k in get_registry() if k not in ("card", "creature")]


__all__ = [
    "KindDefinition",
    "define_kind",
    "get_all_kinds",
    "get_definition",
    "get_registry",
    "kind_hook",
    "kind_trait",
    "playable_kinds",
    "static_trait",
]
