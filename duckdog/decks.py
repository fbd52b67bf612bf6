"""预设牌组

每个预设是 (先手牌组, 后手牌组)，元素为种类标识符，牌顶在前。
先手默认是警长，后手默认是强盗。
"""

from __future__ import annotations

DeckPair = tuple[tuple[str, ...], tuple[str, ...]]

PRESET_DECKS: dict[str, DeckPair] = {
    # 鸭子和加特林对阵一群小弟
    "classic": (
        ("duck", "duck", "duck", "gatling"),
        ("lad", "lad", "lad"),
    ),
    # 打手压阵的强盗团伙
    "trasher": (
        ("duck", "duck", "gatling", "duck"),
        ("dog", "trasher", "dog"),
    ),
    # 浪人夺走小弟和打手的能力
    "thieves": (
        ("rogue", "duck", "rogue"),
        ("lad", "trasher", "lad", "lad"),
    ),
    # 酿酒师同时强化鸭子和伪鸭
    "brewery": (
        ("duck", "brewer", "duck"),
        ("pseudo_duck", "dog", "pseudo_duck"),
    ),
    # 尼莫对阵两个酿酒师
    "nemo": (
        ("nemo",),
        ("brewer", "brewer"),
    ),
}

DEFAULT_PRESET = "nemo"


def get_preset(name: str) -> DeckPair:
    """按名称取预设牌组

    Raises:
        KeyError: 预设不存在
    """
    return PRESET_DECKS[name]


def preset_names() -> list[str]:
    return list(PRESET_DECKS)
