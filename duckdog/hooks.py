"""能力钩子与种类模板

每个卡牌种类拥有一个共享、可变的 VariantTemplate，保存该种类自身定义的钩子；
模板通过 parent 串成继承链（如 brewer → duck → creature → card）。
卡牌实例引用自己的模板，另有一份实例级覆盖字典：

    查找顺序: 实例覆盖 → 模板 → 祖先模板

修改模板（增删钩子）会影响所有绑定该模板、且没有实例覆盖的卡牌；
实例覆盖只影响该实例本身。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .card import Card

logger = logging.getLogger(__name__)


class HookName(str, Enum):
    """钩子名称

    继承 str 以便直接与字符串比较、作为字典键
    """
    # 伤害修正（续体风格：调用 done(最终数值)）
    MODIFY_DAMAGE_TO_CREATURE = "modify_damage_to_creature"
    MODIFY_DAMAGE_TO_PLAYER = "modify_damage_to_player"
    MODIFY_DAMAGE_TAKEN = "modify_damage_taken"

    # 生命周期
    ON_ENTER_PLAY = "on_enter_play"
    ON_LEAVE_PLAY = "on_leave_play"
    BEFORE_ATTACK = "before_attack"
    ATTACK = "attack"

    # 能力标记（结构化分类用）
    QUACKS = "quacks"
    SWIMS = "swims"


# 浪人夺取的三个伤害修正钩子
DAMAGE_HOOKS: tuple[HookName, ...] = (
    HookName.MODIFY_DAMAGE_TO_CREATURE,
    HookName.MODIFY_DAMAGE_TO_PLAYER,
    HookName.MODIFY_DAMAGE_TAKEN,
)

Hook = Callable[..., Any]


def hook_key(name: str) -> str:
    """统一为普通字符串作为字典键"""
    return name.value if isinstance(name, HookName) else name


# 描述生成函数：(卡牌, 定义该描述的模板层) -> 文本或 None（本层不输出）
TraitFn = Callable[["Card", "VariantTemplate"], "str | None"]


class VariantTemplate:
    """某个卡牌种类在一局对局中的共享行为定义

    Attributes:
        kind_id: 种类标识符
        parent: 父模板（根模板为 None）
        hooks: 本层自身定义的钩子（不含继承来的）
        traits: 本层的描述生成函数
        name_key: 本层的默认名称翻译键
        max_power: 本层的默认力量上限
    """

    def __init__(
        self,
        kind_id: str,
        parent: VariantTemplate | None = None,
        hooks: dict[str, Hook] | None = None,
        traits: Iterable[TraitFn] = (),
        name_key: str | None = None,
        max_power: int | None = None,
    ) -> None:
        self.kind_id = kind_id
        self.parent = parent
        self.hooks: dict[str, Hook] = {hook_key(k): v for k, v in (hooks or {}).items()}
        self.traits: list[TraitFn] = list(traits)
        self.name_key = name_key
        self.max_power = max_power

    def __repr__(self) -> str:
        return f"VariantTemplate({self.kind_id!r}, hooks={sorted(self.hooks)})"

    # ==================== 继承链 ====================

    def lineage(self) -> Iterator[VariantTemplate]:
        """从本层开始向上遍历继承链"""
        template: VariantTemplate | None = self
        while template is not None:
            yield template
            template = template.parent

    def is_a(self, kind_id: str) -> bool:
        """继承链中是否包含指定种类"""
        return any(t.kind_id == kind_id for t in self.lineage())

    def resolve_name_key(self) -> str | None:
        for template in self.lineage():
            if template.name_key:
                return template.name_key
        return None

    def resolve_max_power(self) -> int:
        for template in self.lineage():
            if template.max_power is not None:
                return template.max_power
        return 0

    # ==================== 钩子 ====================

    def owns(self, name: str) -> bool:
        """本层是否自身定义了该钩子（不看祖先）"""
        return hook_key(name) in self.hooks

    def lookup(self, name: str) -> Hook | None:
        """沿继承链查找钩子"""
        for template in self.lineage():
            hook = template.hooks.get(hook_key(name))
            if hook is not None:
                return hook
        return None

    def add_hook(self, name: str, hook: Hook) -> None:
        self.hooks[hook_key(name)] = hook

    def remove_hook(self, name: str) -> Hook | None:
        """从本层删除钩子，返回被删除的实现（不存在则 None）"""
        return self.hooks.pop(hook_key(name), None)


def steal_hooks(
    from_template: VariantTemplate,
    to_card: Card,
    names: Iterable[str],
) -> list[str]:
    """把模板自身定义的钩子转移为卡牌的实例级覆盖

    只处理 ``from_template`` 本层定义的钩子，祖先模板上的钩子不受影响；
    已被夺走的钩子再次夺取是空操作。

    Args:
        from_template: 被夺取的种类模板
        to_card: 获得钩子的卡牌
        names: 要夺取的钩子名称

    Returns:
        实际转移的钩子名称列表
    """
    stolen: list[str] = []
    for name in names:
        key = hook_key(name)
        if not from_template.owns(key):
            continue
        hook = from_template.remove_hook(key)
        to_card.overrides[key] = hook
        stolen.append(key)
    if stolen:
        logger.debug(
            "steal_hooks: %s took %s from template '%s'",
            to_card.name,
            stolen,
            from_template.kind_id,
        )
    return stolen
