"""卡牌与生物

Card 保存静态身份（名称、图片）与力量值，并把所有行为委托给种类模板：
钩子查找先看实例覆盖，再沿模板继承链向上。
Creature 在此之上提供结构化分类（鸭子/狗/鸭狗/生物）。
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any

from i18n import classification_name, t as _t

from .context import NullCardView
from .hooks import Hook, HookName, VariantTemplate, hook_key

if TYPE_CHECKING:
    from .context import CardView
    from .templates import KindRegistry

logger = logging.getLogger(__name__)

_card_ids = itertools.count(1)


class Classification(Enum):
    """生物分类"""

    DUCK = "duck"
    DOG = "dog"
    DUCK_DOG = "duck_dog"
    CREATURE = "creature"

    @property
    def label(self) -> str:
        """本地化显示名"""
        return classification_name(self.value)


def is_duck(card: Card | None) -> bool:
    """会嘎嘎叫又会游泳的就是鸭子"""
    return bool(card) and card.has_hook(HookName.QUACKS) and card.has_hook(HookName.SWIMS)


def is_dog(card: Card | None) -> bool:
    """模板继承链中包含 dog 种类的就是狗"""
    return bool(card) and card.template.is_a("dog")


def classify(card: Card) -> Classification:
    """按卡牌当前暴露的能力计算分类"""
    duck = is_duck(card)
    dog = is_dog(card)
    if duck and dog:
        return Classification.DUCK_DOG
    if duck:
        return Classification.DUCK
    if dog:
        return Classification.DOG
    return Classification.CREATURE


class Descriptions:
    """卡牌描述序列

    惰性、有限、可重复遍历：每次迭代都按当前模板链重新生成。
    外层种类的描述在前，基础卡牌的描述在最后。
    """

    def __init__(self, card: Card) -> None:
        self._card = card

    def __iter__(self) -> Iterator[str]:
        card = self._card
        for template in card.template.lineage():
            for trait in template.traits:
                text = trait(card, template)
                if text:
                    yield text

    def __repr__(self) -> str:
        return f"Descriptions({list(self)!r})"


class Card:
    """卡牌

    Attributes:
        id: 对局内唯一的卡牌编号
        name: 显示名称
        base_max_power: 创建时的力量上限
        image: 图片引用（可选）
        template: 当前绑定的种类模板
        overrides: 实例级钩子覆盖
        registry: 创建该卡牌的 KindRegistry（对局级共享状态）
        view: 卡牌视图
        flags: 种类能力使用的实例状态
    """

    def __init__(
        self,
        template: VariantTemplate,
        *,
        name: str | None = None,
        max_power: int | None = None,
        image: str | None = None,
        registry: KindRegistry | None = None,
        view: CardView | None = None,
    ) -> None:
        self.id = next(_card_ids)
        self.template = template
        self.overrides: dict[str, Hook] = {}
        if name is None:
            name_key = template.resolve_name_key()
            name = _t(name_key) if name_key else template.kind_id
        self.name = name
        if max_power is None:
            max_power = template.resolve_max_power()
        self.base_max_power = max(0, max_power)
        self._max_power = self.base_max_power
        self._current_power = self._max_power
        self.image = image
        self.registry = registry
        self.view: CardView = view or NullCardView()
        self.flags: dict[str, Any] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, kind={self.kind!r}, "
            f"power={self.current_power}/{self.max_power})"
        )

    @property
    def kind(self) -> str:
        """当前种类（被冒充后会改变）"""
        return self.template.kind_id

    # ==================== 力量 ====================

    @property
    def max_power(self) -> int:
        return self._max_power

    @max_power.setter
    def max_power(self, value: int) -> None:
        self._max_power = max(0, value)
        # 上限降低时同步截断当前力量
        self._current_power = min(self._current_power, self._max_power)

    @property
    def current_power(self) -> int:
        return self._current_power

    @current_power.setter
    def current_power(self, value: int) -> None:
        self._current_power = max(0, min(self._max_power, value))

    @property
    def is_alive(self) -> bool:
        return self._current_power > 0

    # ==================== 钩子 ====================

    def get_hook(self, name: str) -> Hook | None:
        """实例覆盖优先，其次沿模板链查找"""
        hook = self.overrides.get(hook_key(name))
        if hook is not None:
            return hook
        return self.template.lookup(name)

    def has_hook(self, name: str) -> bool:
        return self.get_hook(name) is not None

    def invoke(self, name: str, *args: Any) -> Any:
        """以本卡牌为第一个参数调用钩子"""
        hook = self.get_hook(name)
        if hook is None:
            raise AttributeError(f"{self.kind!r} card has no hook {name!r}")
        return hook(self, *args)

    def rebind(self, template: VariantTemplate) -> None:
        """整体换绑到另一个种类模板（实例覆盖保持不变）"""
        logger.debug("Card %s rebound: %s -> %s", self.name, self.kind, template.kind_id)
        self.template = template

    # ==================== 视图与描述 ====================

    def update_view(self) -> None:
        self.view.update()

    def get_descriptions(self) -> Descriptions:
        return Descriptions(self)


class Creature(Card):
    """生物：在卡牌之上提供结构化分类"""

    @property
    def classification(self) -> Classification:
        """每次访问都按当前能力重新计算，不做缓存"""
        return classify(self)
