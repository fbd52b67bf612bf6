"""对局级种类模板注册表

每局对局持有一个 KindRegistry：
- 按需从出厂定义复制出可变的 VariantTemplate（同一种类在本局只有一份）
- 持有本局的在场计数器 LiveCounter
- 负责创建绑定本局模板的卡牌

浪人夺取能力、尼莫换绑种类都只作用于本局的模板，不会泄漏到其他对局。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import kinds as _kinds  # noqa: F401  触发种类注册
from .card import Card, Creature
from .counting import LiveCounter
from .exceptions import UnknownKindError
from .hooks import VariantTemplate
from .kinds.registry import KindDefinition, get_registry

if TYPE_CHECKING:
    from .context import CardView

logger = logging.getLogger(__name__)


class KindRegistry:
    """一局对局的种类模板与在场计数"""

    def __init__(self, definitions: dict[str, KindDefinition] | None = None) -> None:
        self._definitions = definitions if definitions is not None else get_registry()
        self._templates: dict[str, VariantTemplate] = {}
        self.counts = LiveCounter()

    def __contains__(self, kind_id: object) -> bool:
        return kind_id in self._definitions

    def kinds(self) -> list[str]:
        return list(self._definitions)

    def template(self, kind_id: str) -> VariantTemplate:
        """获取本局的种类模板（首次访问时从出厂定义复制）

        Raises:
            UnknownKindError: 种类未注册
        """
        template = self._templates.get(kind_id)
        if template is not None:
            return template

        definition = self._definitions.get(kind_id)
        if definition is None:
            raise UnknownKindError(kind_id=kind_id)

        parent = self.template(definition.parent) if definition.parent else None
        template = VariantTemplate(
            kind_id,
            parent=parent,
            hooks=definition.hooks,
            traits=definition.traits,
            name_key=definition.name_key,
            max_power=definition.max_power,
        )
        self._templates[kind_id] = template
        logger.debug("Template '%s' created with hooks %s", kind_id, sorted(template.hooks))
        return template

    def create(
        self,
        kind_id: str,
        *,
        view: CardView | None = None,
        name: str | None = None,
        image: str | None = None,
    ) -> Card:
        """创建一张绑定本局模板的卡牌"""
        template = self.template(kind_id)
        card_cls = Creature if template.is_a("creature") else Card
        return card_cls(template, name=name, image=image, registry=self, view=view)
