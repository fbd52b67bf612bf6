"""卡牌种类注册表与装饰器

提供统一的种类定义机制：

- define_kind("lad", parent="dog", max_power=2) 声明种类
- @kind_hook("lad", HookName.MODIFY_DAMAGE_TAKEN) 把钩子实现登记到种类定义
- @kind_trait("creature") / static_trait(...) 登记描述生成函数
- get_registry() 返回不可变副本用于外部读取

这里保存的是只读的“出厂定义”；每局对局由 templates.KindRegistry
复制出自己的可变模板，对局之间互不影响。
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18n import t as _t

from ..hooks import Hook, TraitFn, hook_key

if TYPE_CHECKING:
    from ..card import Card
    from ..hooks import VariantTemplate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KindDefinition:
    """种类的出厂定义。"""

    kind_id: str
    parent: str | None = None
    name_key: str | None = None
    max_power: int | None = None
    hooks: dict[str, Hook] = field(default_factory=dict)
    traits: list[TraitFn] = field(default_factory=list)


# 运行期全局注册表：kind_id -> definition
_KIND_REGISTRY: dict[str, KindDefinition] = {}


def define_kind(
    kind_id: str,
    *,
    parent: str | None = None,
    max_power: int | None = None,
    name_key: str | None = None,
) -> KindDefinition:
    """声明一个卡牌种类（重复声明会覆盖并记录警告）。"""
    if kind_id in _KIND_REGISTRY:
        logger.warning("Kind '%s' duplicated, overriding", kind_id)
    definition = KindDefinition(
        kind_id=kind_id,
        parent=parent,
        name_key=name_key or f"kind.{kind_id}.name",
        max_power=max_power,
    )
    _KIND_REGISTRY[kind_id] = definition
    return definition


def _require(kind_id: str) -> KindDefinition:
    definition = _KIND_REGISTRY.get(kind_id)
    if definition is None:
        raise KeyError(f"kind '{kind_id}' must be defined before registering hooks")
    return definition


def kind_hook(kind_id: str, name: str) -> Callable[[Hook], Hook]:
    """装饰器：把钩子实现登记到种类定义。

    用法：
        @kind_hook("trasher", HookName.MODIFY_DAMAGE_TAKEN)
        def trasher_takes_less(card, amount, source, ctx, done): ...
    """
    def _decorator(fn: Hook) -> Hook:
        _require(kind_id).hooks[hook_key(name)] = fn
        return fn
    return _decorator


def kind_trait(kind_id: str) -> Callable[[TraitFn], TraitFn]:
    """装饰器：登记一条描述生成函数 (card, layer) -> str | None。"""
    def _decorator(fn: TraitFn) -> TraitFn:
        _require(kind_id).traits.append(fn)
        return fn
    return _decorator


def static_trait(kind_id: str, message_key: str, requires: Iterable[str] = ()) -> TraitFn:
    """登记一条固定文本的描述。

    ``requires`` 中的钩子必须仍由该种类模板本层持有，描述才会出现；
    能力被夺走后描述随之消失。
    """
    required = tuple(hook_key(name) for name in requires)

    def _trait(card: Card, layer: VariantTemplate) -> str | None:
        if all(layer.owns(name) for name in required):
            return _t(message_key)
        return None

    _trait.__name__ = f"{kind_id}_trait"
    return kind_trait(kind_id)(_trait)


def get_definition(kind_id: str) -> KindDefinition | None:
    return _KIND_REGISTRY.get(kind_id)


def get_registry() -> dict[str, KindDefinition]:
    """获取当前注册的种类定义（浅拷贝，避免外部修改）。"""
    return dict(_KIND_REGISTRY)
