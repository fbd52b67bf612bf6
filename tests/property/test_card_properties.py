"""卡牌力量与分类的性质测试（Property-based）。

核心不变量：
1. 任意赋值序列之后 0 <= current_power <= max_power
2. 分类只取决于当前暴露的 quacks / swims 与 dog 血统
3. 描述序列可重复遍历
"""

from __future__ import annotations

import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hypothesis import given, settings
from hypothesis import strategies as st

from duckdog.card import Classification
from duckdog.hooks import HookName
from duckdog.kinds import playable_kinds
from duckdog.templates import KindRegistry

KINDS = sorted(playable_kinds())

# ---------------------------------------------------------------------------
# 性质 1: 力量始终在 [0, max_power] 之内
# ---------------------------------------------------------------------------

power_ops = st.lists(
    st.tuples(
        st.sampled_from(["current", "max"]),
        st.integers(min_value=-50, max_value=50),
    ),
    max_size=30,
)


@given(kind_id=st.sampled_from(KINDS), ops=power_ops)
@settings(max_examples=200)
def test_power_always_clamped(kind_id: str, ops: list[tuple[str, int]]) -> None:
    """任意顺序修改力量与上限后，不变量仍然成立。"""
    card = KindRegistry().create(kind_id)
    for field, value in ops:
        if field == "current":
            card.current_power = value
        else:
            card.max_power = value
        assert 0 <= card.current_power <= card.max_power
        assert card.max_power >= 0


# ---------------------------------------------------------------------------
# 性质 2: 分类是能力集合的纯函数
# ---------------------------------------------------------------------------

@given(
    kind_id=st.sampled_from(KINDS),
    remove_quacks=st.booleans(),
    add_swims=st.booleans(),
)
@settings(max_examples=200)
def test_classification_matches_capabilities(
    kind_id: str, remove_quacks: bool, add_swims: bool
) -> None:
    kinds = KindRegistry()
    card = kinds.create(kind_id)
    if remove_quacks:
        for template in card.template.lineage():
            template.remove_hook(HookName.QUACKS)
    if add_swims:
        card.overrides["swims"] = lambda c: "float"

    duck = card.has_hook(HookName.QUACKS) and card.has_hook(HookName.SWIMS)
    dog = card.template.is_a("dog")
    expected = {
        (True, True): Classification.DUCK_DOG,
        (True, False): Classification.DUCK,
        (False, True): Classification.DOG,
        (False, False): Classification.CREATURE,
    }[(duck, dog)]

    assert card.classification is expected
    # 重复访问结果一致
    assert card.classification is expected


# ---------------------------------------------------------------------------
# 性质 3: 描述序列可重复遍历，且最后一条是继承链
# ---------------------------------------------------------------------------

@given(kind_id=st.sampled_from(KINDS))
def test_descriptions_restartable(kind_id: str) -> None:
    card = KindRegistry().create(kind_id)
    descriptions = card.get_descriptions()
    first = list(descriptions)
    assert first == list(descriptions)
    assert len(first) >= 2
    assert first[-2] == card.classification.label
