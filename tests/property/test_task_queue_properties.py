"""TaskQueue 的性质测试（Property-based）。

核心不变量：
1. 无论步骤同步还是延迟完成，执行顺序等于加入顺序
2. 同一时刻至多一个步骤在执行
3. 最终续体恰好调用一次，且在所有步骤完成之后
"""

from __future__ import annotations

import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hypothesis import given, settings
from hypothesis import strategies as st

from duckdog.task_queue import QueueState, TaskQueue

# ---------------------------------------------------------------------------
# 性质 1-3: 混合同步/延迟完成
# ---------------------------------------------------------------------------


@given(
    deferred=st.lists(st.booleans(), max_size=40),
)
@settings(max_examples=200)
def test_order_and_single_flight(deferred: list[bool]) -> None:
    queue = TaskQueue()
    started: list[int] = []
    pending: list = []
    in_flight = [0]
    finals: list[int] = []

    for index, is_deferred in enumerate(deferred):
        def step(done, index=index, is_deferred=is_deferred):
            assert in_flight[0] == 0
            in_flight[0] += 1
            started.append(index)

            def finish():
                in_flight[0] -= 1
                done()

            if is_deferred:
                pending.append(finish)
            else:
                finish()

        queue.push(step)

    queue.continue_with(lambda: finals.append(len(started)))

    # 任何时刻最多只有一个延迟步骤在等待
    while pending:
        assert len(pending) == 1
        pending.pop()()

    assert started == list(range(len(deferred)))
    assert finals == [len(deferred)]
    assert queue.state is QueueState.DRAINED
    assert queue.completed == len(deferred)


@given(size=st.integers(min_value=0, max_value=5000))
@settings(max_examples=20)
def test_synchronous_pipeline_any_length(size: int) -> None:
    """同步步骤再多也不会递归爆栈"""
    queue = TaskQueue()
    counter = [0]
    for _ in range(size):
        def step(done):
            counter[0] += 1
            done()
        queue.push(step)
    finished: list[bool] = []
    queue.continue_with(lambda: finished.append(True))
    assert counter[0] == size
    assert finished == [True]
