"""任务队列 / 续体调度器

把动画与伤害结算拆成一串步骤，逐个执行：
每个步骤接收一个 ``done`` 完成信号，只有在它被调用之后才会开始下一个步骤；
全部完成后调用 ``continue_with`` 传入的最终续体。

``done`` 可以在步骤内部同步调用（立即完成），也可以在任意延迟之后调用
（例如动画结束时）。同步完成的步骤在循环里推进而不是递归，
长串的同步步骤不会让调用栈增长。

约定（不做检测）：
- 每个步骤必须恰好调用一次 ``done``；调用两次属于未定义行为
- 永不调用 ``done`` 的步骤会让队列永远停住，没有取消机制；
  需要诊断时使用 ``run(timeout=...)`` 看门狗
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from i18n import t as _t

from .exceptions import TaskQueueError, TaskQueueStalledError

logger = logging.getLogger(__name__)

Done = Callable[[], None]
Step = Callable[[Done], None]


class QueueState(Enum):
    """任务队列状态"""

    IDLE = "idle"  # 尚未启动，可以 push
    RUNNING = "running"  # 正在执行步骤
    DRAINED = "drained"  # 全部完成，最终续体已调用


class TaskQueue:
    """顺序执行异步步骤的队列

    用法::

        queue = TaskQueue()
        queue.push(lambda done: view.show_attack(done))
        queue.push(lambda done: ctx.deal_damage_to_creature(2, target, done))
        queue.continue_with(continuation)
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._steps: list[Step] = []
        self._index = 0
        self._completed = 0
        self._final: Done | None = None
        self._state = QueueState.IDLE
        # 同步完成检测：步骤执行期间收到 done 时只做标记，由 _drain 循环推进
        self._in_step = False
        self._step_finished = False

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def state(self) -> QueueState:
        return self._state

    @property
    def completed(self) -> int:
        """已完成的步骤数"""
        return self._completed

    @property
    def pending(self) -> int:
        """尚未开始的步骤数"""
        return len(self._steps) - self._index

    def push(self, step: Step) -> None:
        """追加一个步骤

        Raises:
            TaskQueueError: 队列已经启动
        """
        if self._state is not QueueState.IDLE:
            raise TaskQueueError(_t("exc.task_queue_running"), state=self._state.value)
        self._steps.append(step)

    def continue_with(self, final: Done) -> None:
        """启动队列，全部步骤完成后调用 ``final``

        空队列会立即调用 ``final``。

        Raises:
            TaskQueueError: 队列已经启动过
        """
        if self._state is not QueueState.IDLE:
            raise TaskQueueError(_t("exc.task_queue_started"), state=self._state.value)
        self._final = final
        self._state = QueueState.RUNNING
        logger.debug("TaskQueue %s started with %d step(s)", self.name or id(self), len(self._steps))
        self._drain()

    async def run(self, timeout: float | None = None) -> None:
        """启动队列并等待全部步骤完成

        Args:
            timeout: 看门狗超时（秒），None 或 0 表示无限等待

        Raises:
            TaskQueueStalledError: 超时仍未完成
        """
        loop = asyncio.get_running_loop()
        finished: asyncio.Future[None] = loop.create_future()

        def _resolve() -> None:
            if not finished.done():
                finished.set_result(None)

        self.continue_with(_resolve)
        try:
            if timeout:
                await asyncio.wait_for(finished, timeout)
            else:
                await finished
        except asyncio.TimeoutError as e:
            logger.error(
                "TaskQueue %s stalled after %d/%d step(s)",
                self.name or id(self),
                self._completed,
                len(self._steps),
            )
            raise TaskQueueStalledError(
                timeout=timeout or 0.0,
                completed=self._completed,
                total=len(self._steps),
            ) from e

    # ==================== 内部推进 ====================

    def _drain(self) -> None:
        while self._index < len(self._steps):
            step = self._steps[self._index]
            self._index += 1
            self._in_step = True
            self._step_finished = False
            step(self._on_step_done)
            self._in_step = False
            if not self._step_finished:
                # 异步完成：等待 _on_step_done 再次进入 _drain
                return
        self._finish()

    def _on_step_done(self) -> None:
        self._completed += 1
        if self._in_step:
            self._step_finished = True
        else:
            self._drain()

    def _finish(self) -> None:
        self._state = QueueState.DRAINED
        logger.debug("TaskQueue %s drained", self.name or id(self))
        final = self._final
        self._final = None
        if final is not None:
            final()
