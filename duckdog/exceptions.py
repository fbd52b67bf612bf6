"""对局异常模块
游戏逻辑本身不抛异常（数值一律截断、缺失的能力视为空操作），
这里只定义调用方违反约定时的错误类型。
"""

from i18n import t as _t


class GameError(Exception):
    """游戏异常基类

    所有对局相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str | None = None, details: dict | None = None):
        """初始化游戏异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        if message is None:
            message = _t("exc.game_error")
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 任务队列 ====================


class TaskQueueError(GameError):
    """任务队列使用错误

    启动后继续 push，或重复调用 continue_with 时抛出
    """

    def __init__(self, message: str | None = None, state: str | None = None):
        if message is None:
            message = _t("exc.task_queue")
        details = {}
        if state:
            details["state"] = state
        super().__init__(message, details)
        self.state = state


class TaskQueueStalledError(TaskQueueError):
    """任务队列看门狗超时

    某个步骤一直没有调用完成信号时，由 TaskQueue.run(timeout=...) 抛出
    """

    def __init__(
        self,
        message: str | None = None,
        timeout: float = 0.0,
        completed: int = 0,
        total: int = 0,
    ):
        if message is None:
            message = _t("exc.task_queue_stalled")
        super().__init__(message)
        self.timeout = timeout
        self.completed = completed
        self.total = total
        self.details.update(timeout=timeout, completed=completed, total=total)


# ==================== 卡牌种类 ====================


class UnknownKindError(GameError):
    """未注册的卡牌种类"""

    def __init__(self, message: str | None = None, kind_id: str | None = None):
        if message is None:
            message = _t("exc.unknown_kind")
        details = {}
        if kind_id:
            details["kind_id"] = kind_id
        super().__init__(message, details)
        self.kind_id = kind_id


# ==================== 配置与对局状态 ====================


class InvalidConfigError(GameError):
    """配置校验失败"""

    def __init__(self, message: str | None = None, errors: list[str] | None = None):
        if message is None:
            message = _t("exc.invalid_config")
        details = {}
        if errors:
            details["errors"] = list(errors)
        super().__init__(message, details)
        self.errors = list(errors or [])


class MatchStateError(GameError):
    """对局状态错误（如重复开始对局）"""

    def __init__(self, message: str | None = None, state: str | None = None):
        if message is None:
            message = _t("exc.match_state")
        details = {}
        if state:
            details["state"] = state
        super().__init__(message, details)
        self.state = state
