"""对局配置中心 (SSOT - 单一事实来源)

所有可配置的对局参数在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class GameConfig:
    """对局配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - DUCKDOG_PLAYER_POWER: 玩家初始力量
    - DUCKDOG_MAX_TURNS: 判定平局前的最大回合数
    - DUCKDOG_SPEED_RATE: 动画速度倍率
    - DUCKDOG_ANIMATION_DELAY: 单个动画的基础时长（秒）
    - DUCKDOG_TASK_TIMEOUT: 任务队列看门狗超时（秒，0 表示关闭）
    - DUCKDOG_LOCALE: 界面语言
    """
    # ==================== 规则 ====================
    player_power: int = field(
        default_factory=lambda: _get_env_int("DUCKDOG_PLAYER_POWER", 10)
    )
    player_hit_damage: int = 1
    max_turns: int = field(
        default_factory=lambda: _get_env_int("DUCKDOG_MAX_TURNS", 200)
    )

    # ==================== 动画节奏 ====================
    speed_rate: float = field(
        default_factory=lambda: _get_env_float("DUCKDOG_SPEED_RATE", 1.0)
    )
    animation_delay: float = field(
        default_factory=lambda: _get_env_float("DUCKDOG_ANIMATION_DELAY", 0.2)
    )
    task_timeout: float = field(
        default_factory=lambda: _get_env_float("DUCKDOG_TASK_TIMEOUT", 0.0)
    )

    # ==================== 界面 ====================
    locale: str = field(
        default_factory=lambda: os.environ.get("DUCKDOG_LOCALE", "zh_CN")
    )

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("DUCKDOG_LOG_LEVEL", "INFO")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("DUCKDOG_DEBUG", False)
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """从环境变量创建配置实例"""
        return cls()

    def get(self, key: str, default: object | None = None) -> object:
        """字典风格的访问方法"""
        return getattr(self, key, default)

    @property
    def animation_seconds(self) -> float:
        """按速度倍率换算后的单个动画时长"""
        if self.speed_rate <= 0:
            return 0.0
        return self.animation_delay / self.speed_rate

    def validate(self) -> list[str]:
        """校验配置，返回错误信息列表（空列表表示合法）"""
        errors: list[str] = []
        if self.player_power <= 0:
            errors.append(f"player_power must be positive, got {self.player_power}")
        if self.player_hit_damage < 0:
            errors.append(
                f"player_hit_damage must be >= 0, got {self.player_hit_damage}"
            )
        if self.max_turns <= 0:
            errors.append(f"max_turns must be positive, got {self.max_turns}")
        if self.speed_rate <= 0:
            errors.append(f"speed_rate must be positive, got {self.speed_rate}")
        if self.animation_delay < 0:
            errors.append(
                f"animation_delay must be >= 0, got {self.animation_delay}"
            )
        if self.task_timeout < 0:
            errors.append(f"task_timeout must be >= 0, got {self.task_timeout}")
        if self.locale not in ("zh_CN", "en_US"):
            errors.append(f"locale must be zh_CN or en_US, got {self.locale}")
        return errors


# 全局配置单例
_config: GameConfig | None = None


def get_config() -> GameConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
