"""对局文本的 i18n：日志、卡牌名、视图文字。

用法::

    from i18n import t, set_locale

    set_locale("en_US")
    print(t("log.card_played", player="Sheriff", card="Nemo"))

    # 便捷别名
    from i18n import _
    print(_("kind.duck.name"))  # → "和平鸭" (zh_CN) / "Peaceful Duck" (en_US)

    # 领域助手
    from i18n import kind_name
    print(kind_name("gatling"))  # → "加特林" / "Gatling"
"""

from __future__ import annotations

import importlib
import logging

logger = logging.getLogger(__name__)

# locale -> 翻译表模块
_LOCALE_MODULES: dict[str, str] = {
    "zh_CN": ".zh_CN",
    "en_US": ".en_US",
}

_locale: str = "zh_CN"
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """按需导入 locale 对应模块的 STRINGS 表。"""
    module_name = _LOCALE_MODULES.get(locale)
    if module_name is None:
        raise ValueError(f"Unsupported locale: {locale}")
    module = importlib.import_module(module_name, __name__)
    return module.STRINGS


def set_locale(locale: str) -> None:
    """设置当前语言。"""
    global _locale
    # 预加载以确保 locale 有效
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    """获取当前语言。"""
    return _locale


def get_available_locales() -> list[str]:
    """返回所有可用的 locale 列表。"""
    return list(_LOCALE_MODULES)


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    查找当前 locale 对应的字符串，用 ``kwargs`` 做 format 替换。
    若 key 缺失则回退到 zh_CN，仍缺失则返回 ``[key]``。

    Args:
        key: 翻译键，如 ``"kind.lad.name"``。
        **kwargs: 格式化参数，如 ``card="Nemo"``。
    """
    if _locale not in _tables:
        _tables[_locale] = _load_table(_locale)

    table = _tables[_locale]
    template = table.get(key)

    # 回退到 zh_CN
    if template is None and _locale != "zh_CN":
        if "zh_CN" not in _tables:
            _tables["zh_CN"] = _load_table("zh_CN")
        template = _tables["zh_CN"].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using zh_CN", key, _locale)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


# ── 便捷别名 ──
_ = t


# ── 领域助手函数 ──


def _is_missing(key: str, result: str) -> bool:
    """检查 t() 返回值是否表示 key 缺失。"""
    return result == f"[{key}]"


def kind_name(kind_id: str) -> str:
    """获取卡牌种类的国际化显示名。

    Args:
        kind_id: 种类标识符，如 ``"duck"``、``"gatling"``。
    """
    key = f"kind.{kind_id}.name"
    result = t(key)
    return result if not _is_missing(key, result) else kind_id


def classification_name(value: str) -> str:
    """获取生物分类（鸭子/狗/鸭狗/生物）的国际化显示名。"""
    key = f"class.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value
