"""
UI模块
提供终端牌桌视图与按节奏完成的卡牌视图
"""

from .paced_view import PacedCardView, paced_view_factory
from .rich_view import RichBoardView

__all__ = ['RichBoardView', 'PacedCardView', 'paced_view_factory']
