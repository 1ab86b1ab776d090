"""记录匹配器 - 可组合的过滤谓词

Matcher 包装一个从 App 到 bool 的纯函数，可以并发调用。
新的过滤条件只需要新增构造函数，不需要修改 Store。
"""

from collections.abc import Callable

from thefuzz import fuzz

from ..config import FUZZY_MATCH_THRESHOLD
from .models import App


class Matcher:
    """判断一条记录是否应该出现在搜索结果中"""

    def __init__(self, predicate: Callable[[App], bool]):
        self._predicate = predicate

    def __call__(self, app: App) -> bool:
        return self._predicate(app)

    def and_(self, other: Callable[[App], bool]) -> "Matcher":
        """两个匹配器都返回 True 时才返回 True（左侧为 False 时不会调用右侧）"""
        return Matcher(lambda app: self(app) and other(app))

    def __and__(self, other: Callable[[App], bool]) -> "Matcher":
        return self.and_(other)


match_any = Matcher(lambda app: True)


def match_exact_title(s: str) -> Matcher:
    """标题完全相等（区分大小写）"""
    return Matcher(lambda app: app.title == s)


def match_exact_version(s: str) -> Matcher:
    """版本号完全相等（区分大小写）"""
    return Matcher(lambda app: app.version == s)


def match_description_contains(s: str) -> Matcher:
    """描述中包含指定子串（区分大小写）"""
    return Matcher(lambda app: s in app.description)


def fuzzy_match(text1: str, text2: str) -> float:
    """计算两个字符串的相似度（使用 Levenshtein Distance）

    Returns:
        相似度分数 (0-1)
    """
    return fuzz.ratio(text1.lower(), text2.lower()) / 100.0


def match_title_similar(s: str, threshold: float = FUZZY_MATCH_THRESHOLD) -> Matcher:
    """标题模糊匹配（不区分大小写，相似度不低于 threshold）"""
    return Matcher(lambda app: fuzzy_match(s, app.title) >= threshold)
