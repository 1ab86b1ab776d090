"""核心模块 - 验证、模型、匹配器和存储"""

from . import matcher, validators
from .models import App, Maintainer
from .registry import AppRegistry
from .store import AppStore
from .validators import FailureHint, ValidationErrors

__all__ = [
    "matcher",
    "validators",
    "App",
    "Maintainer",
    "AppRegistry",
    "AppStore",
    "FailureHint",
    "ValidationErrors",
]
