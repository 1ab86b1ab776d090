"""应用注册表 - 写入前的验证入口（Repository Pattern）"""

from rusty_results.prelude import Err, Ok, Result

from ..logger import logger
from .matcher import Matcher
from .models import App
from .store import AppStore
from .validators import ValidationErrors


class AppRegistry:
    """应用注册表

    - submit 先完整验证记录，验证通过才写入 Store
    - 验证失败时返回全部错误（按检查顺序），Store 保持不变
    """

    def __init__(self, store: AppStore):
        self._store = store

    @property
    def store(self) -> AppStore:
        return self._store

    def submit(self, app: App) -> Result[App, ValidationErrors]:
        """验证并保存一条记录"""
        errs = ValidationErrors()
        app.validate(errs)
        if errs:
            logger.warning(
                f"[Registry:Submit] Rejected {app.title!r}: {'; '.join(errs)}"
            )
            return Err(errs)

        self._store.insert(app)
        logger.info(f"[Registry:Submit] Accepted {app.title!r} {app.version!r}")
        return Ok(app)

    def search(self, matcher: Matcher) -> list[App]:
        apps = self._store.search(matcher)
        logger.debug(f"[Registry:Search] {len(apps)} match(es)")
        return apps
