"""应用元数据存储 - 内存中的记录集合

- 只追加：没有更新、删除或压缩操作，记录在进程生命周期内一直存在
- 读写锁保护：insert 互斥，search 之间可以并发，search 期间持有读锁直到扫描结束
- Store 不做验证，调用方必须先完成验证（见 AppRegistry）
"""

from .lock import ReadWriteLock
from .matcher import Matcher
from .models import App
from ..logger import logger


class AppStore:
    """内存中的应用元数据数据库（所有操作线程安全）"""

    def __init__(self):
        self._lock = ReadWriteLock()
        self._apps: list[App] = []  # 条目不可变

    def insert(self, app: App) -> None:
        """追加一条已验证的记录"""
        with self._lock.write_locked():
            self._apps.append(app)
            count = len(self._apps)
        logger.debug(f"[Store:Insert] {app.title!r} {app.version!r} (total={count})")

    def search(self, matcher: Matcher) -> list[App]:
        """按插入顺序返回所有被 matcher 选中的记录（新的列表，与内部存储无关联）"""
        with self._lock.read_locked():
            return [app for app in self._apps if matcher(app)]

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._apps)
