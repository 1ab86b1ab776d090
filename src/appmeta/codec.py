"""YAML 编解码 - 请求体与 App 记录之间的转换"""

from collections.abc import Iterable

import yaml
from rusty_results.prelude import Err, Ok, Result

from .core.models import App, Maintainer
from .core.validators import FailureHint
from .logger import logger

_APP_FIELDS = ("title", "version", "company", "website", "source", "license", "description")
_MAINTAINER_FIELDS = ("name", "email")


class _ShapeError(ValueError):
    """文档结构与记录结构不一致"""


def decode_app(body: bytes | str) -> Result[App, FailureHint]:
    """把请求体解码为候选 App（不做验证）

    - 只处理第一个 YAML 文档，后续文档被忽略
    - 所有标量都按字符串读取（不做隐式类型转换，`1.10` 仍是 "1.10"）
    - 未知字段被忽略，缺失字段为空字符串 / 空维护者列表
    """
    try:
        documents = yaml.load_all(body, Loader=yaml.BaseLoader)
        document = next(documents, None)
    except (yaml.YAMLError, RecursionError) as e:
        # 嵌套过深的文档会耗尽 PyYAML 的递归深度
        logger.debug(f"[Codec:Decode] Parse error: {e}")
        return Err(FailureHint("invalid YAML"))

    if document is None:
        return Err(FailureHint("invalid YAML", suggestion="请求体为空"))

    try:
        return Ok(_app_from_node(document))
    except _ShapeError as e:
        logger.debug(f"[Codec:Decode] Shape error: {e}")
        return Err(FailureHint("invalid YAML"))


def encode_apps(apps: Iterable[App]) -> str:
    """把记录编码为 YAML 文档流（每条记录一个文档）"""
    return yaml.safe_dump_all(
        [app.to_dict() for app in apps],
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def _is_empty(node) -> bool:
    return node is None or node == ""


def _string(node, field_name: str) -> str:
    if _is_empty(node):
        return ""
    if not isinstance(node, str):
        raise _ShapeError(f"{field_name}: expected a string")
    return node


def _mapping(node, field_name: str) -> dict:
    if _is_empty(node):
        return {}
    if not isinstance(node, dict):
        raise _ShapeError(f"{field_name}: expected a mapping")
    return node


def _maintainer_from_node(node) -> Maintainer:
    data = _mapping(node, "maintainer")
    return Maintainer(
        **{name: _string(data.get(name), f"maintainer.{name}") for name in _MAINTAINER_FIELDS}
    )


def _app_from_node(node) -> App:
    data = _mapping(node, "app")

    maintainers = data.get("maintainers")
    if _is_empty(maintainers):
        maintainers = []
    elif not isinstance(maintainers, list):
        raise _ShapeError("app.maintainers: expected a sequence")

    return App(
        maintainers=tuple(_maintainer_from_node(m) for m in maintainers),
        **{name: _string(data.get(name), f"app.{name}") for name in _APP_FIELDS},
    )
