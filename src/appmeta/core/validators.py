"""字段验证函数 - 数据验证层

每个检查只负责一个字段，失败时把错误追加到共享的 ValidationErrors 中，
不会在第一个错误处中断，一次请求可以拿到全部问题。
"""

import re
from dataclasses import dataclass
from email.errors import HeaderParseError, NonASCIILocalPartDefect
from email.headerregistry import Address, HeaderRegistry

from yarl import URL

from ..logger import logger

_header_factory = HeaderRegistry()

# reg-name 与 IP 字面量允许的字符
_HOST_CHARS = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=%:\[\]]*")

# `%` 后必须跟两位十六进制数字
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")


@dataclass(frozen=True)
class FailureHint:
    """带建议的错误类型"""

    message: str
    suggestion: str | None = None


class ValidationErrors:
    """验证过程中收集到的错误集合（保持检查顺序）"""

    def __init__(self):
        self._messages: list[str] = []

    def append(self, field_name: str, error_msg: str) -> None:
        """追加一个错误，格式为 `字段名: 错误信息`"""
        self._messages.append(f"{field_name}: {error_msg}")

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def error(self) -> str:
        """把所有错误拼接为一条消息（每个错误一行，末尾带换行）"""
        return "".join(f"{msg}\n" for msg in self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __iter__(self):
        return iter(self._messages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidationErrors):
            return self._messages == other._messages
        return NotImplemented

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"ValidationErrors({self._messages!r})"


def validate_non_empty(errs: ValidationErrors, field_name: str, value: str) -> None:
    """验证字符串非空"""
    if len(value) == 0:
        errs.append(field_name, "Missing required field")


def validate_url(errs: ValidationErrors, field_name: str, value: str) -> None:
    """验证字符串能被解析为 URL

    解析是宽松的：相对路径等也能通过，只有结构上无法解析的输入
    （控制字符、主机名含非法字符、非法端口等）才会被拒绝。
    """
    if value == "":
        errs.append(field_name, "URL cannot be empty")
        return

    if parse_url(value) is None:
        logger.debug(f"[Validate:URL] Rejected {field_name}: {value!r}")
        errs.append(field_name, "Invalid URL")


def validate_email(errs: ValidationErrors, field_name: str, value: str) -> None:
    """验证字符串是合法的邮箱地址（RFC 5322，单个 mailbox）"""
    if value == "":
        errs.append(field_name, "Email address cannot be empty")
        return

    if parse_mailbox(value) is None:
        logger.debug(f"[Validate:Email] Rejected {field_name}: {value!r}")
        errs.append(field_name, "Invalid email address")


def parse_url(value: str) -> URL | None:
    """解析 URL，失败返回 None"""
    # 控制字符在任何位置都不合法
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in value):
        return None

    if _BAD_ESCAPE.search(value):
        return None

    # 没有 scheme 时，第一个路径段不能包含冒号（`:foo`、`1:foo`）
    if not _SCHEME.match(value) and ":" in re.split(r"[/?#]", value, maxsplit=1)[0]:
        return None

    try:
        url = URL(value)
    except ValueError:
        return None

    if url.raw_host is not None and not _HOST_CHARS.fullmatch(url.raw_host):
        return None

    return url


def parse_mailbox(value: str) -> Address | None:
    """解析单个 mailbox（可带显示名），失败返回 None"""
    try:
        header = _header_factory("to", value)
    except (HeaderParseError, IndexError, ValueError):
        return None

    # RFC 6532 允许 UTF-8 本地部分
    defects = [d for d in header.defects if not isinstance(d, NonASCIILocalPartDefect)]
    if defects or len(header.groups) != 1:
        return None

    group = header.groups[0]
    # 地址组（`group: a@b;`）不是单个 mailbox
    if group.display_name is not None or len(group.addresses) != 1:
        return None

    address = group.addresses[0]
    if not address.username or not address.domain:
        return None

    return address
