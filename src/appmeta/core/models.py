"""应用元数据模型"""

from dataclasses import dataclass, field

from .validators import (
    ValidationErrors,
    validate_email,
    validate_non_empty,
    validate_url,
)


@dataclass(frozen=True)
class Maintainer:
    """应用维护者"""

    name: str = ""
    email: str = ""

    def validate(self, errs: ValidationErrors) -> None:
        validate_non_empty(errs, "maintainer.name", self.name)
        validate_email(errs, "maintainer.email", self.email)


@dataclass(frozen=True)
class App:
    """应用元数据记录（不可变，存入 Store 后不会再被修改）

    maintainers 在构造时统一转换为 tuple，调用方拿到的记录无法修改其中的维护者列表。
    """

    title: str = ""
    version: str = ""
    maintainers: tuple[Maintainer, ...] = field(default_factory=tuple)
    company: str = ""
    website: str = ""
    source: str = ""
    license: str = ""
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.maintainers, tuple):
            object.__setattr__(self, "maintainers", tuple(self.maintainers))

    def validate(self, errs: ValidationErrors) -> None:
        """依次检查各字段，最后检查维护者列表，错误追加到 errs 中"""
        validate_non_empty(errs, "app.title", self.title)
        validate_non_empty(errs, "app.version", self.version)
        validate_non_empty(errs, "app.company", self.company)
        validate_url(errs, "app.website", self.website)
        validate_url(errs, "app.source", self.source)
        validate_non_empty(errs, "app.license", self.license)
        validate_non_empty(errs, "app.description", self.description)
        self._validate_maintainers(errs)

    def _validate_maintainers(self, errs: ValidationErrors) -> None:
        if not self.maintainers:
            errs.append("app.maintainers", "At least one maintainer must be specified")

        for maintainer in self.maintainers:
            maintainer.validate(errs)

    def to_dict(self) -> dict:
        """转换为可序列化的字典（键顺序与字段声明顺序一致）"""
        return {
            "title": self.title,
            "version": self.version,
            "maintainers": [
                {"name": m.name, "email": m.email} for m in self.maintainers
            ],
            "company": self.company,
            "website": self.website,
            "source": self.source,
            "license": self.license,
            "description": self.description,
        }

