"""测试 validators 模块的验证函数"""

import pytest

from appmeta.core.validators import (
    ValidationErrors,
    parse_mailbox,
    validate_email,
    validate_non_empty,
    validate_url,
)


class TestValidationErrors:
    """测试错误集合"""

    def test_empty_is_falsy(self):
        errs = ValidationErrors()
        assert not errs
        assert len(errs) == 0
        assert errs.error() == ""

    def test_append_keeps_order(self):
        errs = ValidationErrors()
        errs.append("b", "second")
        errs.append("a", "first")
        assert errs
        assert errs.messages == ["b: second", "a: first"]

    def test_error_one_message_per_line(self):
        errs = ValidationErrors()
        errs.append("app.title", "Missing required field")
        errs.append("maintainer.email", "Invalid email address")
        assert errs.error() == (
            "app.title: Missing required field\n"
            "maintainer.email: Invalid email address\n"
        )
        assert str(errs) == errs.error()

    def test_messages_is_a_copy(self):
        errs = ValidationErrors()
        errs.append("field", "msg")
        errs.messages.append("other: msg")
        assert len(errs) == 1


class TestValidateNonEmpty:
    """测试非空验证"""

    def test_non_empty_passes(self):
        errs = ValidationErrors()
        validate_non_empty(errs, "app.title", "title")
        assert not errs

    def test_empty_fails(self):
        errs = ValidationErrors()
        validate_non_empty(errs, "app.title", "")
        assert errs.messages == ["app.title: Missing required field"]

    def test_whitespace_counts_as_non_empty(self):
        errs = ValidationErrors()
        validate_non_empty(errs, "app.title", " ")
        assert not errs


class TestValidateURL:
    """测试 URL 验证（宽松解析）"""

    @pytest.mark.parametrize("value", [
        "http://example.com",
        "https://git.example.com/repo",
        "https://example.com/über?q=1#frag",
        "relative/path",
        "example.com",
        "mailto:someone@example.com",
    ])
    def test_valid(self, value):
        errs = ValidationErrors()
        validate_url(errs, "app.website", value)
        assert not errs

    def test_empty(self):
        errs = ValidationErrors()
        validate_url(errs, "app.website", "")
        assert errs.messages == ["app.website: URL cannot be empty"]

    @pytest.mark.parametrize("value", [
        "http://    invalid url",
        "http://example.com/\x00",
        "http://exa\nmple.com",
        "http://[::1",
        "http://example.com/%zz",
        "http://%zz/",
        "http://example.com/100%",
        ":foo",
        "1:foo",
    ])
    def test_invalid(self, value):
        errs = ValidationErrors()
        validate_url(errs, "app.website", value)
        assert errs.messages == ["app.website: Invalid URL"]


class TestValidateEmail:
    """测试邮箱验证（RFC 5322 单个 mailbox）"""

    @pytest.mark.parametrize("value", [
        "name@example.com",
        "first.last@sub.example.org",
        "Name Surname <name@example.com>",
        "<name@example.com>",
        "jürgen@example.com",
        "用户@例子.广告",
    ])
    def test_valid(self, value):
        errs = ValidationErrors()
        validate_email(errs, "maintainer.email", value)
        assert not errs

    def test_empty(self):
        errs = ValidationErrors()
        validate_email(errs, "maintainer.email", "")
        assert errs.messages == ["maintainer.email: Email address cannot be empty"]

    @pytest.mark.parametrize("value", [
        "invalid.com",
        "apptwohotmail.com",
        "one@example.com, two@example.com",
        "team: one@example.com;",
    ])
    def test_invalid(self, value):
        errs = ValidationErrors()
        validate_email(errs, "maintainer.email", value)
        assert errs.messages == ["maintainer.email: Invalid email address"]

    def test_parse_mailbox_parts(self):
        address = parse_mailbox("Name Surname <name@example.com>")
        assert address is not None
        assert address.display_name == "Name Surname"
        assert address.username == "name"
        assert address.domain == "example.com"
