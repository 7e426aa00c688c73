"""
Unit tests for parameter validation helpers.
"""
# 说明：ensure / ensure_type 参数校验工具的单元测试。
# 覆盖：
# - ensure：条件失败时抛出默认或自定义异常类型
# - ensure_type：类型检查、bool 与 int 的区分以及错误信息中的字段标签

import pytest

from datapattern.core.utils import ParamValidationError, ensure, ensure_type


def test_ensure_raises_on_false_condition() -> None:
    # 验证条件为真时无副作用，为假时抛出 ParamValidationError
    ensure(True, "unused")
    with pytest.raises(ParamValidationError, match="broken"):
        ensure(False, "broken")


def test_ensure_supports_custom_error() -> None:
    # 验证 error 参数可指定抛出的异常类型
    with pytest.raises(TypeError):
        ensure(False, "wrong type", error=TypeError)


def test_ensure_type_accepts_matching_types() -> None:
    # 验证匹配的类型与显式允许的 bool 均可通过检查
    ensure_type(3, (int,))
    ensure_type(True, (bool,))
    ensure_type(2.5, (int, float))


def test_ensure_type_rejects_bool_for_int() -> None:
    # 验证 bool 不会被当作 int 接受，错误信息包含字段标签
    with pytest.raises(ParamValidationError, match="size"):
        ensure_type(True, (int,), label="size")
    with pytest.raises(ParamValidationError):
        ensure_type("3", (int,))


def test_param_validation_error_is_value_error() -> None:
    # 验证 ParamValidationError 可以按 ValueError 捕获
    assert issubclass(ParamValidationError, ValueError)
