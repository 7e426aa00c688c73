"""
Unit tests for runtime configuration utilities.
"""
# 说明：RuntimeConfig（运行时配置）及全局配置访问辅助函数的单元测试。
# 覆盖：
# - configure(...)：通过关键字参数更新全局配置实例字段，未知字段报错
# - RuntimeConfig.load_from_env(...)：从环境变量加载并覆写配置选项
# - get_config()：返回全局 RuntimeConfig 单例并保持状态一致性
# - default_obsdim / strict_validation：配置项对访问层行为的影响

from dataclasses import fields

import numpy as np
import pytest

from datapattern import DataSubset, ParamValidationError, nobs
from datapattern.core.utils import RuntimeConfig, configure, get_config


def test_configure_updates_values() -> None:
    # 验证 configure(...) 能正确更新全局配置的字段值
    cfg = configure(strict_validation=False, rng_seed=5)
    assert cfg.strict_validation is False
    assert cfg.rng_seed == 5


def test_configure_rejects_unknown_option() -> None:
    # 验证未知配置键触发 AttributeError，而不是被静默忽略
    with pytest.raises(AttributeError):
        configure(default_dtype="float32")


def test_runtime_config_has_only_consumed_options() -> None:
    # 验证配置项集合固定，不提供无人读取的自由扩展字段
    names = [f.name for f in fields(RuntimeConfig)]
    assert names == ["strict_validation", "default_obsdim", "log_level", "rng_seed"]
    with pytest.raises(AttributeError):
        configure(extra={"k": 1})


def test_runtime_config_env_override(monkeypatch) -> None:
    # 验证 RuntimeConfig.load_from_env(...) 按环境变量覆写默认配置并完成类型转换
    cfg = RuntimeConfig()
    monkeypatch.setenv("DATAPATTERN_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATAPATTERN_STRICT_VALIDATION", "no")
    monkeypatch.setenv("DATAPATTERN_RNG_SEED", "7")
    monkeypatch.setenv("DATAPATTERN_DEFAULT_OBSDIM", "LAST")
    cfg.load_from_env()
    assert cfg.log_level == "DEBUG"
    assert cfg.strict_validation is False
    assert cfg.rng_seed == 7
    assert cfg.default_obsdim == "last"


def test_get_config_returns_singleton() -> None:
    # 验证 get_config() 每次返回的是同一全局实例（单例行为）
    cfg = get_config()
    cfg.strict_validation = True
    assert get_config() is cfg
    assert get_config().strict_validation is True


def test_default_obsdim_applies_to_arrays() -> None:
    # 验证 default_obsdim 配置决定 ndarray 在未显式给出 obsdim 时的观测轴
    X = np.zeros((2, 5))
    assert nobs(X) == 2
    configure(default_obsdim="last")
    assert nobs(X) == 5
    # 序列不受该配置影响
    assert nobs([1, 2, 3]) == 3


def test_strict_validation_controls_subset_bounds() -> None:
    # 验证 strict_validation 开启时子集索引越界立即报错，关闭时跳过检查
    with pytest.raises(ParamValidationError):
        DataSubset([1, 2, 3], [5])
    configure(strict_validation=False)
    subset = DataSubset([1, 2, 3], [5])
    assert subset.indices == [5]
