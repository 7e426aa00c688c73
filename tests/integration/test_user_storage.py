"""
Integration tests for user-defined storage types.
"""
# 说明：用户自定义存储类型与目标解析 / 平衡流程协作的集成测试。
# 覆盖：
# - 同时实现 DataContainer 与 TargetStorage 的存储：批量与单个目标访问
# - 观测自身实现 gettarget 的存储：非可调用参数由观测解释
# - 拒绝单索引 getobs 的元数据存储：仅依靠 gettargets 完成平衡
# - 用户存储与数组组成元组容器时的对齐校验

import numpy as np
import pytest

from datapattern import (
    DataSubset,
    DimensionMismatchError,
    ObsDimTriggeredError,
    eachtarget,
    labelfreq,
    labelmap,
    oversample,
    targets,
    undersample,
)
from fake_storage import CustomStorage, CustomType, MetaDataStorage


def test_custom_type_target_paths() -> None:
    # 验证整体、子集与逐观测三条路径分别调用存储的原生目标访问
    storage = CustomType()
    assert targets(storage) == "all targets"
    assert targets(DataSubset(storage, range(2, 5))) == "batch [2, 3, 4]"
    assert list(eachtarget(DataSubset(storage, [7, 9]))) == ["obs 7", "obs 9"]
    assert targets((np.zeros((100, 3)), storage), lambda v: v % 3)[:4] == [0, 1, 2, 0]


def test_custom_type_balancing_with_transform() -> None:
    # 验证用变换函数把观测映射为标签后平衡用户存储
    storage = CustomType()
    result = undersample(storage, lambda v: v < 10, rng=0)
    assert len(result.indices) == 20
    assert labelfreq(i < 10 for i in result.indices) == {True: 10, False: 10}


def test_observation_storage_with_parameter() -> None:
    # 验证非可调用参数沿着迭代器传递到观测的 gettarget
    storage = CustomStorage(["cat", "dog", "dog"])
    assert list(eachtarget(storage, "label=")) == ["label=cat", "label=dog", "label=dog"]
    result = oversample(storage, shuffle=False, rng=0)
    assert result.indices == [0, 1, 2, 0]
    assert targets(result) == ["cat", "dog", "dog", "cat"]


def test_metadata_storage_balancing() -> None:
    # 验证元数据存储无需物化观测即可完成欠采样，物化时才触发拒绝
    storage = MetaDataStorage(["a", "a", "b", "a", "b", "a"])
    result = undersample(storage, rng=0)
    assert labelmap(targets(result)).keys() == {"a", "b"}
    assert labelfreq(targets(result)) == {"a": 2, "b": 2}
    with pytest.raises(ObsDimTriggeredError):
        result.getobs()


def test_user_storage_alignment() -> None:
    # 验证用户存储与数组组成的元组在观测数不一致时立即报错
    with pytest.raises(DimensionMismatchError):
        targets((np.zeros((99, 1)), CustomType()))
    with pytest.raises(DimensionMismatchError):
        oversample((np.zeros((2, 1)), MetaDataStorage()))
