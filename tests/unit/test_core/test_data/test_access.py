"""
Unit tests for the observation access protocol.
"""
# 说明：nobs / getobs 分派入口与能力协议（Protocol）的单元测试。
# 覆盖：
# - nobs：ndarray（不同观测轴）、序列、对齐元组、用户容器与不支持的值
# - getobs：整数 / 切片 / 整数序列 / 布尔掩码索引，以及元组逐元素取值
# - 对齐不变式：元组元素观测数不一致或描述符元数不匹配时抛出 DimensionMismatchError
# - DataContainer / TargetStorage / TargetObservation 的鸭子类型识别

import numpy as np
import pytest

from datapattern import (
    DataContainer,
    DimensionMismatchError,
    ParamValidationError,
    TargetObservation,
    TargetStorage,
    UnsupportedShapeError,
    getobs,
    nobs,
)
from fake_storage import CustomObs, CustomStorage, CustomType, MetaDataStorage


def test_nobs_of_arrays_respects_obsdim() -> None:
    # 验证 ndarray 的观测数量随观测轴变化
    X = np.zeros((3, 4, 5))
    assert nobs(X) == 3
    assert nobs(X, obsdim="first") == 3
    assert nobs(X, obsdim="last") == 5
    assert nobs(X, obsdim=1) == 4
    assert nobs(X, obsdim=-2) == 4
    with pytest.raises(DimensionMismatchError):
        nobs(X, obsdim=3)


def test_nobs_of_sequences() -> None:
    # 验证列表与 range 按长度计数，一维序列只接受第 0 / -1 轴
    assert nobs([1, 2, 3]) == 3
    assert nobs(range(7)) == 7
    assert nobs([], obsdim="last") == 0
    with pytest.raises(DimensionMismatchError):
        nobs([1, 2], obsdim=1)


def test_nobs_of_aligned_tuple() -> None:
    # 验证元组容器返回共同的观测数，且每个元素使用各自的描述符
    X = np.zeros((4, 3))
    y = ["a", "b", "c"]
    assert nobs((X, y), obsdim=("last", "first")) == 3
    assert nobs((np.zeros((3, 2)), y)) == 3


def test_nobs_misaligned_tuple_names_counts() -> None:
    # 验证元组元素观测数不一致时报错，并在异常中给出各元素的数量
    with pytest.raises(DimensionMismatchError) as excinfo:
        nobs((np.zeros((4, 2)), ["a", "b", "c"]))
    assert excinfo.value.counts == (4, 3)
    assert "[4, 3]" in str(excinfo.value)


def test_nobs_obsdim_arity_mismatch() -> None:
    # 验证描述符元组长度与元组容器元数不一致、或非元组数据配描述符元组时报错
    with pytest.raises(DimensionMismatchError):
        nobs((np.zeros((3, 2)), [1, 2, 3]), obsdim=("first",))
    with pytest.raises(DimensionMismatchError):
        nobs([1, 2, 3], obsdim=("first", "first"))


def test_nobs_user_container() -> None:
    # 验证实现 nobs 能力的用户类型直接由其自身报告数量
    assert nobs(CustomType()) == 100
    assert nobs(MetaDataStorage()) == 3


@pytest.mark.parametrize("value", [5, 1.5, "abc", b"xy", None, np.array(3.0), ()])
def test_nobs_rejects_non_containers(value) -> None:
    # 验证标量、字符串、0 维数组与空元组不是观测容器
    with pytest.raises(UnsupportedShapeError):
        nobs(value)


def test_getobs_array_indexing() -> None:
    # 验证整数索引返回视图，整数序列与布尔掩码返回新数组，obsdim 控制取值轴
    X = np.arange(12).reshape(3, 4)
    row = getobs(X, 1)
    assert row.tolist() == [4, 5, 6, 7]
    assert np.shares_memory(row, X)
    assert getobs(X, [2, 0]).tolist() == [[8, 9, 10, 11], [0, 1, 2, 3]]
    assert getobs(X, np.array([True, False, True])).tolist() == [[0, 1, 2, 3], [8, 9, 10, 11]]
    assert getobs(X, 1, obsdim="last").tolist() == [1, 5, 9]
    assert getobs(X, range(0, 2), obsdim="last").tolist() == [[0, 1], [4, 5], [8, 9]]
    assert getobs(X) is X


def test_getobs_sequence_indexing() -> None:
    # 验证序列按整数、切片与整数序列取值
    y = ["a", "b", "c", "d"]
    assert getobs(y, 2) == "c"
    assert getobs(y, slice(1, 3)) == ["b", "c"]
    assert getobs(y, [3, 0]) == ["d", "a"]
    assert getobs(y, np.array([1, 1])) == ["b", "b"]
    assert getobs(y) is y


def test_getobs_tuple_maps_elementwise() -> None:
    # 验证元组容器逐元素取值并返回元组
    X = np.arange(6).reshape(3, 2)
    y = ["a", "b", "c"]
    x0, y0 = getobs((X, y), 0)
    assert x0.tolist() == [0, 1]
    assert y0 == "a"
    xs, ys = getobs((X, y), [2, 1])
    assert xs.tolist() == [[4, 5], [2, 3]]
    assert ys == ["c", "b"]


def test_getobs_user_container() -> None:
    # 验证用户容器收到规范化后的索引（None 与切片展开为 range）
    assert getobs(CustomType(), 3) == 3
    assert getobs(CustomType(), slice(0, 3)) == [0, 1, 2]
    assert getobs(CustomType()) == list(range(100))


def test_getobs_rejects_invalid_indices() -> None:
    # 验证布尔标量、浮点索引与非整数元素的索引序列被拒绝
    with pytest.raises(ParamValidationError):
        getobs([1, 2], True)
    with pytest.raises(ParamValidationError):
        getobs([1, 2], 0.5)
    with pytest.raises(ParamValidationError):
        getobs([1, 2], [0, "1"])


def test_capability_protocols_are_duck_typed() -> None:
    # 验证能力协议通过方法存在性识别，无需继承
    assert isinstance(CustomType(), DataContainer)
    assert isinstance(CustomType(), TargetStorage)
    assert isinstance(CustomStorage(), DataContainer)
    assert not isinstance(CustomStorage(), TargetStorage)
    assert isinstance(CustomObs("x"), TargetObservation)
    assert not isinstance([1, 2], DataContainer)
