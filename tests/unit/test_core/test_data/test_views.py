"""
Unit tests for lazy partition views.
"""
# 说明：ObsView / BatchView 惰性划分视图的单元测试。
# 覆盖：
# - ObsView：窗口为单索引子集，支持负索引、切片与越界检查
# - BatchView：size / count 的推导规则、默认批大小与尾部丢弃
# - 参数校验：非正值、超出观测数、bool 以及不一致的组合
# - 视图本身实现访问协议（以窗口为观测单位）

import pytest

from datapattern import (
    BatchView,
    DataSubset,
    ObsView,
    ParamValidationError,
    batchview,
    getobs,
    nobs,
    obsview,
)


def test_obsview_windows(labels) -> None:
    # 验证 ObsView 长度等于观测数，每个窗口是单索引子集
    view = ObsView(labels)
    assert len(view) == 6
    window = view[1]
    assert isinstance(window, DataSubset)
    assert window.is_single
    assert window.getobs() == "b"
    assert view[-1].getobs() == "a"
    assert [w.getobs() for w in view[4:]] == ["b", "a"]
    with pytest.raises(IndexError):
        view[6]


def test_obsview_over_tuple(features, labels) -> None:
    # 验证元组容器上的 ObsView 窗口物化为 (特征, 标签) 元组
    view = obsview((features, labels))
    x, y = view[2].getobs()
    assert x.tolist() == [4, 5]
    assert y == "b"


def test_batchview_default_size() -> None:
    # 验证未给出 size / count 时批大小为 min(20, nobs)，不足一批的尾部被丢弃
    view = BatchView(range(50))
    assert view.batch_size == 20
    assert view.batch_count == 2
    assert len(view) == 2
    assert view[1].indices == range(20, 40)
    small = BatchView(range(7))
    assert (small.batch_size, small.batch_count) == (7, 1)


def test_batchview_size_and_count_derivation() -> None:
    # 验证只给出其一时推导另一个，同时给出时按给定值划分
    assert (BatchView(range(10), size=3).batch_count) == 3
    assert (BatchView(range(10), count=4).batch_size) == 2
    view = batchview(range(10), size=2, count=3)
    assert len(view) == 3
    assert [w.getobs() for w in view] == [[0, 1], [2, 3], [4, 5]]


@pytest.mark.parametrize(
    "size, count",
    [(0, None), (11, None), (None, 0), (None, 11), (4, 3), (True, None), (2.0, None)],
)
def test_batchview_rejects_invalid_settings(size, count) -> None:
    # 验证非法的批大小 / 批数量组合抛出 ParamValidationError
    with pytest.raises(ParamValidationError):
        BatchView(range(10), size=size, count=count)


def test_batchview_requires_observations() -> None:
    # 验证空容器无法划分批次
    with pytest.raises(ParamValidationError):
        BatchView([])


def test_views_implement_access_protocol(labels) -> None:
    # 验证视图以窗口为单位报告观测数并支持 getobs
    view = BatchView(labels, size=2)
    assert nobs(view) == 3
    assert getobs(view, 0) == ["a", "b"]
    assert getobs(view) == [["a", "b"], ["b", "b"], ["b", "a"]]
    assert getobs(ObsView(labels), [0, 5]) == ["a", "a"]


def test_batchview_over_subset_flattens(labels) -> None:
    # 验证子集上的批次窗口映射回根容器坐标
    subset = DataSubset(labels, [5, 4, 3, 0])
    view = BatchView(subset, size=2)
    assert view[1].data is labels
    assert view[1].indices == [3, 0]
    assert view[1].getobs() == ["b", "a"]
