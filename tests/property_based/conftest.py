"""
Hypothesis configuration for the property-based tests.
"""
# 说明：属性测试的 Hypothesis 全局配置。
# 职责：
# - 注册并加载 datapattern 配置档：关闭单例耗时限制，统一示例数量
# - 共享策略见同目录下的 strategies.py

from hypothesis import HealthCheck, settings

settings.register_profile(
    "datapattern",
    max_examples=50,
    deadline=None,
    # 根目录的 autouse 配置恢复 fixture 为函数作用域，属性测试本身不修改全局配置
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("datapattern")
