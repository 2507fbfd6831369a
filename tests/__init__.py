"""
测试模块

包含项目的单元测试和集成测试。

测试结构:
- test_*.py: 单元测试
- integration/: 通过 FastAPI TestClient 的端到端测试
- fixtures.py: 模拟上游服务与测试数据

测试覆盖:
- 密钥与上游地址解析
- 模型注册表
- 代理函数的结果分类
- API端点、流式转发与错误处理
"""

from .fixtures import *

__all__ = [
    # 测试夹具将通过 fixtures 模块的 __all__ 自动导出
]
