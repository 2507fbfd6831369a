#!/usr/bin/env python3
"""
Nihongo Proxy 启动脚本

等价于安装后的 ``nihongo-proxy`` 命令。配置来自环境变量：
- API_KEY / GLM_API_KEY: 服务端密钥
- API_URL: 默认上游地址
- HOST / PORT / LOG_LEVEL: 服务器与日志设置
"""

from nihongo_proxy.cli import main

if __name__ == "__main__":
    main()
