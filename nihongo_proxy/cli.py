"""Nihongo Proxy 启动入口

监听地址、端口与日志级别默认取自环境变量（HOST、PORT、LOG_LEVEL），
命令行参数优先。
"""

import argparse
import sys

import uvicorn

from nihongo_proxy.config.settings import Config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="启动 Nihongo Proxy")
    parser.add_argument("--host", type=str, help="监听地址 (默认读取 HOST)")
    parser.add_argument("--port", type=int, help="监听端口 (默认读取 PORT)")
    parser.add_argument("--log-level", type=str, help="日志级别 (默认读取 LOG_LEVEL)")
    parser.add_argument("--workers", type=int, default=1, help="Uvicorn 工作进程数")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """主启动函数"""
    args = parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"❌ 配置无效: {e}")
        sys.exit(1)

    host = args.host or config.server.host
    port = args.port or config.server.port
    log_level = (args.log_level or config.logging.level).lower()

    print("🚀 启动 Nihongo Proxy Server...")
    print(f"   监听地址: {host}:{port}")
    print(f"   默认上游: {config.api_url}")
    print()
    print("📋 重要端点:")
    print(f"   健康检查: http://{host}:{port}/health")
    print(f"   文本分析: http://{host}:{port}/api/analyze")
    print(f"   日译中:   http://{host}:{port}/api/translate")
    print(f"   API文档:  http://{host}:{port}/docs")
    print()

    uvicorn.run(
        "nihongo_proxy.main:app",
        host=host,
        port=port,
        workers=args.workers,
        timeout_keep_alive=60,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
