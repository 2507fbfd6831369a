"""Loguru日志配置"""

import sys
import traceback
import uuid
from pathlib import Path

from loguru import logger

REQUEST_ID_HEADER = "X-Request-ID"


def format_exception_truncated(record) -> str:
    """格式化异常信息，截取前1000个字符"""
    if record["exception"]:
        exc_text = "".join(traceback.format_exception(*record["exception"]))
        if len(exc_text) > 1000:
            return exc_text[:1000] + "..."
        return exc_text
    return ""


def _ensure_request_id(record) -> bool:
    record["extra"].setdefault("request_id", "---")
    return True


def configure_logging(log_config) -> None:
    """配置Loguru日志系统

    Args:
        log_config: 日志配置对象 (LoggingConfig)
    """
    # 移除默认的handler
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
        "<cyan>{extra[request_id]}</cyan> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stdout,
        format=console_format,
        level=log_config.level,
        colorize=True,
        filter=_ensure_request_id,
    )

    if log_config.file:
        log_path = Path(log_config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        def file_format(record) -> str:
            exc_info = format_exception_truncated(record).replace("{", "{{").replace("}", "}}")
            message = record["message"].replace("{", "{{").replace("}", "}}")
            return (
                f"{record['time'].strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]} | "
                f"{record['level'].name:<8} | {record['extra'].get('request_id', '---')} | "
                f"{record['name']}:{record['line']} | {message} | {exc_info}\n"
            )

        logger.add(
            str(log_path),
            format=file_format,
            level=log_config.level,
            rotation="10 MB",
            retention="1 day",
            encoding="utf-8",
            filter=_ensure_request_id,
        )

    def exception_handler(exc_type, exc_value, exc_traceback):
        """全局异常处理器"""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical(
            "未捕获的异常"
        )

    sys.excepthook = exception_handler


def generate_request_id() -> str:
    """生成唯一的请求ID

    Returns:
        str: 格式为 req_xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx 的请求ID
    """
    return f"req_{uuid.uuid4()}"


def get_request_id_from_request(request) -> str | None:
    """从请求对象中安全地获取请求ID"""
    try:
        return getattr(request.state, "request_id", None)
    except AttributeError:
        return None


def get_logger_with_request_id(request_id: str | None = None):
    """获取绑定了请求ID的日志器实例"""
    return logger.bind(request_id=request_id or "---")


def preview_secret(secret: str | None, visible: int = 10) -> str:
    """生成可安全写入日志的密钥预览

    只保留前 ``visible`` 个字符并追加省略号，未设置时返回 ``none``。
    """
    if not secret:
        return "none"
    return f"{secret[:visible]}..."
