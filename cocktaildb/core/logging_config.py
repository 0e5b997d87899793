"""
Structlog 日志配置模块

作为类库使用：get_logger() 返回的 logger 总是落到标准库 logging，
由宿主应用决定级别与输出；需要本库自带的输出格式时显式调用 configure_logging()。
"""
import logging
import json
import structlog
from structlog.processors import TimeStamper, add_log_level, JSONRenderer
from structlog.dev import ConsoleRenderer
from structlog.stdlib import ProcessorFormatter
from typing import Any, List

LIBRARY_LOGGER_NAME = "cocktaildb"

# structlog -> stdlib：事件名作为 msg，其余键值作为 extra
_LIBRARY_PROCESSORS: List[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.stdlib.render_to_log_kwargs,
]


def get_renderer(debug: bool = False) -> Any:
    """根据调试开关选择渲染器 (Console in debug, JSON otherwise).
    注意：structlog 会向 serializer 传入 default/sort_keys 等参数，需要适配。
    """
    if debug:
        return ConsoleRenderer(colors=False)

    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)
    return JSONRenderer(serializer=_dumps)


def configure_logging(debug: bool = False, stream: Any = None) -> logging.Handler:
    """为 cocktaildb logger 安装 structlog 渲染的 handler，并返回该 handler。"""
    shared_pre_chain: List[Any] = [
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(debug),
        ],
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    # 只接管本库的 logger，不动 root
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    lib_logger.handlers.clear()
    lib_logger.addHandler(handler)
    lib_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    lib_logger.propagate = False
    return handler


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """获取 structlog logger 实例。"""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_LIBRARY_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
