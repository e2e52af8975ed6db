"""
配置层 - 加载布局文件与运行期配置

职责：
- 加载布局 YAML（表头/明细/表尾字段 + 分段选项）
- 加载运行期参数（并发/排序/输出/日志）
- 提供类型安全的配置访问接口
"""

from .layout_loader import LayoutLoader, LayoutSpec, load_layout
from .runtime_config import RuntimeConfig, get_config, reload_config

__all__ = [
    "LayoutLoader",
    "LayoutSpec",
    "load_layout",
    "RuntimeConfig",
    "get_config",
    "reload_config",
]
