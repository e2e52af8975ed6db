"""
运行期配置 - 读取 cemtext 运行参数 YAML

职责：
- 加载并发/排序/输出/日志等运行参数
- 提供环境变量覆盖机制（CEMTEXT_ 前缀，嵌套用 __）
- 类型安全的配置访问
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from ..models import OrderingMode


class ConcurrencyConfig(BaseModel):
    """并发配置"""

    parallel_sections: bool = True
    max_workers: int = Field(default=3, ge=1)


class RenderingConfig(BaseModel):
    """渲染配置"""

    ordering: OrderingMode = OrderingMode.NUMERIC


class OutputConfig(BaseModel):
    """输出配置"""

    encoding: str = "utf-8"
    newline: str = ""  # "" 表示不做换行转换


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"未知日志级别: {v}")
        return level


SECTION_KEYS = ("concurrency", "rendering", "output", "logging")


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    concurrency: ConcurrencyConfig = Field(default_factory=ConcurrencyConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "CEMTEXT_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 只传入YAML中出现的分段（普通dict），其余由环境变量/默认值补齐
        return cls(**{
            key: cls._extract(runtime_opts, key)
            for key in SECTION_KEYS
            if key in runtime_opts
        })

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: ...} 写法）"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


DEFAULT_CONFIG_PATH = Path("cemtext.yaml")

# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
