"""
配置模型定义，供客户端引用。
使用 dataclass 保持轻量，构造后不可修改。
"""

import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

from alipay_customs.services.sign import SignType


class Environment(str, Enum):
    PRODUCTION = "production"
    TEST = "test"


BASE_URIS = {
    Environment.PRODUCTION: "https://intlmapi.alipay.com/gateway.do",
    Environment.TEST: "https://mapi.alipaydev.com/gateway.do",
}

# 环境变量名后缀 -> 配置字段
_ENV_FIELDS = {
    "PARTNER": "partner",
    "KEY": "key",
    "CUSTOMS_PLACE": "customs_place",
    "MERCHANT_CUSTOMS_CODE": "merchant_customs_code",
    "MERCHANT_CUSTOMS_NAME": "merchant_customs_name",
    "ENV": "environment",
    "SIGN_TYPE": "sign_type",
}


class ConfigError(ValueError):
    """客户端配置错误。"""
    pass


@dataclass(frozen=True)
class ClientConfig:
    partner: str
    key: str
    customs_place: str = ""
    merchant_customs_code: str = ""
    merchant_customs_name: str = ""
    environment: Environment = Environment.TEST
    sign_type: SignType = SignType.MD5

    def __post_init__(self):
        if not self.partner or not isinstance(self.partner, str):
            raise ConfigError("partner 不能为空")
        if not self.key or not isinstance(self.key, str):
            raise ConfigError("key 不能为空")

        # frozen dataclass 需通过 object.__setattr__ 规范化枚举字段
        try:
            object.__setattr__(self, "environment", Environment(self.environment))
        except ValueError:
            raise ConfigError(f"不支持的环境: {self.environment}")
        try:
            object.__setattr__(self, "sign_type", SignType(self.sign_type))
        except ValueError:
            raise ConfigError(f"不支持的签名算法: {self.sign_type}")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(partner={self.partner!r}, key='***', "
            f"environment={self.environment.value!r}, sign_type={self.sign_type.value!r})"
        )

    @property
    def base_uri(self) -> str:
        return BASE_URIS[self.environment]

    @classmethod
    def from_dict(cls, options: dict) -> "ClientConfig":
        """
        从字典构造配置，未识别的字段直接报错而不是静默忽略。

        Raises:
            ConfigError: 包含未知字段或字段值不合法。
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in options if k not in known)
        if unknown:
            raise ConfigError(f"未知的配置字段: {', '.join(unknown)}")
        try:
            return cls(**options)
        except TypeError as e:
            raise ConfigError(f"配置字段缺失: {e}")

    @classmethod
    def from_env(
        cls, prefix: str = "ALIPAY_CUSTOMS_", dotenv_path: Optional[str] = None
    ) -> "ClientConfig":
        """
        从环境变量读取配置，例如 ALIPAY_CUSTOMS_PARTNER、ALIPAY_CUSTOMS_KEY。

        Args:
            prefix: 环境变量名前缀。
            dotenv_path: 可选 .env 文件路径，先加载（不覆盖已有环境变量）。
        """
        if dotenv_path:
            load_dotenv(dotenv_path, override=False)

        options = {}
        for suffix, name in _ENV_FIELDS.items():
            value = os.getenv(prefix + suffix)
            if value:
                options[name] = value
        return cls.from_dict(options)
