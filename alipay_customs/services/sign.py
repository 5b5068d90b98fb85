"""
海关报关接口 MD5 签名生成与验证模块。

签名规则见 https://global.alipay.com/docs/ac/customs/signature_verfication
"""

import hashlib
from enum import Enum

# 不参与签名的保留字段
RESERVED_FIELDS = ("sign", "sign_type")


class SignType(str, Enum):
    """签名算法，目前仅支持 MD5。"""

    MD5 = "MD5"


class UnsupportedAlgorithmError(ValueError):
    """不支持的签名算法。"""
    pass


def _resolve_sign_type(sign_type) -> SignType:
    """将字符串或枚举转换为 SignType，不支持的算法直接抛出异常。"""
    try:
        return SignType(sign_type)
    except ValueError:
        raise UnsupportedAlgorithmError(f"不支持的签名算法: {sign_type}")


def _to_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def canonicalize(params: dict) -> str:
    """
    构造待签名字符串。

    1. 过滤 sign、sign_type 参数
    2. 参数值转为字符串后过滤空值
    3. 按参数名 ASCII 码从小到大排序
    4. 拼接 URL 键值对（参数值不 URL 编码）

    不修改传入的参数字典。
    """
    filtered = {}
    for k, v in params.items():
        k = str(k)
        if k in RESERVED_FIELDS:
            continue
        value = _to_str(v)
        if value != "":
            filtered[k] = value

    sorted_keys = sorted(filtered.keys())
    return "&".join(f"{k}={filtered[k]}" for k in sorted_keys)


def generate_sign(params: dict, key: str, sign_type=SignType.MD5) -> str:
    """
    生成签名：待签名字符串直接拼接密钥 KEY 后 MD5。

    返回小写 32 位十六进制签名字符串。

    Raises:
        UnsupportedAlgorithmError: sign_type 不是 MD5。
    """
    sign_type = _resolve_sign_type(sign_type)
    sign_str = canonicalize(params) + _to_str(key)

    if sign_type is SignType.MD5:
        return hashlib.md5(sign_str.encode("utf-8")).hexdigest()
    raise UnsupportedAlgorithmError(f"不支持的签名算法: {sign_type.value}")


def verify_sign(sign: str, params: dict, key: str, sign_type=SignType.MD5) -> bool:
    """验证签名是否正确（区分大小写）。"""
    expected = generate_sign(params, key, sign_type)
    return expected == sign
